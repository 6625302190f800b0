"""Shared value types for series classification."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional


class SeriesProgression(Enum):
    """Temporal/result state of a series."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class PredictionOutcome(Enum):
    """Correctness classification of a prediction against a series."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    NO_PREDICTION_MADE = "no_prediction_made"
    WINNER_ONLY_CORRECT = "winner_only_correct"
    LENGTH_ONLY_CORRECT = "length_only_correct"
    TOTALLY_INCORRECT = "totally_incorrect"
    EXACTLY_CORRECT = "exactly_correct"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_OUTCOMES


_TERMINAL_OUTCOMES = frozenset({
    PredictionOutcome.WINNER_ONLY_CORRECT,
    PredictionOutcome.LENGTH_ONLY_CORRECT,
    PredictionOutcome.TOTALLY_INCORRECT,
    PredictionOutcome.EXACTLY_CORRECT,
})


class SeriesWinner(Enum):
    """Which seed clinched the series, if any."""
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    UNKNOWN = "UNKNOWN"


class SeriesScore(NamedTuple):
    """Win counts as (high seed, low seed)."""
    high_seed_wins: int
    low_seed_wins: int

    @property
    def total_games(self) -> int:
        return self.high_seed_wins + self.low_seed_wins


class Side(NamedTuple):
    """One named side of a series with its win count."""
    name: str
    wins: int


class WinnerLoser(NamedTuple):
    winner: Side
    loser: Side

    @property
    def total_games(self) -> int:
        return self.winner.wins + self.loser.wins


@dataclass(frozen=True)
class SeriesSnapshot:
    """Caller-supplied view of one series at a point in time."""
    high_seed_name: str
    high_seed_wins: int
    low_seed_name: str
    low_seed_wins: int
    next_game_time: Optional[datetime] = None
    slug: str = ""

    @property
    def score(self) -> SeriesScore:
        return SeriesScore(self.high_seed_wins, self.low_seed_wins)


@dataclass(frozen=True)
class SeriesEvaluation:
    progression: SeriesProgression
    outcome: PredictionOutcome
    points: int
    editable: bool

    def to_dict(self) -> dict:
        return {
            "progression": self.progression.value,
            "outcome": self.outcome.value,
            "points": self.points,
            "editable": self.editable,
        }
