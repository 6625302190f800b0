"""Pure classification engine for series predictions."""

from seriespick.engine.types import (
    PredictionOutcome,
    SeriesEvaluation,
    SeriesProgression,
    SeriesScore,
    SeriesSnapshot,
    SeriesWinner,
    Side,
    WinnerLoser,
)
from seriespick.engine.score import parse_score, format_score
from seriespick.engine.resolver import resolve_winner_loser, series_winner
from seriespick.engine.progression import (
    can_submit_prediction,
    classify_progression,
    parse_schedule_marker,
)
from seriespick.engine.outcome import classify_outcome

__all__ = [
    "PredictionOutcome",
    "SeriesEvaluation",
    "SeriesProgression",
    "SeriesScore",
    "SeriesSnapshot",
    "SeriesWinner",
    "Side",
    "WinnerLoser",
    "parse_score",
    "format_score",
    "resolve_winner_loser",
    "series_winner",
    "can_submit_prediction",
    "classify_progression",
    "parse_schedule_marker",
    "classify_outcome",
]
