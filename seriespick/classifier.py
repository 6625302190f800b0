"""Config-bound entry point over the classification engine."""

import logging
from datetime import datetime
from typing import Optional

from seriespick.config import DEFAULT_CONFIG, SeriesConfig
from seriespick.engine.outcome import classify_outcome
from seriespick.engine.progression import can_submit_prediction, classify_progression
from seriespick.engine.score import ScoreInput
from seriespick.engine.types import (
    PredictionOutcome,
    SeriesEvaluation,
    SeriesProgression,
    SeriesSnapshot,
)

logger = logging.getLogger(__name__)


def outcome_points(outcome: PredictionOutcome, config: SeriesConfig = DEFAULT_CONFIG) -> int:
    """Points a single prediction earns for its outcome."""
    return config.points_for(outcome)


class PredictionClassifier:
    """
    Classify series and grade predictions for one series format.

    Example:
        classifier = PredictionClassifier(SeriesConfig(wins_required=4))
        result = classifier.evaluate(snapshot, "4-2")
        result.outcome  # PredictionOutcome.EXACTLY_CORRECT
    """

    def __init__(self, config: Optional[SeriesConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def progression(
        self,
        high_seed_wins: int,
        low_seed_wins: int,
        schedule_marker: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> SeriesProgression:
        return classify_progression(
            high_seed_wins,
            low_seed_wins,
            schedule_marker=schedule_marker,
            now=now,
            wins_required=self.config.wins_required,
        )

    def outcome(
        self,
        progression: SeriesProgression,
        predicted_score: ScoreInput,
        actual_high_seed_wins: int,
        actual_low_seed_wins: int,
        high_seed_name: str,
        low_seed_name: str,
    ) -> PredictionOutcome:
        return classify_outcome(
            progression,
            predicted_score,
            actual_high_seed_wins,
            actual_low_seed_wins,
            high_seed_name,
            low_seed_name,
            no_prediction=self.config.no_prediction,
        )

    def evaluate(
        self,
        snapshot: SeriesSnapshot,
        predicted_score: ScoreInput = None,
        now: Optional[datetime] = None,
    ) -> SeriesEvaluation:
        """Progression, outcome, points and write permission for one series."""
        progression = self.progression(
            snapshot.high_seed_wins,
            snapshot.low_seed_wins,
            schedule_marker=snapshot.next_game_time,
            now=now,
        )
        outcome = self.outcome(
            progression,
            predicted_score,
            snapshot.high_seed_wins,
            snapshot.low_seed_wins,
            snapshot.high_seed_name,
            snapshot.low_seed_name,
        )
        logger.debug(
            "Series %s %d-%d: %s, prediction %r -> %s",
            snapshot.slug or f"{snapshot.high_seed_name} v {snapshot.low_seed_name}",
            snapshot.high_seed_wins,
            snapshot.low_seed_wins,
            progression.value,
            predicted_score,
            outcome.value,
        )
        return SeriesEvaluation(
            progression=progression,
            outcome=outcome,
            points=outcome_points(outcome, self.config),
            editable=can_submit_prediction(progression),
        )
