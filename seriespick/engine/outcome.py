"""
Prediction outcome classification.

Combines a series' progression with the user's predicted final score and
the actual score. Never raises: malformed predictions are graded
TOTALLY_INCORRECT, missing ones NO_PREDICTION_MADE.
"""

import logging

from seriespick.constants import NO_PREDICTION
from seriespick.engine.resolver import resolve_winner_loser
from seriespick.engine.score import ScoreInput, parse_score
from seriespick.engine.types import PredictionOutcome, SeriesProgression, Side

logger = logging.getLogger(__name__)


def _is_no_prediction(predicted: ScoreInput, no_prediction: str) -> bool:
    if predicted is None:
        return True
    return isinstance(predicted, str) and predicted.strip() in ("", no_prediction)


def classify_outcome(
    progression: SeriesProgression,
    predicted_score: ScoreInput,
    actual_high_seed_wins: int,
    actual_low_seed_wins: int,
    high_seed_name: str,
    low_seed_name: str,
    no_prediction: str = NO_PREDICTION,
) -> PredictionOutcome:
    """
    Grade a prediction against the series.

    Args:
        progression: Output of classify_progression for the same series
        predicted_score: "N-M" string (high seed first), score pair, the
            no-prediction sentinel, or None
        actual_high_seed_wins: Current high seed wins
        actual_low_seed_wins: Current low seed wins
        high_seed_name: High seed identity
        low_seed_name: Low seed identity
        no_prediction: Sentinel string meaning no pick was made

    Returns:
        PredictionOutcome. Correctness outcomes only once FINISHED.
    """
    if progression is SeriesProgression.NOT_STARTED:
        return PredictionOutcome.NOT_STARTED
    if progression is SeriesProgression.IN_PROGRESS:
        return PredictionOutcome.IN_PROGRESS

    if _is_no_prediction(predicted_score, no_prediction):
        return PredictionOutcome.NO_PREDICTION_MADE

    predicted = parse_score(predicted_score)
    if predicted is None:
        logger.debug("Unparseable prediction %r graded as incorrect", predicted_score)
        return PredictionOutcome.TOTALLY_INCORRECT

    predicted_result = resolve_winner_loser(
        Side(high_seed_name, predicted.high_seed_wins),
        Side(low_seed_name, predicted.low_seed_wins),
    )
    actual_result = resolve_winner_loser(
        Side(high_seed_name, actual_high_seed_wins),
        Side(low_seed_name, actual_low_seed_wins),
    )
    if predicted_result is None or actual_result is None:
        logger.debug("Undecided prediction %r graded as incorrect", predicted_score)
        return PredictionOutcome.TOTALLY_INCORRECT

    # A wrong winner is incorrect whatever the series length
    if predicted_result.winner.name != actual_result.winner.name:
        return PredictionOutcome.TOTALLY_INCORRECT
    if predicted_result.total_games == actual_result.total_games:
        return PredictionOutcome.EXACTLY_CORRECT
    return PredictionOutcome.WINNER_ONLY_CORRECT
