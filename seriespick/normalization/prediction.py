"""Inbound checks applied before a prediction is stored."""

from typing import Optional

from seriespick.config import DEFAULT_CONFIG, SeriesConfig
from seriespick.engine.progression import can_submit_prediction
from seriespick.engine.types import SeriesProgression
from seriespick.exceptions import InvalidPredictionError, PredictionLockedError


def validate_prediction(raw: Optional[str], config: SeriesConfig = DEFAULT_CONFIG) -> str:
    """
    Return the canonical prediction string or raise InvalidPredictionError.

    None and blank input mean the user cleared their pick and map to the
    no-prediction sentinel.
    """
    if raw is None:
        return config.no_prediction
    if not isinstance(raw, str):
        raise InvalidPredictionError(raw, config.valid_prediction_scores)
    value = raw.strip()
    if not value:
        return config.no_prediction
    if value not in config.valid_prediction_scores:
        raise InvalidPredictionError(raw, config.valid_prediction_scores)
    return value


def ensure_prediction_editable(slug: str, progression: SeriesProgression) -> None:
    """Raise PredictionLockedError unless the series has not started."""
    if not can_submit_prediction(progression):
        raise PredictionLockedError(slug, progression)
