"""Best-of-seven series prediction classifier."""

from seriespick.engine import (
    PredictionOutcome,
    SeriesProgression,
    SeriesScore,
    SeriesSnapshot,
    classify_outcome,
    classify_progression,
    parse_score,
    resolve_winner_loser,
)
from seriespick.config import SeriesConfig, DEFAULT_CONFIG
from seriespick.classifier import PredictionClassifier, outcome_points

__all__ = [
    "cli",
    "config",
    "constants",
    "exceptions",
    "engine",
    "classifier",
    "normalization",
    "review",
    "reporting",
    "ops",
    "PredictionOutcome",
    "SeriesProgression",
    "SeriesScore",
    "SeriesSnapshot",
    "classify_outcome",
    "classify_progression",
    "parse_score",
    "resolve_winner_loser",
    "SeriesConfig",
    "DEFAULT_CONFIG",
    "PredictionClassifier",
    "outcome_points",
]

__version__ = "0.1.0"
