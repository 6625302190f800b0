"""Validation at the boundaries of the engine."""

from seriespick.normalization.schema import (
    SCHEMA_VERSION,
    SchemaValidationError,
    validate_series_rows,
)
from seriespick.normalization.prediction import (
    ensure_prediction_editable,
    validate_prediction,
)

__all__ = [
    "SCHEMA_VERSION",
    "SchemaValidationError",
    "validate_series_rows",
    "ensure_prediction_editable",
    "validate_prediction",
]
