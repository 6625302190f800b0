"""
Custom exceptions for the series prediction system.

The classification engine itself never raises for domain reasons: a
malformed score or a tied resolution is an ordinary ``None`` return value.
These exceptions belong to the boundaries around it (configuration,
prediction submission, batch input).

Usage:
    from seriespick.exceptions import InvalidPredictionError, PredictionLockedError

    try:
        score = validate_prediction(raw)
        ensure_prediction_editable(slug, progression)
    except InvalidPredictionError as e:
        print(f"Rejected: {e}")
    except PredictionLockedError as e:
        print(f"Locked: {e}")
"""

from typing import Iterable, Optional


class SeriesPickError(Exception):
    """
    Base exception for all series prediction errors.

    All custom exceptions inherit from this, allowing:
        except SeriesPickError:
            # Catch any system error
    """
    pass


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigError(SeriesPickError):
    """
    Invalid configuration value.

    Raised when:
    - Wins required to clinch is below one
    - Points table names an unknown outcome
    - Points table value is not an integer
    """

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"Configuration error ({setting}): {message}")


# =============================================================================
# PREDICTION ERRORS
# =============================================================================

class InvalidPredictionError(SeriesPickError):
    """
    Submitted prediction is not one of the allowed score strings.

    Raised when:
    - Score is not a completed-series result ("4-1", "2-4", ...)
    - Score is not the no-prediction sentinel
    """

    def __init__(self, raw: object, allowed: Optional[Iterable[str]] = None):
        self.raw = raw
        self.allowed = tuple(allowed or ())
        msg = f"Invalid prediction: {raw!r}"
        if self.allowed:
            msg += f" (allowed: {', '.join(self.allowed)})"
        super().__init__(msg)


class PredictionLockedError(SeriesPickError):
    """
    Prediction write attempted after the series started.

    Predictions are editable only while the series is not started.
    """

    def __init__(self, slug: str, progression: object):
        self.slug = slug
        self.progression = progression
        label = getattr(progression, "value", progression)
        super().__init__(f"Prediction for series {slug!r} is locked (series {label})")
