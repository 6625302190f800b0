"""Configuration for series classification and scoring."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple
import json
import os

from seriespick.constants import (
    DEFAULT_OUTCOME_POINTS,
    NO_PREDICTION,
    WINS_REQUIRED_IN_SERIES,
)
from seriespick.engine.types import PredictionOutcome
from seriespick.exceptions import ConfigError


_ENV_WINS_REQUIRED = "SERIESPICK_WINS_REQUIRED"
_ENV_NO_PREDICTION = "SERIESPICK_NO_PREDICTION"
_ENV_POINTS = {
    PredictionOutcome.EXACTLY_CORRECT: "SERIESPICK_POINTS_EXACT",
    PredictionOutcome.WINNER_ONLY_CORRECT: "SERIESPICK_POINTS_WINNER",
    PredictionOutcome.LENGTH_ONLY_CORRECT: "SERIESPICK_POINTS_LENGTH",
}


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _coerce_int(value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_str(value: Optional[str], default: str) -> str:
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def _parse_env_file(path: Path) -> Dict[str, str]:
    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = _strip_quotes(value.strip())
    return data


def _load_config_data(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() == ".json":
        payload = json.loads(path.read_text(encoding="utf-8"))
        return {str(k): str(v) for k, v in payload.items()}
    return _parse_env_file(path)


def _default_points() -> Dict[PredictionOutcome, int]:
    return {PredictionOutcome(key): value for key, value in DEFAULT_OUTCOME_POINTS.items()}


@dataclass(frozen=True)
class SeriesConfig:
    """
    Immutable settings for one series format.

    Attributes:
        wins_required: Wins needed to clinch the series (W)
        no_prediction: Sentinel stored when the user made no pick
        outcome_points: Points earned per prediction outcome
    """
    wins_required: int = WINS_REQUIRED_IN_SERIES
    no_prediction: str = NO_PREDICTION
    outcome_points: Mapping[PredictionOutcome, int] = field(
        default_factory=_default_points,
        hash=False,
    )

    def __post_init__(self) -> None:
        if isinstance(self.wins_required, bool) or not isinstance(self.wins_required, int):
            raise ConfigError("wins_required", f"expected an integer, got {self.wins_required!r}")
        if self.wins_required < 1:
            raise ConfigError("wins_required", f"must be at least 1, got {self.wins_required}")
        if not self.no_prediction:
            raise ConfigError("no_prediction", "sentinel must be a non-empty string")

        points = _default_points()
        for key, value in dict(self.outcome_points).items():
            try:
                outcome = key if isinstance(key, PredictionOutcome) else PredictionOutcome(key)
            except ValueError:
                raise ConfigError("outcome_points", f"unknown outcome {key!r}") from None
            try:
                points[outcome] = int(value)
            except (TypeError, ValueError):
                raise ConfigError(
                    "outcome_points", f"points for {outcome.value} must be an integer, got {value!r}"
                ) from None
        object.__setattr__(self, "outcome_points", points)

    @property
    def valid_prediction_scores(self) -> Tuple[str, ...]:
        """Allowed prediction strings: every completed result plus the sentinel."""
        w = self.wins_required
        high_wins = [f"{w}-{losses}" for losses in range(w)]
        low_wins = [f"{losses}-{w}" for losses in range(w)]
        return tuple(high_wins + low_wins + [self.no_prediction])

    def points_for(self, outcome: PredictionOutcome) -> int:
        return self.outcome_points.get(outcome, 0)

    def to_dict(self) -> dict:
        return {
            "wins_required": self.wins_required,
            "no_prediction": self.no_prediction,
            "outcome_points": {k.value: v for k, v in self.outcome_points.items()},
        }

    @classmethod
    def _from_values(cls, values: Mapping[str, str], base: "SeriesConfig") -> "SeriesConfig":
        points = dict(base.outcome_points)
        for outcome, env_key in _ENV_POINTS.items():
            points[outcome] = _coerce_int(values.get(env_key), points[outcome])
        return cls(
            wins_required=_coerce_int(values.get(_ENV_WINS_REQUIRED), base.wins_required),
            no_prediction=_coerce_str(values.get(_ENV_NO_PREDICTION), base.no_prediction),
            outcome_points=points,
        )

    @classmethod
    def from_env(cls) -> "SeriesConfig":
        return cls._from_values(os.environ, cls())

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "SeriesConfig":
        env_config = cls.from_env()
        if not config_path:
            return env_config
        file_data = _load_config_data(Path(config_path))
        return cls._from_values(file_data, env_config)


DEFAULT_CONFIG = SeriesConfig()
