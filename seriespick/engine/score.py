"""Series score parsing and formatting."""

import numbers
from typing import Optional, Sequence, Union

from seriespick.engine.types import SeriesScore


ScoreInput = Union[str, SeriesScore, Sequence[Union[int, str]], None]


def _parse_component(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value) if value >= 0 else None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and text.isascii():
            return int(text)
    return None


def parse_score(raw: ScoreInput) -> Optional[SeriesScore]:
    """
    Parse an "N-M" score into (high seed wins, low seed wins).

    Accepts the textual form ("4-2") or any two-item sequence of
    non-negative integers (digit strings allowed). Anything else,
    including a missing or non-numeric component, returns None.

    The wins-required boundary is not checked here.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        parts = raw.split("-")
    elif isinstance(raw, (tuple, list)):
        parts = list(raw)
    else:
        return None

    if len(parts) != 2:
        return None
    high = _parse_component(parts[0])
    low = _parse_component(parts[1])
    if high is None or low is None:
        return None
    return SeriesScore(high, low)


def format_score(high_seed_wins: int, low_seed_wins: int) -> str:
    return f"{high_seed_wins}-{low_seed_wins}"
