"""
Series progression classification.

A series is Finished once either side reaches the wins required, otherwise
InProgress once a game has been won or the next game's start time has
passed, otherwise NotStarted. The checks run in exactly that order.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from seriespick.constants import WINS_REQUIRED_IN_SERIES
from seriespick.engine.types import SeriesProgression


def parse_schedule_marker(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse an ISO-8601 game start time; blank or unparseable values give None."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    # Naive instants are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def classify_progression(
    high_seed_wins: int,
    low_seed_wins: int,
    schedule_marker: Optional[datetime] = None,
    now: Optional[datetime] = None,
    wins_required: int = WINS_REQUIRED_IN_SERIES,
) -> SeriesProgression:
    """
    Classify where a series stands.

    Args:
        high_seed_wins: Current wins for the high seed (0..wins_required)
        low_seed_wins: Current wins for the low seed (0..wins_required)
        schedule_marker: Start time of the next/current game, if scheduled
        now: Evaluation instant (default: current UTC time)
        wins_required: Wins needed to clinch

    Returns:
        SeriesProgression. Win counts outside 0..wins_required are a
        caller error and are only checked by assertions.
    """
    assert 0 <= high_seed_wins <= wins_required, f"high seed wins out of range: {high_seed_wins}"
    assert 0 <= low_seed_wins <= wins_required, f"low seed wins out of range: {low_seed_wins}"
    assert not (high_seed_wins == wins_required and low_seed_wins == wins_required), \
        "both sides cannot clinch the same series"

    if high_seed_wins == wins_required or low_seed_wins == wins_required:
        return SeriesProgression.FINISHED

    if high_seed_wins > 0 or low_seed_wins > 0:
        return SeriesProgression.IN_PROGRESS

    if schedule_marker is not None:
        current = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        if current >= _as_utc(schedule_marker):
            return SeriesProgression.IN_PROGRESS

    return SeriesProgression.NOT_STARTED


def can_submit_prediction(progression: SeriesProgression) -> bool:
    """Predictions may be written only before the series starts."""
    return progression is SeriesProgression.NOT_STARTED
