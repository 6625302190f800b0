"""Winner/loser resolution for a pair of named sides."""

from typing import Optional

from seriespick.constants import WINS_REQUIRED_IN_SERIES
from seriespick.engine.types import SeriesWinner, Side, WinnerLoser


def resolve_winner_loser(side_a: Side, side_b: Side) -> Optional[WinnerLoser]:
    """
    Return the side with more wins as winner and the other as loser.

    Equal win counts are undecided and return None. Used for both actual
    and predicted scores, so callers must not assume a decision.
    """
    if side_a.wins > side_b.wins:
        return WinnerLoser(winner=side_a, loser=side_b)
    if side_b.wins > side_a.wins:
        return WinnerLoser(winner=side_b, loser=side_a)
    return None


def series_winner(
    high_seed_wins: int,
    low_seed_wins: int,
    wins_required: int = WINS_REQUIRED_IN_SERIES,
) -> SeriesWinner:
    """Which seed has clinched, as stored alongside ingested scores."""
    if high_seed_wins == wins_required:
        return SeriesWinner.TOP
    if low_seed_wins == wins_required:
        return SeriesWinner.BOTTOM
    return SeriesWinner.UNKNOWN
