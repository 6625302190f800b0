"""
Constants and team data for seriespick.

Provides the playoff roster, team abbreviations, the series win threshold
and the default points awarded per prediction outcome.
"""

from typing import Dict, List


# =============================================================================
# SERIES FORMAT
# =============================================================================

# Best-of-seven: first side to four wins takes the series
WINS_REQUIRED_IN_SERIES = 4

# Stored in place of a score when the user never picked a result
NO_PREDICTION = "no-prediction"


# =============================================================================
# TEAMS
# =============================================================================

NHL_TEAM_NAMES: List[str] = [
    "Boston Bruins",
    "Florida Panthers",
    "Carolina Hurricanes",
    "New York Islanders",
    "New Jersey Devils",
    "New York Rangers",
    "Toronto Maple Leafs",
    "Tampa Bay Lightning",
    "Vegas Golden Knights",
    "Winnipeg Jets",
    "Edmonton Oilers",
    "Los Angeles Kings",
    "Colorado Avalanche",
    "Seattle Kraken",
    "Dallas Stars",
    "Minnesota Wild",
]

_ROSTER_CODES = [
    "BOS", "FLA", "CAR", "NYI", "NJD", "NYR", "TOR", "TBL",
    "VGK", "WPG", "EDM", "LAK", "COL", "SEA", "DAL", "MIN",
]

TEAM_ABBREVIATIONS: Dict[str, str] = dict(zip(NHL_TEAM_NAMES, _ROSTER_CODES))


def get_team_abbrev(team_name: str) -> str:
    """
    Get the short code for a team name.

    Falls back to the first three letters, upper-cased, for teams outside
    the roster.
    """
    if not team_name:
        return ""
    name = team_name.strip()
    if name in TEAM_ABBREVIATIONS:
        return TEAM_ABBREVIATIONS[name]
    if name.upper() in TEAM_ABBREVIATIONS.values():
        return name.upper()
    return name[:3].upper()


# =============================================================================
# SCORING
# =============================================================================

# Keyed by PredictionOutcome value
DEFAULT_OUTCOME_POINTS: Dict[str, int] = {
    "exactly_correct": 2,
    "winner_only_correct": 1,
    "length_only_correct": 0,
    "totally_incorrect": 0,
    "no_prediction_made": 0,
    "in_progress": 0,
    "not_started": 0,
}
