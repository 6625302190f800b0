"""Unit tests for team constants."""

from seriespick.constants import NHL_TEAM_NAMES, TEAM_ABBREVIATIONS, get_team_abbrev


def test_every_roster_team_has_code():
    assert len(NHL_TEAM_NAMES) == 16
    assert set(TEAM_ABBREVIATIONS) == set(NHL_TEAM_NAMES)
    assert len(set(TEAM_ABBREVIATIONS.values())) == 16


def test_get_team_abbrev():
    assert get_team_abbrev("Seattle Kraken") == "SEA"
    assert get_team_abbrev(" Tampa Bay Lightning ") == "TBL"
    assert get_team_abbrev("nyr") == "NYR"
    assert get_team_abbrev("Ottawa Senators") == "OTT"
    assert get_team_abbrev("") == ""
