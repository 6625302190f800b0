"""Unit tests for series score parsing."""

import numpy as np
import pytest

from seriespick.engine.score import format_score, parse_score
from seriespick.engine.types import SeriesScore


class TestParseScore:
    """Tests for parse_score."""

    def test_parses_text_score(self):
        assert parse_score("4-2") == SeriesScore(4, 2)

    def test_high_seed_is_first_component(self):
        score = parse_score("1-4")
        assert score.high_seed_wins == 1
        assert score.low_seed_wins == 4

    def test_ongoing_score_is_not_rejected(self):
        """The clinch boundary is the caller's concern."""
        assert parse_score("2-3") == SeriesScore(2, 3)

    def test_parses_pairs(self):
        assert parse_score((3, 4)) == SeriesScore(3, 4)
        assert parse_score(["0", "4"]) == SeriesScore(0, 4)
        assert parse_score(SeriesScore(4, 0)) == SeriesScore(4, 0)

    def test_parses_numpy_integers(self):
        score = parse_score((np.int64(4), np.int64(2)))
        assert score == SeriesScore(4, 2)
        assert type(score.high_seed_wins) is int

    def test_negative_numpy_integer_is_invalid(self):
        assert parse_score((np.int32(-1), np.int32(4))) is None

    def test_surrounding_whitespace_allowed(self):
        assert parse_score(" 4 - 3 ") == SeriesScore(4, 3)

    @pytest.mark.parametrize("raw", [
        None,
        "",
        "4",
        "4-",
        "-4",
        "a-b",
        "4-x",
        "4-2-1",
        "4.0-2",
        "no-prediction",
        (4,),
        (4, 2, 1),
        (-1, 4),
        (True, 4),
        (4.0, 2),
        42,
    ])
    def test_invalid_inputs_return_none(self, raw):
        assert parse_score(raw) is None

    def test_total_games(self):
        assert parse_score("4-3").total_games == 7


def test_format_score():
    assert format_score(4, 1) == "4-1"
    assert parse_score(format_score(2, 4)) == SeriesScore(2, 4)
