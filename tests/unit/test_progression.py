"""Unit tests for series progression classification."""

import pytest
from datetime import datetime, timedelta, timezone

from seriespick.engine.progression import (
    can_submit_prediction,
    classify_progression,
    parse_schedule_marker,
)
from seriespick.engine.types import SeriesProgression

W = 4


class TestClassifyProgression:
    """Tests for classify_progression."""

    def test_no_wins_no_schedule_is_not_started(self, now):
        assert classify_progression(0, 0, None, now) is SeriesProgression.NOT_STARTED

    def test_future_game_is_not_started(self, now):
        marker = now + timedelta(hours=1)
        assert classify_progression(0, 0, marker, now) is SeriesProgression.NOT_STARTED

    def test_game_time_reached_is_in_progress(self, now):
        """Boundary: the game start instant itself counts as started."""
        assert classify_progression(0, 0, now, now) is SeriesProgression.IN_PROGRESS

    def test_game_time_passed_is_in_progress(self, now):
        marker = now - timedelta(minutes=5)
        assert classify_progression(0, 0, marker, now) is SeriesProgression.IN_PROGRESS

    def test_recorded_win_is_in_progress_regardless_of_schedule(self, now):
        future = now + timedelta(days=2)
        assert classify_progression(1, 0, None, now) is SeriesProgression.IN_PROGRESS
        assert classify_progression(1, 0, future, now) is SeriesProgression.IN_PROGRESS
        assert classify_progression(0, 3, future, now) is SeriesProgression.IN_PROGRESS

    @pytest.mark.parametrize("high,low", [(4, 0), (4, 3), (0, 4), (2, 4)])
    def test_clinched_series_is_finished(self, high, low, now):
        future = now + timedelta(days=1)
        past = now - timedelta(days=1)
        for marker in (None, future, past):
            assert classify_progression(high, low, marker, now) is SeriesProgression.FINISHED

    def test_unclinched_scores_never_finish(self, now):
        for high in range(W):
            for low in range(W):
                for marker in (None, now - timedelta(hours=1), now + timedelta(hours=1)):
                    result = classify_progression(high, low, marker, now)
                    assert result is not SeriesProgression.FINISHED

    def test_naive_marker_treated_as_utc(self, now):
        naive_past = (now - timedelta(minutes=1)).replace(tzinfo=None)
        assert classify_progression(0, 0, naive_past, now) is SeriesProgression.IN_PROGRESS

    def test_marker_in_other_timezone(self, now):
        eastern = timezone(timedelta(hours=-4))
        marker = (now + timedelta(minutes=1)).astimezone(eastern)
        assert classify_progression(0, 0, marker, now) is SeriesProgression.NOT_STARTED

    def test_defaults_to_current_time(self):
        long_ago = datetime(2000, 1, 1, tzinfo=timezone.utc)
        far_future = datetime(2999, 1, 1, tzinfo=timezone.utc)
        assert classify_progression(0, 0, long_ago) is SeriesProgression.IN_PROGRESS
        assert classify_progression(0, 0, far_future) is SeriesProgression.NOT_STARTED

    def test_custom_wins_required(self, now):
        assert classify_progression(2, 1, None, now, wins_required=2) is SeriesProgression.FINISHED
        assert classify_progression(2, 1, None, now, wins_required=3) is SeriesProgression.IN_PROGRESS

    def test_is_idempotent(self, now):
        first = classify_progression(2, 1, now, now)
        second = classify_progression(2, 1, now, now)
        assert first is second


class TestParseScheduleMarker:
    """Tests for parse_schedule_marker."""

    def test_zulu_suffix(self):
        parsed = parse_schedule_marker("2023-04-20T23:00:00Z")
        assert parsed == datetime(2023, 4, 20, 23, 0, tzinfo=timezone.utc)

    def test_offset(self):
        parsed = parse_schedule_marker("2023-04-20T19:00:00-04:00")
        assert parsed.astimezone(timezone.utc).hour == 23

    def test_datetime_passthrough(self, now):
        assert parse_schedule_marker(now) is now

    @pytest.mark.parametrize("value", [None, "", "tomorrow", "2023-13-01"])
    def test_missing_or_invalid(self, value):
        assert parse_schedule_marker(value) is None


def test_only_not_started_accepts_predictions():
    assert can_submit_prediction(SeriesProgression.NOT_STARTED) is True
    assert can_submit_prediction(SeriesProgression.IN_PROGRESS) is False
    assert can_submit_prediction(SeriesProgression.FINISHED) is False
