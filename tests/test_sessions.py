"""Tests for core session logic."""

from datetime import time, timedelta

import pytest

from tik.core.log import Entry
from tik.core.sessions import (
    Session,
    format_duration,
    parse_time,
    reconstruct_sessions,
    total_duration,
)


@pytest.fixture
def make_entries():
    """Factory for entry lists from (time, subject) pairs."""
    def _make(*pairs: tuple[str, str]) -> list[Entry]:
        return [Entry(time=t, subject=s) for t, s in pairs]
    return _make


class TestParseTime:
    def test_valid(self):
        assert parse_time("13:05:09") == time(13, 5, 9)

    def test_invalid(self):
        assert parse_time("not a time") is None

    def test_missing_seconds(self):
        assert parse_time("13:05") is None

    def test_out_of_range(self):
        assert parse_time("25:00:00") is None


class TestSession:
    def test_closed(self):
        assert Session(start=time(1), end=time(2)).is_closed

    def test_open(self):
        assert not Session(start=time(1)).is_closed

    def test_duration(self):
        assert Session(start=time(1, 30), end=time(3)).duration() == timedelta(hours=1, minutes=30)

    def test_open_duration_is_zero(self):
        assert Session(start=time(1)).duration() == timedelta(0)

    def test_negative_duration_preserved(self):
        assert Session(start=time(5), end=time(3)).duration() == timedelta(hours=-2)


class TestReconstructSessions:
    def test_empty(self):
        assert reconstruct_sessions([]) == []

    def test_single_pair(self, make_entries):
        entries = make_entries(("01:00:00", "X"), ("03:00:00", "stop"))
        assert reconstruct_sessions(entries) == [Session(start=time(1), end=time(3))]

    def test_trailing_open_session(self, make_entries):
        entries = make_entries(("01:00:00", "X"))
        assert reconstruct_sessions(entries) == [Session(start=time(1))]

    def test_leading_stop_ignored(self, make_entries):
        entries = make_entries(("00:30:00", "stop"), ("01:00:00", "X"), ("02:00:00", "stop"))
        assert reconstruct_sessions(entries) == [Session(start=time(1), end=time(2))]

    def test_second_stop_keeps_first_end(self, make_entries):
        entries = make_entries(("01:00:00", "X"), ("05:00:00", "stop"), ("07:00:00", "stop"))
        assert reconstruct_sessions(entries) == [Session(start=time(1), end=time(5))]

    def test_consecutive_starts_open_one_session(self, make_entries):
        entries = make_entries(("01:00:00", "A"), ("02:00:00", "B"), ("04:00:00", "stop"))
        assert reconstruct_sessions(entries) == [Session(start=time(1), end=time(4))]

    def test_alternating(self, make_entries):
        entries = make_entries(
            ("09:00:00", "email"),
            ("10:00:00", "stop"),
            ("11:00:00", "review"),
            ("12:30:00", "stop"),
            ("14:00:00", "coding"),
        )
        assert reconstruct_sessions(entries) == [
            Session(start=time(9), end=time(10)),
            Session(start=time(11), end=time(12, 30)),
            Session(start=time(14)),
        ]

    def test_stop_is_case_sensitive(self, make_entries):
        entries = make_entries(("01:00:00", "X"), ("02:00:00", "STOP"))
        assert reconstruct_sessions(entries) == [Session(start=time(1))]

    def test_malformed_start_time(self, make_entries):
        entries = make_entries(("garbage", "X"), ("02:00:00", "stop"), ("03:00:00", "Y"))
        sessions = reconstruct_sessions(entries)

        assert sessions == [Session(start=None, end=time(2)), Session(start=time(3))]
        assert not sessions[0].is_closed

    def test_malformed_stop_time_keeps_session_open(self, make_entries):
        entries = make_entries(("01:00:00", "X"), ("bad", "stop"), ("03:00:00", "stop"))
        sessions = reconstruct_sessions(entries)

        assert sessions == [Session(start=time(1), end=time(3))]
        assert total_duration(sessions) == timedelta(hours=2)

    def test_is_repeatable(self, make_entries):
        entries = make_entries(("01:00:00", "X"), ("03:00:00", "stop"), ("04:00:00", "Y"))
        assert reconstruct_sessions(entries) == reconstruct_sessions(entries)


class TestTotalDuration:
    def test_empty(self):
        assert total_duration([]) == timedelta(0)

    def test_ignores_open_sessions(self):
        sessions = [
            Session(start=time(1), end=time(3)),
            Session(start=time(4)),
            Session(end=time(6)),
        ]
        assert total_duration(sessions) == timedelta(hours=2)

    def test_sums_closed(self):
        sessions = [
            Session(start=time(9), end=time(10)),
            Session(start=time(11), end=time(12, 30)),
        ]
        assert total_duration(sessions) == timedelta(hours=2, minutes=30)


class TestFormatDuration:
    def test_zero(self):
        assert format_duration(timedelta(0)) == "00:00:00"

    def test_hours_minutes_seconds(self):
        assert format_duration(timedelta(hours=2, minutes=5, seconds=7)) == "02:05:07"

    def test_over_a_day(self):
        assert format_duration(timedelta(hours=26)) == "26:00:00"

    def test_negative(self):
        assert format_duration(timedelta(hours=-2, minutes=-30)) == "-02:30:00"
