"""Tests for core timeline logic."""

from datetime import date, time, timedelta

import pytest

from recess.core.timeline import (
    ActivityBlock,
    BlockKind,
    Dated,
    Recurring,
    format_time_12h,
    is_active_on,
    minutes_between,
    overlaps,
    parse_time,
    resolve_for_date,
    sort_by_start,
)


@pytest.fixture
def today():
    # A Wednesday
    return date(2025, 1, 15)


@pytest.fixture
def make_block(today):
    """Factory for creating blocks."""
    def _make(
        title: str = "Lecture",
        start: str = "09:00",
        end: str = "10:00",
        kind: BlockKind = BlockKind.CLASS,
        occurrence=None,
    ) -> ActivityBlock:
        return ActivityBlock(
            title=title,
            kind=kind,
            start=parse_time(start),
            end=parse_time(end),
            occurrence=occurrence or Dated(today),
        )
    return _make


class TestParseTime:
    def test_hours_and_minutes(self):
        assert parse_time("14:30") == time(14, 30)

    def test_ignores_seconds(self):
        assert parse_time("09:05:59") == time(9, 5)

    def test_malformed_parts_become_zero(self):
        assert parse_time("ab:15") == time(0, 15)
        assert parse_time("10:xx") == time(10, 0)

    def test_missing_value(self):
        assert parse_time(None) == time(0, 0)
        assert parse_time("") == time(0, 0)

    def test_out_of_range(self):
        assert parse_time("25:61") == time(0, 0)


class TestFormatTime:
    def test_morning(self):
        assert format_time_12h(time(9, 5)) == "9:05 AM"

    def test_noon_and_midnight(self):
        assert format_time_12h(time(12, 0)) == "12:00 PM"
        assert format_time_12h(time(0, 30)) == "12:30 AM"

    def test_evening(self):
        assert format_time_12h(time(22, 45)) == "10:45 PM"


class TestMinutesBetween:
    def test_forward(self):
        assert minutes_between(time(9, 0), time(10, 40)) == 100

    def test_inverted_is_zero(self):
        assert minutes_between(time(11, 0), time(10, 0)) == 0

    def test_zero_length(self):
        assert minutes_between(time(11, 0), time(11, 0)) == 0


class TestOverlaps:
    def test_partial_overlap(self):
        assert overlaps(time(14), time(15), time(14, 30), time(15, 30)) is True

    def test_touching_endpoints(self):
        assert overlaps(time(15), time(16), time(14, 30), time(15)) is False

    def test_containment(self):
        assert overlaps(time(9), time(17), time(12), time(13)) is True

    @pytest.mark.parametrize(
        "a,b",
        [
            ((time(9), time(10)), (time(9, 30), time(11))),
            ((time(9), time(10)), (time(10), time(11))),
            ((time(9), time(10)), (time(12), time(13))),
            ((time(8), time(12)), (time(9), time(10))),
        ],
    )
    def test_symmetric(self, a, b):
        assert overlaps(*a, *b) == overlaps(*b, *a)


class TestIsActiveOn:
    def test_dated_matches_same_day(self, today):
        assert is_active_on(Dated(today), today) is True
        assert is_active_on(Dated(today), today + timedelta(days=7)) is False

    def test_recurring_matches_weekday(self, today):
        assert is_active_on(Recurring(weekday=2), today) is True
        assert is_active_on(Recurring(weekday=3), today) is False

    def test_recurring_without_end_repeats(self, today):
        assert is_active_on(Recurring(weekday=2), today + timedelta(weeks=52)) is True

    def test_recurring_end_date_inclusive(self, today):
        assert is_active_on(Recurring(weekday=2, end_date=today), today) is True

    def test_recurring_after_end_date(self, today):
        end = today
        assert is_active_on(Recurring(weekday=2, end_date=end), end + timedelta(weeks=1)) is False

    def test_recurring_day_after_end_date(self):
        # End date on a Tuesday; the following Wednesday is past it.
        end = date(2025, 1, 14)
        assert is_active_on(Recurring(weekday=end.weekday(), end_date=end), end) is True
        assert is_active_on(Recurring(weekday=2, end_date=end), end + timedelta(days=1)) is False

    def test_unknown_occurrence(self, today):
        with pytest.raises(TypeError):
            is_active_on("weekly", today)


class TestResolveForDate:
    def test_filters_and_keeps_order(self, make_block, today):
        blocks = [
            make_block("Tomorrow", occurrence=Dated(today + timedelta(days=1))),
            make_block("Today", start="13:00", end="14:00"),
            make_block("Weekly", start="08:00", end="09:00", occurrence=Recurring(weekday=2)),
            make_block("Expired", occurrence=Recurring(weekday=2, end_date=today - timedelta(days=1))),
        ]
        resolved = resolve_for_date(blocks, today)
        assert [b.title for b in resolved] == ["Today", "Weekly"]

    def test_empty(self, today):
        assert resolve_for_date([], today) == []


class TestActivityBlock:
    def test_duration(self, make_block):
        assert make_block(start="09:00", end="11:30").duration_minutes() == 150

    def test_is_break(self, make_block):
        assert make_block(kind=BlockKind.BREAK).is_break is True
        assert make_block(kind=BlockKind.STUDY).is_break is False

    def test_format(self, make_block):
        assert make_block("Chem", "09:00", "10:15").format() == "09:00-10:15 Chem"

    def test_sort_by_start(self, make_block):
        blocks = [make_block("B", "11:00", "12:00"), make_block("A", "08:00", "09:00")]
        assert [b.title for b in sort_by_start(blocks)] == ["A", "B"]

    def test_from_row_dated(self, today):
        block = ActivityBlock.from_row(
            {"title": "Lab", "type": "study", "start_time": "13:00:00", "end_time": "15:00:00", "date": "2025-01-15"}
        )
        assert block.kind is BlockKind.STUDY
        assert block.start == time(13, 0)
        assert block.occurrence == Dated(today)

    def test_from_row_recurring_converts_sunday_based_weekday(self):
        # Stored rows count Sunday as 0, so 3 is Wednesday.
        block = ActivityBlock.from_row(
            {
                "title": "Seminar",
                "type": "class",
                "start_time": "10:00",
                "end_time": "11:00",
                "day_of_week": 3,
                "end_date": "2025-05-01",
            }
        )
        assert block.occurrence == Recurring(weekday=2, end_date=date(2025, 5, 1))

    def test_from_row_sunday(self):
        block = ActivityBlock.from_row(
            {"title": "Church", "type": "other", "start_time": "10:00", "end_time": "11:00", "day_of_week": 0}
        )
        assert block.occurrence == Recurring(weekday=6)

    def test_from_row_unknown_type(self, today):
        block = ActivityBlock.from_row(
            {"title": "?", "type": "nap", "start_time": "10:00", "end_time": "11:00", "date": "2025-01-15"}
        )
        assert block.kind is BlockKind.OTHER

    def test_row_round_trip_recurring(self):
        block = ActivityBlock(
            title="Gym",
            kind=BlockKind.OTHER,
            start=time(7, 0),
            end=time(8, 0),
            occurrence=Recurring(weekday=6),
        )
        row = block.to_row()
        assert row["day_of_week"] == 0
        assert row["date"] is None
        assert ActivityBlock.from_row(row) == block
