#!/usr/bin/env python3
"""
Tests for the weekly schedule data model
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mediatimer.core.schedule import (
    DEFAULT_RANGE,
    Day,
    DaySchedule,
    ScheduleError,
    TimeFormatError,
    TimeRange,
    WeekSchedule,
    time_as_number,
)


def test_day_order_and_names():
    assert [d.value for d in Day] == list(range(7))
    assert Day.MONDAY.label == "Monday"
    assert Day.SUNDAY.key_name == "SUNDAY"


def test_time_as_number_concatenates_digits():
    assert time_as_number("11:00:00") == 110000
    assert time_as_number("00:00:05") == 5


def test_time_range_parse_splits_once():
    assert TimeRange.parse("09:00:00-17:00:00") == TimeRange("09:00:00", "17:00:00")
    assert TimeRange.parse("a-b-c") == TimeRange("a", "b-c")
    with pytest.raises(TimeFormatError):
        TimeRange.parse("09:00:00")


def test_time_range_text():
    assert str(TimeRange("09:00:00", "17:00:00")) == "09:00:00-17:00:00"


def test_empty_week_has_every_day():
    week = WeekSchedule.empty()
    assert len(week.days) == 7
    assert all(len(week[d]) == 0 for d in Day)
    assert week.total_ranges() == 0


def test_seeded_week_has_default_range_each_day():
    week = WeekSchedule.seeded()
    assert all(list(day_schedule) == [DEFAULT_RANGE] for _, day_schedule in week.items())


def test_days_are_independent():
    week = WeekSchedule.seeded()
    week.add_range(Day.TUESDAY, TimeRange("18:00:00", "19:00:00"))
    assert len(week[Day.TUESDAY]) == 2
    assert len(week[Day.MONDAY]) == 1


def test_week_indexing_by_day_or_ordinal():
    week = WeekSchedule.empty()
    week.add_range(Day.FRIDAY, TimeRange("15:30:00", "16:45:00"))
    assert week[4] is week[Day.FRIDAY]
    with pytest.raises(ScheduleError):
        week[7]
    with pytest.raises(ScheduleError):
        WeekSchedule([DaySchedule()])


def test_edit_replaces_in_place():
    week = WeekSchedule.empty()
    week.add_range(0, TimeRange("09:00:00", "10:00:00"))
    week.add_range(0, TimeRange("12:00:00", "13:00:00"))
    old = week.edit_range(0, 0, TimeRange("08:00:00", "10:00:00"))
    assert old == TimeRange("09:00:00", "10:00:00")
    assert list(week[0]) == [
        TimeRange("08:00:00", "10:00:00"),
        TimeRange("12:00:00", "13:00:00"),
    ]
    with pytest.raises(ScheduleError):
        week.edit_range(0, 5, TimeRange("20:00:00", "21:00:00"))


def test_delete_only_range_leaves_day_empty():
    week = WeekSchedule.empty()
    week.add_range(Day.MONDAY, TimeRange("09:00:00", "10:00:00"))
    removed = week.delete_range(Day.MONDAY, 0)
    assert removed == TimeRange("09:00:00", "10:00:00")
    assert len(week[Day.MONDAY]) == 0


def test_delete_from_empty_day_is_noop():
    week = WeekSchedule.empty()
    assert week.delete_range(Day.MONDAY, 0) is None
    assert week.delete_range(Day.MONDAY, None) is None
    assert week == WeekSchedule.empty()


def test_display_order_is_sorted_but_storage_is_not():
    day = DaySchedule()
    day.add(TimeRange("18:00:00", "19:00:00"))
    day.add(TimeRange("07:00:00", "08:00:00"))
    day.add(TimeRange("12:00:00", "13:00:00"))
    assert day.sorted_indices() == [1, 2, 0]
    assert [r.start for r in day.display_ranges()] == ["07:00:00", "12:00:00", "18:00:00"]
    assert day[0].start == "18:00:00"
