#!/usr/bin/env python3
"""
Core Schedule Model for MediaTimer
Holds the weekly playback schedule: time ranges per weekday in a fixed day order
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


class ScheduleError(Exception):
    """Raised when schedule operations fail"""

    pass


class TimeFormatError(ScheduleError):
    """Raised when a time range does not match HH:MM:SS-HH:MM:SS"""

    pass


class TimeClashError(ScheduleError):
    """Raised when a time range overlaps another range on the same day"""

    def __init__(self, message: str, conflict: Optional["TimeRange"] = None):
        super().__init__(message)
        self.conflict = conflict


class Day(Enum):
    """Weekdays in schedule order, the value is the ordinal index"""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def key_name(self) -> str:
        return self.name


DayRef = Union[Day, int]


def time_as_number(value: str) -> int:
    """Concatenate the digits of a time field, "11:00:00" -> 110000"""
    digits = "".join(ch for ch in value if ch.isdigit())
    return int(digits) if digits else 0


@dataclass(frozen=True)
class TimeRange:
    """A start/end pair of HH:MM:SS strings"""

    start: str
    end: str

    @classmethod
    def parse(cls, text: str) -> "TimeRange":
        """Split a "start-end" string once on the dash"""
        start, sep, end = text.partition("-")
        if not sep:
            raise TimeFormatError(f"Missing '-' in time range: {text!r}")
        return cls(start, end)

    def format(self) -> str:
        return f"{self.start}-{self.end}"

    def as_numbers(self) -> Tuple[int, int]:
        return time_as_number(self.start), time_as_number(self.end)

    def __str__(self) -> str:
        return self.format()


DEFAULT_RANGE = TimeRange("09:00:00", "17:00:00")


class DaySchedule:
    """Time ranges for one weekday, kept in insertion order"""

    def __init__(self, ranges: Optional[List[TimeRange]] = None):
        self.ranges: List[TimeRange] = list(ranges or [])

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self) -> Iterator[TimeRange]:
        return iter(self.ranges)

    def __getitem__(self, index: int) -> TimeRange:
        return self.ranges[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DaySchedule):
            return NotImplemented
        return self.ranges == other.ranges

    def __repr__(self) -> str:
        return f"DaySchedule({[r.format() for r in self.ranges]})"

    def add(self, time_range: TimeRange) -> int:
        """Append a range and return its stored index"""
        self.ranges.append(time_range)
        return len(self.ranges) - 1

    def replace(self, index: int, time_range: TimeRange) -> TimeRange:
        """Swap the range at index for a new one and return the old one"""
        if not 0 <= index < len(self.ranges):
            raise ScheduleError(f"No time range at index {index}")
        old = self.ranges[index]
        self.ranges[index] = time_range
        return old

    def remove(self, index: Optional[int]) -> Optional[TimeRange]:
        """Remove a range by index, nothing happens for a missing index"""
        if index is not None and 0 <= index < len(self.ranges):
            return self.ranges.pop(index)
        return None

    def sorted_indices(self) -> List[int]:
        """Stored indices in display order (by numeric start time)"""
        return sorted(
            range(len(self.ranges)), key=lambda i: self.ranges[i].as_numbers()
        )

    def display_ranges(self) -> List[TimeRange]:
        return [self.ranges[i] for i in self.sorted_indices()]


class WeekSchedule:
    """
    Seven DaySchedules indexed by Day ordinal.

    Every day is always present; a day without playback is an empty
    DaySchedule.
    """

    def __init__(self, days: Optional[List[DaySchedule]] = None):
        if days is None:
            days = [DaySchedule() for _ in Day]
        if len(days) != len(Day):
            raise ScheduleError(f"A week needs {len(Day)} days, got {len(days)}")
        self.days: List[DaySchedule] = list(days)

    @classmethod
    def empty(cls) -> "WeekSchedule":
        return cls()

    @classmethod
    def seeded(cls, time_range: TimeRange = DEFAULT_RANGE) -> "WeekSchedule":
        """Week with the same single range on every day"""
        return cls([DaySchedule([time_range]) for _ in Day])

    @staticmethod
    def _index(day: DayRef) -> int:
        index = day.value if isinstance(day, Day) else day
        if not isinstance(index, int) or not 0 <= index < len(Day):
            raise ScheduleError(f"Invalid day: {day!r}")
        return index

    def __getitem__(self, day: DayRef) -> DaySchedule:
        return self.days[self._index(day)]

    def __setitem__(self, day: DayRef, day_schedule: DaySchedule) -> None:
        self.days[self._index(day)] = day_schedule

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekSchedule):
            return NotImplemented
        return self.days == other.days

    def __repr__(self) -> str:
        return f"WeekSchedule({self.days})"

    def items(self) -> Iterator[Tuple[Day, DaySchedule]]:
        """Days with their schedules, Monday first"""
        for day in Day:
            yield day, self.days[day.value]

    def add_range(self, day: DayRef, time_range: TimeRange) -> int:
        return self[day].add(time_range)

    def edit_range(self, day: DayRef, index: int, time_range: TimeRange) -> TimeRange:
        return self[day].replace(index, time_range)

    def delete_range(self, day: DayRef, index: Optional[int]) -> Optional[TimeRange]:
        return self[day].remove(index)

    def total_ranges(self) -> int:
        return sum(len(d) for d in self.days)
