#!/usr/bin/env python3
"""
Time Range Validation for MediaTimer
Checks the textual range format and overlaps between ranges of one day
"""

import re
from typing import Optional

from .schedule import DaySchedule, TimeClashError, TimeFormatError, TimeRange

RANGE_PATTERN = "HH:MM:SS-HH:MM:SS"

_RANGE_RE = re.compile(
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})-([0-9]{2}):([0-9]{2}):([0-9]{2})"
)


def format_ok(text: str) -> bool:
    """True when text is HH:MM:SS-HH:MM:SS with hours < 24 and minutes/seconds < 60"""
    match = _RANGE_RE.fullmatch(text)
    if not match:
        return False
    fields = [int(group) for group in match.groups()]
    for hours, minutes, seconds in (fields[:3], fields[3:]):
        if hours >= 24 or minutes >= 60 or seconds >= 60:
            return False
    return True


def find_clash(
    candidate: TimeRange, day_schedule: DaySchedule, exclude_index: Optional[int] = None
) -> Optional[TimeRange]:
    """Return the first existing range that overlaps the candidate, if any"""
    cs, ce = candidate.as_numbers()
    for index, existing in enumerate(day_schedule):
        if index == exclude_index:
            continue
        ts, te = existing.as_numbers()
        if (
            ts <= cs <= te
            or ts <= ce <= te
            or (cs <= ts and ce >= te)
            or (cs >= ts and ce <= te)
        ):
            return existing
    return None


def no_clash(
    candidate: TimeRange, day_schedule: DaySchedule, exclude_index: Optional[int] = None
) -> bool:
    """True when the candidate overlaps no range of the day except the excluded one"""
    return find_clash(candidate, day_schedule, exclude_index) is None


def check_range(
    text: str, day_schedule: DaySchedule, exclude_index: Optional[int] = None
) -> TimeRange:
    """
    Gate a committed edit.

    Raises TimeFormatError when the text is not a valid range and
    TimeClashError when it overlaps the day; returns the parsed range otherwise.
    """
    if not format_ok(text):
        raise TimeFormatError(f"Time range must use the format {RANGE_PATTERN}: {text!r}")

    candidate = TimeRange.parse(text)
    conflict = find_clash(candidate, day_schedule, exclude_index)
    if conflict is not None:
        raise TimeClashError(
            f"{candidate.format()} clashes with {conflict.format()}", conflict
        )
    return candidate
