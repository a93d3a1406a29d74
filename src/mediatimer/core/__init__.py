"""Core schedule components for MediaTimer"""

from .schedule import (
    Day, TimeRange, DaySchedule, WeekSchedule,
    ScheduleError, TimeFormatError, TimeClashError,
)
from .validate import format_ok, no_clash, check_range
from .vars_file import export_schedule, import_schedule, load_schedule, save_schedule

__all__ = [
    'Day', 'TimeRange', 'DaySchedule', 'WeekSchedule',
    'ScheduleError', 'TimeFormatError', 'TimeClashError',
    'format_ok', 'no_clash', 'check_range',
    'export_schedule', 'import_schedule', 'load_schedule', 'save_schedule',
]
