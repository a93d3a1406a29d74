#!/usr/bin/env python3
"""
Vars File Serialization for MediaTimer
Converts the weekly schedule to and from the flat KEY=VALUE file read by the playback service
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .logger import log_error, log_info, log_warning
from .schedule import Day, TimeRange, WeekSchedule
from .validate import format_ok

DEFAULT_PREFIX = "MT_"

_MINUTE_FIELD_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")


def day_key(day: Day, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{prefix}{day.key_name}"


def export_schedule(week: WeekSchedule, prefix: str = DEFAULT_PREFIX) -> str:
    """Render one KEY=VALUE line per day, Monday to Sunday"""
    lines = []
    for day, day_schedule in week.items():
        value = ",".join(r.format() for r in day_schedule)
        lines.append(f"{day_key(day, prefix)}={value}\n")
    return "".join(lines)


def _split_line(line: str) -> Optional[Tuple[str, str]]:
    """Return (key, raw_value) for a KEY=VALUE line, None for blanks and comments"""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    if stripped.startswith("export "):
        stripped = stripped[len("export ") :].lstrip()
    key, sep, value = stripped.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_pairs(text: str) -> Dict[str, str]:
    """Parse KEY=VALUE lines, later duplicates override earlier ones"""
    pairs: Dict[str, str] = {}
    for line in text.splitlines():
        parsed = _split_line(line)
        if parsed is None:
            continue
        key, value = parsed
        pairs[key] = _strip_quotes(value)
    return pairs


def _normalize_field(field: str) -> str:
    """Expand minute-format HH:MM to HH:MM:00"""
    field = field.strip()
    if _MINUTE_FIELD_RE.match(field):
        return f"{field}:00"
    return field


def parse_day_value(value: str) -> Optional[List[TimeRange]]:
    """Parse "start-end,start-end" into ranges, None when any segment is malformed"""
    ranges: List[TimeRange] = []
    for segment in value.split(","):
        segment = segment.strip()
        if not segment:
            continue
        start, sep, end = segment.partition("-")
        if not sep:
            return None
        time_range = TimeRange(_normalize_field(start), _normalize_field(end))
        if not format_ok(time_range.format()):
            return None
        ranges.append(time_range)
    return ranges


def import_schedule(text: str, prefix: str = DEFAULT_PREFIX) -> WeekSchedule:
    """Rebuild a week from vars file text; malformed days come back empty"""
    pairs = parse_pairs(text)
    week = WeekSchedule.empty()
    for day in Day:
        key = day_key(day, prefix)
        if key not in pairs:
            continue
        ranges = parse_day_value(pairs[key])
        if ranges is None:
            log_warning(
                f"Ignoring malformed schedule for {day.label}: {pairs[key]!r}",
                component="vars",
            )
            continue
        for time_range in ranges:
            week.add_range(day, time_range)
    return week


def load_schedule(
    path: Union[str, Path], prefix: str = DEFAULT_PREFIX
) -> WeekSchedule:
    """Read a vars file, an unreadable or missing file gives an empty week"""
    vars_path = Path(path)
    if not vars_path.exists():
        log_info(f"No vars file at {vars_path}, starting empty", component="vars")
        return WeekSchedule.empty()

    try:
        text = vars_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        log_error(f"Could not read vars file {vars_path}: {e}", component="vars")
        return WeekSchedule.empty()

    week = import_schedule(text, prefix)
    log_info(
        f"Loaded {week.total_ranges()} time ranges from {vars_path}", component="vars"
    )
    return week


def merge_schedule(existing: str, week: WeekSchedule, prefix: str = DEFAULT_PREFIX) -> str:
    """Replace the day lines of existing vars text, keeping every other line"""
    exported = export_schedule(week, prefix).splitlines()
    new_lines = {day_key(day, prefix): line for day, line in zip(Day, exported)}
    written = set()
    output: List[str] = []

    for line in existing.splitlines():
        parsed = _split_line(line)
        key = parsed[0] if parsed else None
        if key in new_lines:
            if key not in written:
                output.append(new_lines[key])
                written.add(key)
            continue
        output.append(line)

    for day in Day:
        key = day_key(day, prefix)
        if key not in written:
            output.append(new_lines[key])

    return "\n".join(output) + "\n"


def save_schedule(
    path: Union[str, Path], week: WeekSchedule, prefix: str = DEFAULT_PREFIX
) -> None:
    """Write the week into a vars file, creating its directory when needed"""
    vars_path = Path(path)
    vars_path.parent.mkdir(parents=True, exist_ok=True)

    # Undecodable bytes in lines owned by other tools are written back unchanged
    existing = ""
    if vars_path.exists():
        existing = vars_path.read_text(encoding="utf-8", errors="surrogateescape")

    vars_path.write_text(
        merge_schedule(existing, week, prefix),
        encoding="utf-8",
        errors="surrogateescape",
    )
    log_info(
        f"Saved {week.total_ranges()} time ranges to {vars_path}", component="vars"
    )
