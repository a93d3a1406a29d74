#!/usr/bin/env python3
"""
Tests for reading and writing the schedule vars file
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mediatimer.core.schedule import Day, TimeRange, WeekSchedule
from mediatimer.core.vars_file import (
    export_schedule,
    import_schedule,
    load_schedule,
    merge_schedule,
    parse_day_value,
    save_schedule,
)

EMPTY_EXPORT = (
    "MT_MONDAY=\n"
    "MT_TUESDAY=\n"
    "MT_WEDNESDAY=\n"
    "MT_THURSDAY=\n"
    "MT_FRIDAY=\n"
    "MT_SATURDAY=\n"
    "MT_SUNDAY=\n"
)


def sample_week():
    week = WeekSchedule.empty()
    week.add_range(Day.MONDAY, TimeRange("09:00:00", "12:00:00"))
    week.add_range(Day.MONDAY, TimeRange("13:00:00", "17:00:00"))
    week.add_range(Day.FRIDAY, TimeRange("18:00:00", "19:30:00"))
    week.add_range(Day.FRIDAY, TimeRange("15:30:00", "16:45:00"))
    week.add_range(Day.SUNDAY, TimeRange("22:00:00", "02:00:00"))
    return week


def test_export_empty_week():
    assert export_schedule(WeekSchedule.empty()) == EMPTY_EXPORT


def test_export_keeps_day_order_and_stored_order():
    lines = export_schedule(sample_week()).splitlines()
    assert lines[0] == "MT_MONDAY=09:00:00-12:00:00,13:00:00-17:00:00"
    assert lines[4] == "MT_FRIDAY=18:00:00-19:30:00,15:30:00-16:45:00"
    assert lines[6] == "MT_SUNDAY=22:00:00-02:00:00"
    assert [line.split("=")[0] for line in lines] == [f"MT_{d.name}" for d in Day]


def test_export_with_custom_prefix():
    assert export_schedule(WeekSchedule.empty(), prefix="ML_").startswith("ML_MONDAY=\n")


def test_round_trip():
    week = sample_week()
    text = export_schedule(week)
    assert import_schedule(text) == week
    assert export_schedule(import_schedule(text)) == text


def test_import_later_keys_override_and_unknown_keys_ignored():
    text = (
        "ML_PROCTYPE=\"media\"\n"
        "MT_MONDAY=09:00:00-10:00:00\n"
        "MT_MONDAY=11:00:00-12:00:00\n"
        "MT_HOLIDAY=00:00:00-23:00:00\n"
    )
    week = import_schedule(text)
    assert list(week[Day.MONDAY]) == [TimeRange("11:00:00", "12:00:00")]
    assert week.total_ranges() == 1


def test_import_skips_comments_and_strips_quotes():
    text = (
        "# Remove the '#' to enable a day\n"
        "#MT_TUESDAY=\"09:00-12:00\"\n"
        "\n"
        "  MT_WEDNESDAY = \"08:00:00-09:00:00,10:00:00-11:00:00\"  \n"
        "export MT_THURSDAY='07:00:00-07:30:00'\n"
    )
    week = import_schedule(text)
    assert len(week[Day.TUESDAY]) == 0
    assert list(week[Day.WEDNESDAY]) == [
        TimeRange("08:00:00", "09:00:00"),
        TimeRange("10:00:00", "11:00:00"),
    ]
    assert list(week[Day.THURSDAY]) == [TimeRange("07:00:00", "07:30:00")]


def test_import_normalizes_minute_format():
    week = import_schedule("MT_SATURDAY=09:00-12:00,13:00-17:00:30\n")
    assert list(week[Day.SATURDAY]) == [
        TimeRange("09:00:00", "12:00:00"),
        TimeRange("13:00:00", "17:00:30"),
    ]


def test_malformed_day_degrades_to_empty():
    text = (
        "MT_MONDAY=09:00:00-10:00:00,garbage\n"
        "MT_TUESDAY=25:00:00-26:00:00\n"
        "MT_WEDNESDAY=09:00:00\n"
        "MT_THURSDAY=09:00:00-10:00:00\n"
    )
    week = import_schedule(text)
    assert len(week[Day.MONDAY]) == 0
    assert len(week[Day.TUESDAY]) == 0
    assert len(week[Day.WEDNESDAY]) == 0
    assert list(week[Day.THURSDAY]) == [TimeRange("09:00:00", "10:00:00")]


def test_parse_day_value():
    assert parse_day_value("") == []
    assert parse_day_value("09:00:00-10:00:00,") == [TimeRange("09:00:00", "10:00:00")]
    assert parse_day_value("09:00:00-10:00:00-11:00:00") is None


def test_load_missing_file_gives_empty_week(tmp_path):
    assert load_schedule(tmp_path / "missing") == WeekSchedule.empty()


def test_save_creates_directory_and_loads_back(tmp_path):
    vars_file = tmp_path / "medialoop_config" / "vars"
    save_schedule(vars_file, sample_week())
    assert vars_file.read_text(encoding="utf-8") == export_schedule(sample_week())
    assert load_schedule(vars_file) == sample_week()


def test_save_preserves_unrelated_lines(tmp_path):
    vars_file = tmp_path / "vars"
    vars_file.write_text(
        "ML_PROCTYPE=\"media\"\n"
        "# Change this to 'true' if you want to use a custom schedule\n"
        "MT_MONDAY=01:00:00-02:00:00\n"
        "ML_FILE=\"/mnt/usb_sda1/loop.mp4\"\n"
        "MT_MONDAY=03:00:00-04:00:00\n",
        encoding="utf-8",
    )
    save_schedule(vars_file, sample_week())

    lines = vars_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "ML_PROCTYPE=\"media\""
    assert lines[1].startswith("# Change this")
    assert lines[2] == "MT_MONDAY=09:00:00-12:00:00,13:00:00-17:00:00"
    assert lines[3] == "ML_FILE=\"/mnt/usb_sda1/loop.mp4\""
    assert lines[4:] == [
        "MT_TUESDAY=",
        "MT_WEDNESDAY=",
        "MT_THURSDAY=",
        "MT_FRIDAY=18:00:00-19:30:00,15:30:00-16:45:00",
        "MT_SATURDAY=",
        "MT_SUNDAY=22:00:00-02:00:00",
    ]
    assert load_schedule(vars_file) == sample_week()


def test_save_keeps_undecodable_bytes(tmp_path):
    vars_file = tmp_path / "vars"
    vars_file.write_bytes(b"ML_FILE=\xff\xfe\nMT_MONDAY=01:00:00-02:00:00\n")

    week = load_schedule(vars_file)
    assert list(week[Day.MONDAY]) == [TimeRange("01:00:00", "02:00:00")]

    save_schedule(vars_file, sample_week())
    data = vars_file.read_bytes()
    assert data.startswith(b"ML_FILE=\xff\xfe\nMT_MONDAY=09:00:00-12:00:00,")
    assert load_schedule(vars_file) == sample_week()


def test_merge_into_empty_text_is_plain_export():
    assert merge_schedule("", sample_week()) == export_schedule(sample_week())
