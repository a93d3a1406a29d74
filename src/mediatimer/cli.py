#!/usr/bin/env python3
"""
MediaTimer command line entry point
Loads the saved schedule, runs the editor and writes the vars file on confirmation
"""

import argparse
import curses
import os
import sys
from typing import List, Optional

from .config import ConfigManager, ConfigurationError
from .core.logger import (
    enable_system_logging,
    log_error,
    log_file_paths,
    log_info,
    set_log_dir,
)
from .core.schedule import WeekSchedule
from .core.vars_file import export_schedule, load_schedule, save_schedule
from .ui.editor import ScheduleEditor
from .ui.terminal import run_in_terminal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MediaTimer weekly schedule editor")
    parser.add_argument(
        "--config", default="mediatimer.ini", help="Configuration file (INI)"
    )
    parser.add_argument("--vars-file", help="Vars file to edit, overrides the config")
    parser.add_argument(
        "--debug", action="store_true", help="Enable system logging with debug traces"
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the saved schedule and exit",
    )
    return parser


def initial_schedule(vars_file: str, prefix: str, seed: bool) -> WeekSchedule:
    """Schedule to start editing from"""
    if os.path.exists(vars_file):
        return load_schedule(vars_file, prefix)
    if seed:
        log_info("Seeding every day with the default range", component="cli")
        return WeekSchedule.seeded()
    return WeekSchedule.empty()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    set_log_dir(config.log_dir)
    if args.debug or config.enable_system_logging:
        enable_system_logging(True, verbose=args.debug)
        log_info(f"Logging to {log_file_paths()['system']}", component="cli")

    vars_file = os.path.expanduser(args.vars_file or config.vars_file)
    prefix = config.key_prefix
    week = initial_schedule(vars_file, prefix, config.seed_default_range)

    if args.print_only:
        sys.stdout.write(export_schedule(week, prefix))
        return 0

    try:
        schedule = run_in_terminal(ScheduleEditor(week))
    except curses.error as e:
        log_error(f"Terminal error: {e}", component="cli")
        print(f"❌ Could not start the terminal interface: {e}", file=sys.stderr)
        return 1

    if schedule is None:
        print("Schedule not saved.")
        return 0

    try:
        save_schedule(vars_file, schedule, prefix)
    except (OSError, UnicodeError) as e:
        log_error(f"Could not write {vars_file}: {e}", component="cli")
        print(f"❌ Could not write {vars_file}: {e}", file=sys.stderr)
        return 1

    print(f"✅ Schedule saved to {vars_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
