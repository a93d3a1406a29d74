#!/usr/bin/env python3
"""
Centralized lightweight logger for MediaTimer.

The curses editor owns the terminal while it runs, so everything goes to a
log file instead. Errors are always written. Info and warnings need
system logging switched on (INI flag), debug lines additionally need the
verbose mode used by --debug, which traces every screen change of the editor.
"""

import os
import sys
import time
from typing import Dict, Optional

LOG_FILENAME = "mediatimer_system.log"
LOG_DIR = "/tmp"
SYSTEM_LOG_PATH = os.path.join(LOG_DIR, LOG_FILENAME)

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}

# Lowest level written, raised or lowered by the launcher
_THRESHOLD = LEVELS["ERROR"]


def _should_log(level: str) -> bool:
    return LEVELS[level] >= _THRESHOLD


def _write(level: str, message: str, component: Optional[str] = None) -> None:
    if not _should_log(level):
        return

    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    if component is None:
        component = os.path.basename(sys.argv[0]) or "mediatimer"
    line = f"[{timestamp}] [{level}] [{component}] (pid={os.getpid()}) {message}\n"
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        with open(SYSTEM_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError:
        # stderr only shows up after curses has restored the terminal
        if level == "ERROR":
            sys.stderr.write(line)


def log_debug(message: str, component: Optional[str] = None) -> None:
    _write("DEBUG", message, component)


def log_info(message: str, component: Optional[str] = None) -> None:
    _write("INFO", message, component)


def log_warning(message: str, component: Optional[str] = None) -> None:
    _write("WARN", message, component)


def log_error(message: str, component: Optional[str] = None) -> None:
    _write("ERROR", message, component)


def enable_system_logging(enabled: bool = True, verbose: bool = False) -> None:
    """Switch info/warning logging on or off; verbose adds debug lines"""
    global _THRESHOLD
    if not enabled:
        _THRESHOLD = LEVELS["ERROR"]
    elif verbose:
        _THRESHOLD = LEVELS["DEBUG"]
    else:
        _THRESHOLD = LEVELS["INFO"]


def set_log_dir(directory: str) -> None:
    """Redirect the system log into another directory"""
    global LOG_DIR, SYSTEM_LOG_PATH
    LOG_DIR = os.path.expanduser(directory)
    SYSTEM_LOG_PATH = os.path.join(LOG_DIR, LOG_FILENAME)


def log_file_paths() -> Dict[str, str]:
    """Return paths to the logs for user convenience."""
    return {
        "system": SYSTEM_LOG_PATH,
    }
