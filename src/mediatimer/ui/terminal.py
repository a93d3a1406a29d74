#!/usr/bin/env python3
"""
Curses front end for the MediaTimer schedule editor
Paints the editor state and feeds key presses back into it
"""

import curses
from typing import List, Optional

from .editor import CONFIRM_CHOICES, TIMING_OPTIONS, ScheduleEditor, Screen
from .keys import KeyEvent, translate_key

HEADER = "Make the schedule"


class CursesTerminal:
    """Draws a ScheduleEditor on a curses window"""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.cursor_position: Optional[tuple] = None

    def read_key(self) -> Optional[KeyEvent]:
        """Block until a key the editor understands arrives"""
        while True:
            try:
                raw = self.stdscr.get_wch()
            except KeyboardInterrupt:
                return None
            except curses.error:
                continue
            event = translate_key(raw)
            if event is not None:
                return event

    def _put(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
        height, width = self.stdscr.getmaxyx()
        if row >= height or col >= width:
            return
        try:
            self.stdscr.addnstr(row, col, text, width - col - 1, attr)
        except curses.error:
            # Writing the bottom-right cell raises even though it succeeds
            pass

    def _put_list(self, row: int, title: str, items: List[str], selected: Optional[int]) -> int:
        self._put(row, 2, title, curses.A_BOLD)
        row += 1
        if not items:
            self._put(row, 4, "(no time ranges)", curses.A_DIM)
            return row + 1
        for index, item in enumerate(items):
            if index == selected:
                self._put(row, 2, f"> {item}", curses.A_REVERSE)
            else:
                self._put(row, 2, f"  {item}")
            row += 1
        return row

    def paint(self, editor: ScheduleEditor) -> None:
        self.stdscr.erase()
        self.cursor_position = None
        height, _ = self.stdscr.getmaxyx()

        self._put(0, 0, HEADER, curses.A_BOLD)
        row = 2
        screen = editor.screen
        day = editor.current_day
        day_ranges = [r.format() for r in editor.day_schedule.display_ranges()]

        if screen is Screen.WEEKDAYS:
            labels = [
                f"{d.label:<10} {len(editor.schedule[d])} range(s)"
                for d in editor.weekdays.items
            ]
            self._put_list(row, "Select a day", labels, editor.weekdays.selected)

        elif screen is Screen.DAY:
            self._put_list(row, f"{day.label} schedule", day_ranges, editor.ranges.selected)

        elif screen is Screen.TIMING_OPTIONS:
            row = self._put_list(row, f"{day.label} schedule", day_ranges, editor.ranges.selected)
            self._put_list(row + 1, "Select an operation", TIMING_OPTIONS, editor.options.selected)

        elif screen in (Screen.ADD, Screen.EDIT):
            title = "Add time range" if screen is Screen.ADD else "Edit time range"
            self._put(row, 2, f"{title} for {day.label}", curses.A_BOLD)
            text_input = editor.text_input
            text = text_input.text if text_input else ""
            self._put(row + 2, 2, "[ ")
            self._put(row + 2, 4, text)
            self._put(row + 2, 5 + len(text), "]")
            cursor = text_input.cursor if text_input else 0
            self.cursor_position = (row + 2, 4 + cursor)

        elif screen is Screen.DELETE:
            selected = editor.selected_range
            target = selected.format() if selected else "nothing"
            self._put_list(row, f"Delete {target} from {day.label}?", CONFIRM_CHOICES, editor.confirm.selected)

        elif screen is Screen.ERROR:
            self._put(row, 2, "ERROR", curses.A_BOLD)
            self._put(row + 2, 2, editor.error_message)

        elif screen is Screen.EXIT:
            self._put_list(row, "Save the schedule and exit?", CONFIRM_CHOICES, editor.confirm.selected)

        self._put(height - 1, 0, editor.help_text(), curses.A_DIM)

        try:
            if self.cursor_position is not None:
                curses.curs_set(1)
                self.stdscr.move(*self.cursor_position)
            else:
                curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor
            pass
        self.stdscr.refresh()


def run_in_terminal(editor: ScheduleEditor):
    """Run the editor on the real terminal, returns the confirmed schedule or None"""

    def _main(stdscr):
        stdscr.keypad(True)
        curses.set_escdelay(25)
        terminal = CursesTerminal(stdscr)
        return editor.run(terminal.read_key, terminal.paint)

    return curses.wrapper(_main)
