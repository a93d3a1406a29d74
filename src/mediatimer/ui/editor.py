#!/usr/bin/env python3
"""
Interactive Weekly Schedule Editor for MediaTimer
Navigation state machine: weekdays -> day -> timing options -> add/edit/delete
"""

from enum import Enum
from typing import Any, Callable, List, Optional

from ..core.logger import log_debug, log_info, log_warning
from ..core.schedule import (
    Day,
    DaySchedule,
    TimeClashError,
    TimeFormatError,
    TimeRange,
    WeekSchedule,
)
from ..core.validate import RANGE_PATTERN, check_range
from .keys import Key, KeyEvent
from .text_input import TextInput

TIMING_OPTIONS = ["Add", "Delete", "Edit"]
CONFIRM_CHOICES = ["Yes", "No"]


class Screen(Enum):
    """Screens of the schedule editor"""

    WEEKDAYS = "weekdays"
    DAY = "day"
    TIMING_OPTIONS = "timing_options"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    ERROR = "error"
    EXIT = "exit"


class ErrorKind(Enum):
    FORMAT = "format"
    CLASH = "clash"


class ListAction(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    FIRST = "first"
    LAST = "last"
    CONFIRM = "confirm"
    BACK = "back"


_LIST_KEYS = {
    Key.DOWN: ListAction.NEXT,
    Key.UP: ListAction.PREVIOUS,
    Key.HOME: ListAction.FIRST,
    Key.END: ListAction.LAST,
    Key.RIGHT: ListAction.CONFIRM,
    Key.ENTER: ListAction.CONFIRM,
    Key.LEFT: ListAction.BACK,
    Key.BACKSPACE: ListAction.BACK,
    Key.ESCAPE: ListAction.BACK,
}

_LIST_CHARS = {
    "j": ListAction.NEXT,
    "k": ListAction.PREVIOUS,
    "g": ListAction.FIRST,
    "G": ListAction.LAST,
    "l": ListAction.CONFIRM,
    "h": ListAction.BACK,
    "q": ListAction.BACK,
}


def list_action(event: KeyEvent) -> Optional[ListAction]:
    """Interpret a key on a list screen"""
    if event.key is Key.CHAR:
        return _LIST_CHARS.get(event.char)
    return _LIST_KEYS.get(event.key)


class ListSelection:
    """Items shown as a list plus the selected index, kept within bounds"""

    def __init__(self, items: Optional[List[Any]] = None, selected: Optional[int] = 0):
        self.items: List[Any] = list(items or [])
        self.selected: Optional[int] = None
        self.select(selected)

    def select(self, index: Optional[int]) -> None:
        if not self.items or index is None:
            self.selected = None
        else:
            self.selected = max(0, min(index, len(self.items) - 1))

    def set_items(self, items: List[Any]) -> None:
        """Replace the items and clamp the selection"""
        self.items = list(items)
        self.select(self.selected if self.selected is not None else 0)

    def select_next(self) -> None:
        self.select(0 if self.selected is None else self.selected + 1)

    def select_previous(self) -> None:
        self.select(0 if self.selected is None else self.selected - 1)

    def select_first(self) -> None:
        self.select(0)

    def select_last(self) -> None:
        self.select(len(self.items) - 1)

    def move(self, action: ListAction) -> bool:
        """Apply a movement action, False when the action is not a movement"""
        if action is ListAction.NEXT:
            self.select_next()
        elif action is ListAction.PREVIOUS:
            self.select_previous()
        elif action is ListAction.FIRST:
            self.select_first()
        elif action is ListAction.LAST:
            self.select_last()
        else:
            return False
        return True

    @property
    def current(self) -> Any:
        if self.selected is None:
            return None
        return self.items[self.selected]


class ScheduleEditor:
    """
    Weekly schedule editor driven by one key event at a time.

    The editor owns the WeekSchedule for the whole session. Every committed
    Add/Edit goes through check_range() first, so nothing invalid ever
    reaches the schedule. `finished` turns True once the operator confirms
    the exit prompt.
    """

    def __init__(self, schedule: Optional[WeekSchedule] = None):
        self.schedule = schedule if schedule is not None else WeekSchedule.empty()
        self.screen = Screen.WEEKDAYS
        self.finished = False

        self.weekdays = ListSelection(list(Day))
        self.ranges = ListSelection()
        self.options = ListSelection(TIMING_OPTIONS)
        self.confirm = ListSelection(CONFIRM_CHOICES)

        self.day_selected = 0
        # Stored index into the day's ranges, None when the day is empty
        self.range_selected: Optional[int] = None

        self.text_input: Optional[TextInput] = None
        self.error_kind: Optional[ErrorKind] = None
        self.error_message = ""
        self.origin: Optional[Screen] = None

        self._handlers = {
            Screen.WEEKDAYS: self._handle_weekdays,
            Screen.DAY: self._handle_day,
            Screen.TIMING_OPTIONS: self._handle_timing_options,
            Screen.ADD: self._handle_text_entry,
            Screen.EDIT: self._handle_text_entry,
            Screen.DELETE: self._handle_delete,
            Screen.ERROR: self._handle_error,
            Screen.EXIT: self._handle_exit,
        }

    # ------------------------------------------------------------------
    # Accessors used by the painter
    # ------------------------------------------------------------------

    @property
    def current_day(self) -> Day:
        return Day(self.day_selected)

    @property
    def day_schedule(self) -> DaySchedule:
        return self.schedule[self.day_selected]

    @property
    def selected_range(self) -> Optional[TimeRange]:
        if self.range_selected is None or self.range_selected >= len(self.day_schedule):
            return None
        return self.day_schedule[self.range_selected]

    def help_text(self) -> str:
        if self.screen in (Screen.ADD, Screen.EDIT):
            return f"Type the range as {RANGE_PATTERN}. Enter saves, Esc cancels."
        if self.screen is Screen.ERROR:
            return "Press any key to correct the time range."
        if self.screen is Screen.WEEKDAYS:
            return "Use ↓↑ to move, → or Enter to open a day, Esc to finish."
        return "Use ↓↑ to move, → or Enter to select, ← or Backspace to go back."

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    def run(
        self,
        read_key: Callable[[], Optional[KeyEvent]],
        paint: Callable[["ScheduleEditor"], None],
    ) -> Optional[WeekSchedule]:
        """Paint, wait for a key, apply it; returns the schedule once confirmed"""
        log_info("Schedule editor started", component="editor")
        while not self.finished:
            paint(self)
            event = read_key()
            if event is None:
                log_warning(
                    "Key input ended before the schedule was confirmed",
                    component="editor",
                )
                return None
            self.handle_key(event)

        log_info(
            f"Schedule confirmed with {self.schedule.total_ranges()} time ranges",
            component="editor",
        )
        return self.schedule

    def handle_key(self, event: KeyEvent) -> None:
        """Apply at most one transition for a key press"""
        if event.release or self.finished:
            return
        before = self.screen
        self._handlers[self.screen](event)
        if self.screen is not before:
            log_debug(f"{before.name} -> {self.screen.name}", component="editor")

    # ------------------------------------------------------------------
    # Screen handlers
    # ------------------------------------------------------------------

    def _handle_weekdays(self, event: KeyEvent) -> None:
        action = list_action(event)
        if action is None or self.weekdays.move(action):
            return
        if action is ListAction.CONFIRM:
            self.day_selected = self.weekdays.selected or 0
            self.ranges = ListSelection()
            self._show_day()
        elif action is ListAction.BACK:
            self.confirm.select_first()
            self.screen = Screen.EXIT

    def _handle_day(self, event: KeyEvent) -> None:
        action = list_action(event)
        if action is None or self.ranges.move(action):
            return
        if action is ListAction.CONFIRM:
            self.range_selected = self._stored_index(self.ranges.selected)
            self.options.select_first()
            self.screen = Screen.TIMING_OPTIONS
        elif action is ListAction.BACK:
            self.screen = Screen.WEEKDAYS

    def _handle_timing_options(self, event: KeyEvent) -> None:
        action = list_action(event)
        if action is None or self.options.move(action):
            return
        if action is ListAction.BACK:
            self._show_day()
            return
        if action is not ListAction.CONFIRM:
            return

        option = self.options.current
        if option == "Add":
            self.text_input = TextInput()
            self.screen = Screen.ADD
        elif option == "Edit":
            selected = self.selected_range
            if selected is None:
                # Nothing to edit on an empty day
                self._show_day()
                return
            self.text_input = TextInput.seeded(selected.format())
            self.screen = Screen.EDIT
        elif option == "Delete":
            self.confirm.select_first()
            self.screen = Screen.DELETE

    def _handle_text_entry(self, event: KeyEvent) -> None:
        text_input = self.text_input
        if text_input is None:
            text_input = self.text_input = TextInput()

        if event.key is Key.CHAR:
            text_input.insert(event.char)
        elif event.key is Key.LEFT:
            text_input.move_left()
        elif event.key is Key.RIGHT:
            text_input.move_right()
        elif event.key is Key.HOME:
            text_input.move_home()
        elif event.key is Key.END:
            text_input.move_end()
        elif event.key is Key.BACKSPACE:
            text_input.delete_before_cursor()
        elif event.key is Key.ESCAPE:
            self.text_input = None
            self.screen = Screen.TIMING_OPTIONS
        elif event.key is Key.ENTER:
            self._commit()

    def _handle_delete(self, event: KeyEvent) -> None:
        action = list_action(event)
        if action is None or self.confirm.move(action):
            return
        if action is ListAction.CONFIRM and self.confirm.current == "Yes":
            removed = self.schedule.delete_range(self.day_selected, self.range_selected)
            if removed is not None:
                log_info(
                    f"Removed {removed.format()} from {self.current_day.label}",
                    component="editor",
                )
            self.range_selected = None
        self._show_day()

    def _handle_error(self, event: KeyEvent) -> None:
        if self.origin in (Screen.ADD, Screen.EDIT):
            self.screen = self.origin
        else:
            self.screen = Screen.TIMING_OPTIONS
        self.error_kind = None
        self.error_message = ""

    def _handle_exit(self, event: KeyEvent) -> None:
        action = list_action(event)
        if action is None or self.confirm.move(action):
            return
        if action is ListAction.CONFIRM and self.confirm.current == "Yes":
            self.finished = True
            return
        self.screen = Screen.WEEKDAYS

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _show_day(self) -> None:
        self.ranges.set_items(self.day_schedule.display_ranges())
        self.screen = Screen.DAY

    def _focus_range(self, stored: int) -> None:
        """Select a stored range and highlight its row in the sorted list"""
        self.range_selected = stored
        self.ranges.set_items(self.day_schedule.display_ranges())
        self.ranges.select(self.day_schedule.sorted_indices().index(stored))

    def _stored_index(self, display_index: Optional[int]) -> Optional[int]:
        """Translate a row of the sorted day list to the stored range index"""
        if display_index is None:
            return None
        order = self.day_schedule.sorted_indices()
        if not 0 <= display_index < len(order):
            return None
        return order[display_index]

    def _commit(self) -> None:
        editing = self.screen is Screen.EDIT
        exclude = self.range_selected if editing else None
        text = self.text_input.text.strip() if self.text_input else ""

        try:
            time_range = check_range(text, self.day_schedule, exclude)
        except TimeFormatError as e:
            self._show_error(
                ErrorKind.FORMAT,
                f"Formatting error! Time ranges must look like {RANGE_PATTERN}, "
                "for example 09:00:00-17:00:00.",
            )
            log_warning(str(e), component="editor")
            return
        except TimeClashError as e:
            conflict = e.conflict.format() if e.conflict else "another range"
            self._show_error(
                ErrorKind.CLASH,
                f"Clash error! {text} overlaps {conflict} on {self.current_day.label}.",
            )
            log_warning(str(e), component="editor")
            return

        if editing and self.range_selected is not None:
            old = self.schedule.edit_range(self.day_selected, self.range_selected, time_range)
            log_info(
                f"{self.current_day.label}: {old.format()} -> {time_range.format()}",
                component="editor",
            )
            stored = self.range_selected
        else:
            stored = self.schedule.add_range(self.day_selected, time_range)
            log_info(
                f"{self.current_day.label}: added {time_range.format()}",
                component="editor",
            )

        self._focus_range(stored)
        self.text_input = None
        self.screen = Screen.TIMING_OPTIONS

    def _show_error(self, kind: ErrorKind, message: str) -> None:
        self.origin = self.screen
        self.error_kind = kind
        self.error_message = message
        self.screen = Screen.ERROR
