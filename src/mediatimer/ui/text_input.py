#!/usr/bin/env python3
"""
Single-line text input with a character cursor
"""

from typing import List


class TextInput:
    """Editable line of text; the cursor counts characters, not bytes"""

    def __init__(self, text: str = ""):
        self.chars: List[str] = list(text)
        self.cursor = 0

    @classmethod
    def seeded(cls, text: str) -> "TextInput":
        """Input pre-filled with text and the cursor at the end"""
        text_input = cls(text)
        text_input.move_end()
        return text_input

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self.chars)))

    def insert(self, char: str) -> None:
        self.chars.insert(self.cursor, char)
        self.move_right()

    def delete_before_cursor(self) -> None:
        if self.cursor == 0:
            return
        del self.chars[self.cursor - 1]
        self.move_left()

    def move_left(self) -> None:
        self.cursor = self._clamp(self.cursor - 1)

    def move_right(self) -> None:
        self.cursor = self._clamp(self.cursor + 1)

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.chars)
