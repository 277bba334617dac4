"""Editable search query with a character cursor."""

from __future__ import annotations

from ..actions import SearchEdit


class SearchQuery:
    """Query text plus cursor position, counted in characters."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = len(text)

    def is_empty(self) -> bool:
        return not self.text

    def reset(self) -> None:
        self.text = ""
        self.cursor = 0

    def insert(self, char: str) -> None:
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self.cursor += len(char)

    def remove_left(self) -> bool:
        """Delete the character before the cursor; return whether text changed."""
        if self.cursor == 0:
            return False
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1
        return True

    def remove_right(self) -> bool:
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]
        return True

    def edit(self, command: SearchEdit) -> bool:
        """Apply one edit command; return whether the query text changed."""
        if command is SearchEdit.REMOVE_LEFT:
            return self.remove_left()
        if command is SearchEdit.REMOVE_RIGHT:
            return self.remove_right()
        if command is SearchEdit.MOVE_LEFT:
            self.cursor = max(0, self.cursor - 1)
        elif command is SearchEdit.MOVE_RIGHT:
            self.cursor = min(len(self.text), self.cursor + 1)
        elif command is SearchEdit.MOVE_TO_START:
            self.cursor = 0
        elif command is SearchEdit.MOVE_TO_END:
            self.cursor = len(self.text)
        return False


__all__ = ["SearchQuery"]
