"""User actions on the to-do list, independent of any window system."""

from __future__ import annotations

import contextlib
import os
from typing import Callable, Optional, Tuple, Union

from .layout import Target, hit_test
from .settings import load_dark_mode, save_dark_mode
from .store import TodoItem, TodoStore
from .theme import Palette, palette

StrPath = Union[str, "os.PathLike[str]"]

DELETE_PROMPT = "Are you sure you want to delete this item?"
FOCUS_CONTROLS = 2


class TodoController:
    """Holds the theme and selection state and applies user actions to a store."""

    def __init__(
        self,
        store: TodoStore,
        settings_path: StrPath,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.store = store
        self.settings_path = settings_path
        self.confirm = confirm
        self.dark = load_dark_mode(settings_path)
        self.selected: Optional[int] = None

    @property
    def palette(self) -> Palette:
        """Colours for the current theme."""
        return palette(self.dark)

    def toggle_theme(self) -> bool:
        """Switch between light and dark theme, remember it, and return the new state."""
        self.dark = not self.dark
        with contextlib.suppress(OSError):
            save_dark_mode(self.settings_path, self.dark)
        return self.dark

    def _selection(self) -> Optional[int]:
        if self.selected is not None and 0 <= self.selected < len(self.store):
            return self.selected
        return None

    def _confirmed(self, message: str) -> bool:
        # Without a confirmation callback, deletions go ahead unasked.
        if self.confirm is None:
            return True
        return bool(self.confirm(message))

    def submit(self, text1: str, text2: str) -> Optional[TodoItem]:
        """Update the selected item, or add a new one when nothing is selected.

        The selection is cleared afterwards in every case. OSError from
        writing a new item propagates.
        """
        index = self._selection()
        try:
            if index is not None:
                return self.store.update(index, text1, text2)
            return self.store.add(text1, text2)
        finally:
            self.selected = None

    def select(self, index: Optional[int]) -> None:
        """Select the item at ``index``, or clear the selection with None."""
        if index is not None and not 0 <= index < len(self.store):
            raise IndexError(f"no to-do item at index {index}")
        self.selected = index

    def delete_selected(self) -> Optional[TodoItem]:
        """Delete the selected item, if any, and clear the selection."""
        index = self._selection()
        if index is None:
            return None
        item = self.store.delete(index)
        self.selected = None
        return item

    def handle_char(self, char: str, text1: str, text2: str) -> bool:
        """Apply a keyboard shortcut; return whether it did anything.

        ``N`` adds the given texts, ``D`` deletes the first item and ``T``
        toggles the first item.
        """
        if char == "N":
            return self.store.add(text1, text2) is not None
        if char == "D" and len(self.store):
            self.store.delete(0)
            return True
        if char == "T" and len(self.store):
            self.store.toggle(0)
            return True
        return False

    def click(self, x: int, y: int) -> Optional[Tuple[Target, int]]:
        """Handle a click in the list area and return what was hit."""
        hit = hit_test(x, y, len(self.store))
        if hit is None:
            return None
        target, index = hit
        if target is Target.CHECKBOX:
            self.store.toggle(index)
        elif self._confirmed(DELETE_PROMPT):
            self.store.delete(index)
        return hit

    def next_focus(self, focus: int, backwards: bool = False) -> int:
        """Return the input field that follows ``focus`` in tab order."""
        step = -1 if backwards else 1
        return (focus + step) % FOCUS_CONTROLS