"""Persistent list of two-column to-do items."""

from __future__ import annotations

import contextlib
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

StrPath = Union[str, "os.PathLike[str]"]

MAX_TODO_LENGTH = 42
MAX_TODOS = 9999
_TEXT_LIMIT = MAX_TODO_LENGTH - 1
_INTEGER = re.compile(r"\s*([+-]?\d+)")


@dataclass
class TodoItem:
    """A to-do entry: a short label, a description and a completion flag."""

    text1: str
    text2: str
    completed: bool = False


def _clip(text: str) -> str:
    return text[:_TEXT_LIMIT]


def _leading_int(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def parse_line(line: str) -> Optional[TodoItem]:
    """Parse one ``text1|text2[|completed]`` line; None if it has no second text.

    Empty fields between separators are skipped, texts are clipped to the
    field limit and a missing or non-numeric completion field means False.
    """
    body = line.rstrip("\r\n").lstrip("|")
    if not body:
        return None
    text1, _, rest = body.partition("|")
    rest = rest.lstrip("|")
    if not rest:
        return None
    text2, _, tail = rest.partition("|")
    return TodoItem(_clip(text1), _clip(text2), _leading_int(tail) != 0)


def format_line(item: TodoItem) -> str:
    """Render an item as a full line of the to-do file."""
    return f"{item.text1}|{item.text2}|{int(item.completed)}\n"


class TodoStore:
    """In-memory to-do list backed by a text file."""

    def __init__(self, path: StrPath, toggle_path: Optional[StrPath] = None) -> None:
        self.path = Path(path)
        self.toggle_path = Path(toggle_path) if toggle_path is not None else self.path
        self._items: List[TodoItem] = []

    def load(self) -> None:
        """Replace the items with those in the file; a missing file gives none."""
        self._items = []
        try:
            with open(self.path, encoding="utf-8") as fh:
                for line in fh:
                    if len(self._items) >= MAX_TODOS:
                        break
                    item = parse_line(line)
                    if item is not None:
                        self._items.append(item)
        except FileNotFoundError:
            pass

    def add(self, text1: str, text2: str) -> Optional[TodoItem]:
        """Append a new open item and record it in the file.

        Returns the item, or None when the list is already full. Raises
        OSError if the file cannot be written; the item stays in the list.
        """
        if len(self._items) >= MAX_TODOS:
            return None
        text1, text2 = _clip(text1), _clip(text2)
        item = TodoItem(text1, text2, False)
        self._items.append(item)
        with open(self.path, "a", encoding="utf-8") as fh:
            fh.write(f"{text1}|{text2}\n")
        return item

    def update(self, index: int, text1: str, text2: str) -> TodoItem:
        """Change the texts of an item in memory, keeping its completion flag."""
        item = self._items[self._checked(index)]
        item.text1 = _clip(text1)
        item.text2 = _clip(text2)
        return item

    def delete(self, index: int) -> TodoItem:
        """Remove an item and rewrite the file."""
        item = self._items.pop(self._checked(index))
        with contextlib.suppress(OSError):
            self.save(self.path)
        return item

    def toggle(self, index: int) -> TodoItem:
        """Flip an item's completion flag and write the list to the toggle file."""
        item = self._items[self._checked(index)]
        item.completed = not item.completed
        with contextlib.suppress(OSError):
            self.save(self.toggle_path)
        return item

    def save(self, path: StrPath) -> None:
        """Write every item, with its completion flag, to ``path``."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.writelines(format_line(item) for item in self._items)

    def _checked(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no to-do item at index {index}")
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> TodoItem:
        return self._items[index]