"""Geometry of the to-do list: row positions, click targets and glyph shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

Point = Tuple[int, int]
Segment = Tuple[Point, Point]

START_X = 10
START_Y = 100
ROW_HEIGHT = 30
BOX_SIZE = 20
CHECKBOX_OFFSET = 500
DELETE_OFFSET = 540
SECOND_COLUMN_OFFSET = 25 + 100

CHECKBOX_X = START_X + CHECKBOX_OFFSET
DELETE_X = START_X + DELETE_OFFSET
SECOND_COLUMN_X = START_X + SECOND_COLUMN_OFFSET

CHECKMARK_COLOR = (34, 177, 76)
CHECKMARK_WIDTH = 2
DELETE_GLYPH = "\u2715"
FONT_FAMILY = "Cascadia Code"
FONT_HEIGHT = 20


class Target(Enum):
    """Clickable part of a to-do row."""

    CHECKBOX = "checkbox"
    DELETE = "delete"


@dataclass(frozen=True)
class FontStyle:
    """Decorations applied to a row's text."""

    strikeout: bool = False
    underline: bool = False


def item_top(index: int) -> int:
    """Return the y coordinate of the top of row ``index``."""
    return START_Y + index * ROW_HEIGHT


def _inside(x: int, y: int, left: int, top: int) -> bool:
    return left <= x <= left + BOX_SIZE and top <= y <= top + BOX_SIZE


def hit_test(x: int, y: int, count: int) -> Optional[Tuple[Target, int]]:
    """Return the target and row under ``(x, y)`` among ``count`` rows, if any."""
    for index in range(count):
        top = item_top(index)
        if _inside(x, y, CHECKBOX_X, top):
            return Target.CHECKBOX, index
        if _inside(x, y, DELETE_X, top):
            return Target.DELETE, index
    return None


def checkbox_segments(checked: bool) -> List[Segment]:
    """Return the checkmark strokes inside a checkbox box; none when unchecked."""
    if not checked:
        return []
    return [((0, 12), (7, 17)), ((7, 17), (20, 0))]


def delete_mark_segments() -> List[Segment]:
    """Return the two strokes of the delete cross inside its box."""
    return [((0, 0), (20, 20)), ((0, 20), (20, 0))]


def font_style(completed: bool, selected: bool) -> FontStyle:
    """Completed rows are struck through; the selected row is underlined."""
    return FontStyle(strikeout=bool(completed), underline=bool(selected))