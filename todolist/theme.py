"""Colour schemes for the light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]

_WHITE: Color = (255, 255, 255)
_BLACK: Color = (0, 0, 0)
_GRAY: Color = (128, 128, 128)
_DARK_WINDOW: Color = (45, 45, 48)
_DARK_PAINT: Color = (30, 30, 30)
_LIGHT_BUTTON: Color = (240, 240, 240)


@dataclass(frozen=True)
class Palette:
    """RGB colours used to draw the window in one theme."""

    window_background: Color
    paint_background: Color
    text: Color
    completed_text: Color
    delete_mark: Color
    button_face: Color
    button_border: Color
    button_text: Color
    edit_text: Color
    edit_background: Color


_DARK = Palette(
    window_background=_DARK_WINDOW,
    paint_background=_DARK_PAINT,
    text=_WHITE,
    completed_text=_GRAY,
    delete_mark=(255, 85, 85),
    button_face=_DARK_WINDOW,
    button_border=_WHITE,
    button_text=_WHITE,
    edit_text=_BLACK,
    edit_background=_WHITE,
)

_LIGHT = Palette(
    window_background=_WHITE,
    paint_background=_WHITE,
    text=_BLACK,
    completed_text=_GRAY,
    delete_mark=(255, 0, 0),
    button_face=_LIGHT_BUTTON,
    button_border=_BLACK,
    button_text=_BLACK,
    edit_text=_BLACK,
    edit_background=_WHITE,
)


def palette(dark: bool) -> Palette:
    """Return the dark palette if ``dark`` is true, else the light one."""
    return _DARK if dark else _LIGHT