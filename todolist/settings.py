"""Loading and saving of the dark-mode preference."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

StrPath = Union[str, "os.PathLike[str]"]

_PREFIX = "DarkMode="
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def load_dark_mode(path: StrPath) -> bool:
    """Return the stored dark-mode flag, or False if there is none.

    The file holds a single ``DarkMode=<n>`` entry; any non-zero ``n``
    means dark mode. A missing file or unreadable content means light mode.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return False
    if not content.startswith(_PREFIX):
        return False
    match = _INTEGER.match(content, len(_PREFIX))
    if match is None:
        return False
    return int(match.group(1)) != 0


def save_dark_mode(path: StrPath, dark_mode: bool) -> None:
    """Store the dark-mode flag, replacing whatever the file held."""
    Path(path).write_text(f"{_PREFIX}{int(bool(dark_mode))}", encoding="utf-8")