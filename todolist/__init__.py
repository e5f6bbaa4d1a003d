"""A desktop to-do list with two-column items, completion toggles and a light or dark theme."""

__version__ = "0.1.0"