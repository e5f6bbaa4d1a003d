# todolist

A small desktop to-do list. Each item has a short label and a longer
description, is shown as two columns, and can be ticked off or deleted.
A light and a dark theme are available, and the chosen theme is remembered.

## Installing

```
pip install .
```

The window is built with Tkinter from the standard library, so no other
packages are needed. Your Python must include Tkinter for the window to open.

## Running

```
todolist
```

Options:

- `--todos PATH`: file holding the items (default `config/todos.txt`).
- `--settings PATH`: file holding the theme setting (default
  `config/config.txt`).
- `--toggle-file PATH`: file the whole list is written to when an item is
  ticked or unticked (default `configtodos.txt`).

All default paths are relative to the working directory. The `config`
directory is not created for you. If the items file is missing, the list
starts empty.

Each line of the items file has the form `label|description|done`. `done` is
a number, and any value other than `0` means done. Adding an item appends the
line `label|description` with no flag, and that line reads back as not done.
Deleting an item rewrites the items file with flags on every line.

With the default options, ticking an item writes to `configtodos.txt` and not
to the items file. A tick is therefore not kept in `config/todos.txt` until
the file is rewritten by a delete. To keep ticks in the items file, pass the
same path to `--todos` and `--toggle-file`.

The settings file holds a single `DarkMode=<n>` entry. A non-zero `n` selects
the dark theme.

## Using the window

- Type a label (up to 10 characters) and a description (up to 40 characters).
  Then press **Add**, or press Enter in the description field. The fields are
  cleared afterwards.
- Enter in the label field moves to the description field. Tab and Shift+Tab
  switch between the two fields.
- Click the box next to an item to mark it done or not done. Done items are
  drawn struck through and greyed out.
- Click the red ✕ next to an item and confirm to delete it.
- The **Dark Mode** button switches themes and saves the choice.
- After clicking in the list area, these keys work:
  - `N` adds an item from the two fields.
  - `D` deletes the first item, without asking.
  - `T` toggles the first item.

If a new item cannot be written to the items file, an error box is shown. The
item still appears in the list for the current session.

## Using it from Python

```python
from todolist.store import TodoStore

store = TodoStore("config/todos.txt", "config/todos.txt")
store.load()
store.add("Shop", "Buy milk and bread")
store.toggle(0)
for item in store:
    print(item.text1, item.text2, item.completed)
```

- **`todolist.store`**
  - `TodoStore` holds at most 9999 items.
  - Texts are cut to 41 characters.
  - `update`, `delete` and `toggle` raise `IndexError` for an index out of
    range.
  - `update` changes an item in memory only.
  - `parse_line` and `format_line` read and write single lines of the items
    file.
- **`todolist.settings`**: `load_dark_mode` and `save_dark_mode` read and write
  the theme file.
- **`todolist.theme`**: `palette(dark)` returns the `Palette` of colours for a
  theme.
- **`todolist.layout`**: row positions (`item_top`), click hit-testing
  (`hit_test`, returning a `Target` and row), the checkmark and cross strokes,
  and `font_style`.
- **`todolist.controller`**
  - `TodoController` holds the window's behaviour without any drawing: theme
    switching, the selection, `submit`, `delete_selected`, `handle_char`,
    `click` and `next_focus`.
  - When a selection is set with `select`, `submit` edits that item instead
    of adding one.
  - Without a `confirm` callback, clicks on ✕ delete without asking.

## What it does not do

- The window offers no way to select an item. Editing an existing item and
  deleting the selected one are available only through `TodoController` in
  Python.
- Edits made with `update` are not written to disk by themselves.
- There are no due dates, reminders or sorting.

## Tests

```
pip install .[test]
pytest
```