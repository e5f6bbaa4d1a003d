"""Window for viewing and editing the to-do list."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from . import layout
from .controller import TodoController
from .layout import FontStyle
from .store import TodoStore

WINDOW_TITLE = "To-Do"
WIDTH = 600
HEIGHT = 800
FIRST_INPUT_WIDTH = WIDTH * 1 // 5
SECOND_INPUT_WIDTH = WIDTH * 3 // 5
BUTTON_WIDTH = WIDTH * 1 // 5
FIRST_INPUT_LIMIT = 10
SECOND_INPUT_LIMIT = 40
WRITE_ERROR = "Failed to open To-do file for writing."


def _hex(color: Tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def _limit(size: int):
    def check(proposed: str) -> bool:
        return len(proposed) <= size

    return check


class TodoApp:
    """Tk front end drawing the list and forwarding input to a controller."""

    def __init__(self, root, controller: TodoController) -> None:
        import tkinter as tk

        self.root = root
        self.controller = controller
        self._fonts: Dict[FontStyle, object] = {}

        root.title(WINDOW_TITLE)
        root.geometry(f"{WIDTH}x{HEIGHT}")

        self.canvas = tk.Canvas(root, width=WIDTH, height=HEIGHT, highlightthickness=0)
        self.canvas.place(x=0, y=0, relwidth=1, relheight=1)

        self.first = tk.Entry(
            root,
            validate="key",
            validatecommand=(root.register(_limit(FIRST_INPUT_LIMIT)), "%P"),
        )
        self.first.place(x=10, y=20, width=FIRST_INPUT_WIDTH - 20, height=30)
        self.second = tk.Entry(
            root,
            validate="key",
            validatecommand=(root.register(_limit(SECOND_INPUT_LIMIT)), "%P"),
        )
        self.second.place(
            x=10 + FIRST_INPUT_WIDTH, y=20, width=SECOND_INPUT_WIDTH - 20, height=30
        )
        self.entries: List = [self.first, self.second]

        self.add_button = tk.Button(root, text="Add", command=self._on_add)
        self.add_button.place(
            x=10 + FIRST_INPUT_WIDTH + SECOND_INPUT_WIDTH,
            y=20,
            width=BUTTON_WIDTH - 30,
            height=30,
        )
        self.theme_button = tk.Button(root, text="Dark Mode", command=self._on_toggle_theme)
        self.theme_button.place(x=10, y=730, width=80, height=30)

        for entry in self.entries:
            entry.bind("<Tab>", self._on_tab)
            entry.bind("<Shift-Tab>", self._on_back_tab)
            entry.bind("<ISO_Left_Tab>", self._on_back_tab)
        self.first.bind("<Return>", lambda event: self._focus_second())
        self.second.bind("<Return>", lambda event: self._on_add())
        self.canvas.bind("<Button-1>", self._on_click)
        self.canvas.bind("<Key>", self._on_key)

        self.first.focus_set()
        self.redraw()

    def _font(self, style: FontStyle):
        from tkinter import font as tkfont

        if style not in self._fonts:
            self._fonts[style] = tkfont.Font(
                root=self.root,
                family=layout.FONT_FAMILY,
                size=-layout.FONT_HEIGHT,
                overstrike=style.strikeout,
                underline=style.underline,
            )
        return self._fonts[style]

    def _show_write_error(self) -> None:
        from tkinter import messagebox

        messagebox.showerror("Error", WRITE_ERROR, parent=self.root)

    def _focus_second(self) -> str:
        self.second.focus_set()
        return "break"

    def _move_focus(self, widget, backwards: bool) -> str:
        current = self.entries.index(widget) if widget in self.entries else 0
        self.entries[self.controller.next_focus(current, backwards)].focus_set()
        return "break"

    def _on_tab(self, event) -> str:
        return self._move_focus(event.widget, False)

    def _on_back_tab(self, event) -> str:
        return self._move_focus(event.widget, True)

    def _on_add(self) -> str:
        try:
            self.controller.submit(self.first.get(), self.second.get())
        except OSError:
            self._show_write_error()
        self.first.delete(0, "end")
        self.second.delete(0, "end")
        self.redraw()
        return "break"

    def _on_toggle_theme(self) -> None:
        self.controller.toggle_theme()
        self.redraw()

    def _on_click(self, event) -> None:
        self.canvas.focus_set()
        self.controller.click(event.x, event.y)
        self.redraw()

    def _on_key(self, event) -> None:
        try:
            changed = self.controller.handle_char(
                event.char, self.first.get(), self.second.get()
            )
        except OSError:
            self._show_write_error()
            changed = True
        if changed:
            self.redraw()

    def redraw(self) -> None:
        """Repaint the window from the controller's current state."""
        colors = self.controller.palette
        canvas = self.canvas
        canvas.delete("all")
        canvas.configure(bg=_hex(colors.paint_background))
        self.root.configure(bg=_hex(colors.window_background))

        for button in (self.add_button, self.theme_button):
            button.configure(
                bg=_hex(colors.button_face),
                fg=_hex(colors.button_text),
                activebackground=_hex(colors.button_face),
                activeforeground=_hex(colors.button_text),
                highlightbackground=_hex(colors.button_border),
            )
        for entry in self.entries:
            entry.configure(
                fg=_hex(colors.edit_text),
                bg=_hex(colors.edit_background),
                insertbackground=_hex(colors.edit_text),
            )

        selected = self.controller.selected
        regular = self._font(FontStyle())
        for index, item in enumerate(self.controller.store):
            top = layout.item_top(index)
            left = layout.CHECKBOX_X
            canvas.create_rectangle(
                left,
                top,
                left + layout.BOX_SIZE,
                top + layout.BOX_SIZE,
                outline="#000000",
                fill="#ffffff",
            )
            for (x0, y0), (x1, y1) in layout.checkbox_segments(item.completed):
                canvas.create_line(
                    left + x0,
                    top + y0,
                    left + x1,
                    top + y1,
                    fill=_hex(layout.CHECKMARK_COLOR),
                    width=layout.CHECKMARK_WIDTH,
                )

            font = self._font(layout.font_style(item.completed, index == selected))
            text_color = _hex(colors.completed_text if item.completed else colors.text)
            canvas.create_text(
                layout.START_X, top, text=item.text1, anchor="nw", font=font, fill=text_color
            )
            canvas.create_text(
                layout.SECOND_COLUMN_X,
                top,
                text=item.text2,
                anchor="nw",
                font=font,
                fill=text_color,
            )
            canvas.create_text(
                layout.DELETE_X,
                top,
                text=layout.DELETE_GLYPH,
                anchor="nw",
                font=regular,
                fill=_hex(colors.delete_mark),
            )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line options naming the files the list and settings live in."""
    parser = argparse.ArgumentParser(description="Keep a simple to-do list.")
    parser.add_argument(
        "--todos",
        type=Path,
        default=Path("config/todos.txt"),
        help="file holding the to-do items",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=Path("config/config.txt"),
        help="file holding the theme setting",
    )
    parser.add_argument(
        "--toggle-file",
        type=Path,
        default=Path("configtodos.txt"),
        help="file the list is written to when an item is ticked",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the to-do window and run until it is closed."""
    import tkinter as tk
    from tkinter import messagebox

    args = parse_args(argv)
    store = TodoStore(args.todos, args.toggle_file)
    store.load()
    root = tk.Tk()

    def confirm(message: str) -> bool:
        return bool(messagebox.askyesno("Confirm", message, parent=root))

    controller = TodoController(store, args.settings, confirm)
    TodoApp(root, controller)
    root.mainloop()
    return 0