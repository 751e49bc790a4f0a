"""Month grid widget (tkinter): header row plus one frame per week."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Sequence
import tkinter as tk

from calendar_logic import DayCell, HeaderLabel, WeekRow

# Colours
GRID_BG = "white"
DAY_BG = "#F3F3F3"
DAY_FG = "#333333"
DISABLED_BG = "#E0E0E0"
DISABLED_FG = "#A0A0A0"
CATEGORY_HEIGHT = 4
CELL_PAD = 2


class _DayTile:
    """One square day: number label above a strip of category bars."""

    __slots__ = ("frame", "label", "categories")

    def __init__(self, parent: tk.Frame, cell: DayCell, typeface: Any) -> None:
        bg = DAY_BG if cell.is_enabled else DISABLED_BG
        fg = DAY_FG if cell.is_enabled else DISABLED_FG
        self.frame = tk.Frame(parent, bg=bg)
        self.frame.pack_propagate(False)
        self.frame.pack(side="left", padx=CELL_PAD, pady=CELL_PAD)

        self.categories = tk.Frame(self.frame, bg=bg, height=CATEGORY_HEIGHT)
        self.categories.pack(side="bottom", fill="x")
        for color in cell.category_colors:
            tk.Frame(self.categories, bg=color, height=CATEGORY_HEIGHT).pack(
                side="left", expand=True, fill="x",
            )

        self.label = tk.Label(self.frame, text=str(cell.day_of_month), bg=bg, fg=fg)
        if typeface is not None:
            self.label.configure(font=typeface)
        if not cell.is_enabled:
            self.label.configure(state="disabled", disabledforeground=DISABLED_FG)
        self.label.pack(expand=True, fill="both")


class CalendarView(tk.Frame):
    """Renders week rows handed over by :class:`calendar_controller.CalendarController`.

    The outer frame keeps its packed width while the content is hidden, so
    the width can be measured before any tile is sized.
    """

    def __init__(self, parent: tk.Misc, **kwargs) -> None:
        kwargs.setdefault("bg", GRID_BG)
        super().__init__(parent, **kwargs)
        self._body = tk.Frame(self, bg=GRID_BG)
        self._visible = False
        self._headers: list[tuple[tk.Frame, tk.Label]] = []
        self._tiles: list[list[_DayTile]] = []
        self._layout_listener: Callable[[], None] | None = None
        self._click_listener: Callable[[date], None] | None = None
        self.bind("<Configure>", self._on_configure)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def set_layout_listener(self, listener: Callable[[], None]) -> None:
        self._layout_listener = listener

    def set_click_listener(self, listener: Callable[[date], None]) -> None:
        self._click_listener = listener

    def _on_configure(self, _event: tk.Event) -> None:
        if self._layout_listener is not None:
            self._layout_listener()

    def _on_click(self, day: date) -> None:
        if self._click_listener is not None:
            self._click_listener(day)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(
        self,
        headers: Sequence[HeaderLabel],
        rows: Sequence[WeekRow],
        typeface: Any = None,
    ) -> tuple[list[tk.Label], list[list[tk.Label]]]:
        """Replace all rows; return the header labels and day labels for decoration."""
        for child in self._body.winfo_children():
            child.destroy()
        self._headers = []
        self._tiles = []

        header_row = tk.Frame(self._body, bg=GRID_BG)
        header_row.pack(side="top", anchor="w")
        for header in headers:
            holder = tk.Frame(header_row, bg=GRID_BG)
            holder.pack_propagate(False)
            holder.pack(side="left", padx=CELL_PAD)
            label = tk.Label(holder, text=header.text, bg=GRID_BG, fg=DAY_FG)
            if typeface is not None:
                label.configure(font=typeface)
            label.pack(expand=True, fill="both")
            self._headers.append((holder, label))

        for row in rows:
            week = tk.Frame(self._body, bg=GRID_BG)
            week.pack(side="top", anchor="w")
            tiles = [_DayTile(week, cell, typeface) for cell in row]
            for tile, cell in zip(tiles, row):
                if cell.is_enabled:
                    tile.label.configure(cursor="hand2")
                    tile.label.bind("<Button-1>", lambda _e, d=cell.date: self._on_click(d))
            self._tiles.append(tiles)

        return ([label for _holder, label in self._headers],
                [[tile.label for tile in tiles] for tiles in self._tiles])

    def available_width(self) -> int:
        """Measured width in pixels, 0 while the frame is not mapped yet."""
        width = self.winfo_width()
        return width if width > 1 else 0

    def apply_tile_size(self, size: int) -> None:
        # Headers keep their natural height
        for holder, label in self._headers:
            holder.configure(width=size, height=label.winfo_reqheight())
        for tiles in self._tiles:
            for tile in tiles:
                tile.frame.configure(width=size, height=size)

    def set_visible(self, visible: bool) -> None:
        if visible and not self._visible:
            self._body.pack(side="top", anchor="n")
        elif not visible and self._visible:
            self._body.pack_forget()
        self._visible = visible

    @property
    def is_visible(self) -> bool:
        return self._visible

    @property
    def tile_frames(self) -> list[list[tk.Frame]]:
        return [[tile.frame for tile in tiles] for tiles in self._tiles]
