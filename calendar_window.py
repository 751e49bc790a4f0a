"""Top-level calendar window (tkinter): navigation bar, month grid, footer."""

import calendar as _cal
from datetime import date
from typing import Callable
from tkinter import font as tkfont
import tkinter as tk

from calendar_controller import CalendarController
from calendar_view import GRID_BG, CalendarView
from day_adapter import CategoryDayAdapter
from logger import get_logger
from settings import SETTINGS_PATH, load_settings, parse_day, save_settings

logger = get_logger(__name__)

ACCENT = "#0078D4"


class CalendarWindow:
    """Single-month calendar window driven by the persisted settings."""

    def __init__(self, settings_path: str = SETTINGS_PATH) -> None:
        self.root = tk.Tk()
        self.root.title("Month Calendar")
        self.root.resizable(True, False)
        self.root.configure(bg=GRID_BG)
        self.root.minsize(240, 0)

        self._setup_fonts()
        self._settings_path = settings_path
        settings = load_settings(settings_path)
        self._saved_width: int | None = settings["window_width"]
        self.on_month_change: Callable[[], None] | None = None

        self._build_shell()
        adapter = CategoryDayAdapter.from_settings(settings, today=date.today())
        self.controller = CalendarController(
            self.view,
            adapter,
            first_day_of_week=settings["first_day_of_week"],
            last_day_of_week=settings["last_day_of_week"],
            first_valid_day=parse_day(settings["first_valid_day"]),
            last_valid_day=parse_day(settings["last_valid_day"]),
            typeface=self.font_normal,
            padding_per_side=settings["day_padding"],
            max_tile_size=settings["day_size"],
            on_day_click=self._on_day_click,
        )
        self.controller.refresh()
        self._update_title()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Build shell (once)
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(fill="both", expand=True, padx=6, pady=4)

        # Navigation row: ◀  Month Year  Today  ▶
        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(nav, text="◀", font=self.font_nav, bg=GRID_BG, cursor="hand2")
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2")
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT, cursor="hand2",
        )
        btn_today.pack(side="right", padx=6)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        self._month_label = tk.Label(nav, font=self.font_header, bg=GRID_BG, fg="#333333")
        self._month_label.pack(side="left", expand=True)

        self.view = CalendarView(outer)
        self.view.pack(fill="x", expand=True)

        self._footer_label = tk.Label(
            outer, text=self._footer_text(None), font=self.font_normal,
            bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(4, 0))

    def _update_title(self) -> None:
        c = self.controller
        self._month_label.configure(text=f"{_cal.month_name[c.month]} {c.year}")

    @staticmethod
    def _footer_text(selected: date | None) -> str:
        today_str = f"Today: {date.today().strftime('%d.%m.%Y')}"
        if selected is None:
            return today_str
        return f"Selected: {selected.strftime('%d.%m.%Y')}     {today_str}"

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_day_click(self, day: date) -> None:
        logger.info("Day clicked: %s", day.isoformat())
        self._footer_label.configure(text=self._footer_text(day))

    def _month_changed(self) -> None:
        self._update_title()
        if self.on_month_change is not None:
            self.on_month_change()

    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.controller.prev_month()
        else:
            self.controller.next_month()
        self._month_changed()

    def _go_today(self) -> None:
        self.controller.go_today()
        self._month_changed()

    def navigate(self, direction: int) -> None:
        """Public wrapper used by the tray menu."""
        self._navigate(direction)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.update_idletasks()
        if self._saved_width is not None:
            self.root.geometry(f"{self._saved_width}x{self.root.winfo_reqheight()}")
            self.root.update_idletasks()
        self.controller.on_layout()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self.root.winfo_ismapped():
            self._saved_width = self.root.winfo_width()
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings(self._settings_path)
        settings["window_width"] = self._saved_width
        save_settings(settings, self._settings_path)
