"""Calendar refresh cycle: grid + headers → view, then tile sizing on layout."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Optional, Protocol, Sequence

from calendar_logic import (
    MONDAY,
    ConfigurationError,
    DayOfWeekWindow,
    HeaderLabel,
    ValidDateBounds,
    WeekRow,
    build_grid,
    build_headers,
    check_month,
    next_month,
    prev_month,
)
from day_adapter import DayAdapter
from logger import get_logger
from tile_sizing import DAY_PADDING_SIDES, DAY_SIZE, PADDING_SLOTS, tile_size

logger = get_logger(__name__)


class CalendarRenderer(Protocol):
    """What the controller needs from a view."""

    def render(
        self,
        headers: Sequence[HeaderLabel],
        rows: Sequence[WeekRow],
        typeface: Any = None,
    ) -> tuple[list[Any], list[list[Any]]]:
        """Materialise headers and rows; return (header targets, day targets per row)."""

    def available_width(self) -> int: ...

    def apply_tile_size(self, size: int) -> None: ...

    def set_visible(self, visible: bool) -> None: ...

    def set_layout_listener(self, listener: Callable[[], None]) -> None: ...

    def set_click_listener(self, listener: Callable[[date], None]) -> None: ...


class CalendarController:
    """Owns the current grid and tile size of one calendar widget.

    Every refresh replaces ``rows``, ``headers`` and ``tile_size`` as a whole.
    """

    def __init__(
        self,
        view: CalendarRenderer,
        adapter: DayAdapter | None = None,
        *,
        year: int | None = None,
        month: int | None = None,
        first_day_of_week: int = MONDAY,
        last_day_of_week: int | None = None,
        first_valid_day: date | None = None,
        last_valid_day: date | None = None,
        typeface: Any = None,
        padding_per_side: int = DAY_PADDING_SIDES,
        max_tile_size: int = DAY_SIZE,
        on_day_click: Callable[[date], None] | None = None,
    ) -> None:
        today = date.today()
        year = year if year is not None else today.year
        month = month if month is not None else today.month
        check_month(year, month)
        self.view = view
        self.adapter = adapter or DayAdapter()
        self.year = year
        self.month = month
        self.window = DayOfWeekWindow(first_day_of_week, last_day_of_week)
        self.bounds = ValidDateBounds(first_valid_day, last_valid_day)
        self.typeface = typeface
        self.padding_per_side = padding_per_side
        self.max_tile_size = max_tile_size
        self.on_day_click = on_day_click

        self.rows: tuple[WeekRow, ...] = ()
        self.headers: tuple[HeaderLabel, ...] = ()
        self.tile_size: Optional[int] = None
        self.is_initialized = False

        view.set_layout_listener(self.on_layout)
        view.set_click_listener(self._dispatch_click)

    # ------------------------------------------------------------------
    # Refresh cycle
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Rebuild the grid and headers and hand them to the view."""
        adapter = self.adapter
        headers = build_headers(self.window)
        rows = build_grid(
            self.year, self.month, self.window, self.bounds,
            adapter.is_day_enabled, adapter.get_category_colors,
        )
        self.headers = headers
        self.rows = rows
        logger.debug(
            "Rebuilt %04d-%02d: days %d-%d, %d rows",
            self.year, self.month, self.window.first_day_of_week, self.window.last, len(rows),
        )

        header_targets, day_targets = self.view.render(headers, rows, self.typeface)
        for header, target in zip(headers, header_targets):
            adapter.update_header(target, header.day_of_week)
        for row, targets in zip(rows, day_targets):
            for cell, target in zip(row, targets):
                if cell.is_enabled:
                    adapter.update_day(target, cell.date)

        self.on_layout()
        self.is_initialized = True

    def on_layout(self) -> None:
        """Size every cell from the measured width; hide the view until measurable."""
        if not self.rows:
            return
        size = tile_size(
            self.view.available_width(),
            self.padding_per_side,
            PADDING_SLOTS,
            self.window.width,
            self.max_tile_size,
        )
        self.tile_size = size
        if size is not None and size > 0:
            self.view.apply_tile_size(size)
            self.view.set_visible(True)
        else:
            self.view.set_visible(False)

    def _dispatch_click(self, day: date) -> None:
        if self.on_day_click is not None:
            self.on_day_click(day)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def _reconfigure(self, **changes: Any) -> None:
        """Apply *changes* and refresh; on ConfigurationError restore the old values."""
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            self.refresh()
        except ConfigurationError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

    def set_first_day_of_week(self, first_day_of_week: int) -> None:
        self._reconfigure(window=DayOfWeekWindow(first_day_of_week, self.window.last_day_of_week))

    def set_last_day_of_week(self, last_day_of_week: int | None) -> None:
        """Set the last visible weekday; ``None`` shows the whole week."""
        self._reconfigure(window=DayOfWeekWindow(self.window.first_day_of_week, last_day_of_week))

    def set_valid_range(self, first_valid_day: date | None, last_valid_day: date | None) -> None:
        self._reconfigure(bounds=ValidDateBounds(first_valid_day, last_valid_day))

    def set_adapter(self, adapter: DayAdapter) -> None:
        self._reconfigure(adapter=adapter)

    def set_typeface(self, typeface: Any) -> None:
        self._reconfigure(typeface=typeface)

    def set_month(self, year: int, month: int) -> None:
        check_month(year, month)
        self._reconfigure(year=year, month=month)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_month(self) -> None:
        self.set_month(*next_month(self.year, self.month))

    def prev_month(self) -> None:
        self.set_month(*prev_month(self.year, self.month))

    def go_today(self) -> None:
        today = date.today()
        self.set_month(today.year, today.month)
