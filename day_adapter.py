"""Per-day customisation hooks called by the calendar controller."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence


class DayAdapter:
    """Default adapter: every day enabled, no categories, no decoration.

    Subclass and override the hooks you need.  The render targets passed to
    :meth:`update_day` and :meth:`update_header` are the widgets created by the
    view (a ``tk.Label`` in :mod:`calendar_view`).
    """

    def is_day_enabled(self, day: date) -> bool:
        return True

    def get_category_colors(self, day: date) -> Optional[Sequence[str]]:
        return None

    def update_day(self, target, day: date) -> None:
        pass

    def update_header(self, target, day_of_week: int) -> None:
        pass


class CategoryDayAdapter(DayAdapter):
    """Adapter backed by a date → colours mapping and a set of disabled days."""

    def __init__(
        self,
        categories: Mapping[date, Sequence[str]] | None = None,
        disabled_days: Iterable[date] = (),
        today: date | None = None,
        today_fg: str = "#0078D4",
    ) -> None:
        self._categories = {d: tuple(colors) for d, colors in (categories or {}).items()}
        self._disabled = frozenset(disabled_days)
        self._today = today
        self._today_fg = today_fg

    @classmethod
    def from_settings(cls, settings: dict, today: date | None = None) -> "CategoryDayAdapter":
        categories = {
            date.fromisoformat(day): colors
            for day, colors in settings.get("categories", {}).items()
        }
        disabled = [date.fromisoformat(d) for d in settings.get("disabled_days", [])]
        return cls(categories, disabled, today=today)

    def is_day_enabled(self, day: date) -> bool:
        return day not in self._disabled

    def get_category_colors(self, day: date) -> Optional[Sequence[str]]:
        return self._categories.get(day)

    def update_day(self, target, day: date) -> None:
        if self._today is not None and day == self._today:
            target.configure(fg=self._today_fg)

    def update_header(self, target, day_of_week: int) -> None:
        # Weekend headers in red
        if day_of_week >= 6:
            target.configure(fg="#CC0000")
