"""Pure calendar calculations — no UI dependencies.

Weekdays are ISO ordinals (``date.isoweekday()``): Monday = 1 … Sunday = 7.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Callable, Iterator, Optional, Sequence

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(1, 8)

_ONE_DAY = timedelta(days=1)


class ConfigurationError(ValueError):
    """Invalid calendar configuration, raised before any grid is built."""


def _check_weekday(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 7:
        raise ConfigurationError(f"{name} must be a weekday ordinal 1-7, got {value!r}")


def next_weekday(day_of_week: int) -> int:
    """Return the weekday after *day_of_week*, wrapping Sunday → Monday."""
    return day_of_week % 7 + 1


def day_name(day_of_week: int) -> str:
    """Return the header text for an ISO weekday."""
    return DAY_ABBR[day_of_week - 1]


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DayOfWeekWindow:
    """Circular range of visible weekdays.

    Without a custom *last_day_of_week* the window ends on the day before
    *first_day_of_week*, so all seven days are visible.
    """

    first_day_of_week: int = MONDAY
    last_day_of_week: Optional[int] = None

    def __post_init__(self) -> None:
        _check_weekday("first_day_of_week", self.first_day_of_week)
        if self.last_day_of_week is not None:
            _check_weekday("last_day_of_week", self.last_day_of_week)

    @property
    def last(self) -> int:
        if self.last_day_of_week is None:
            return (self.first_day_of_week - 2) % 7 + 1
        return self.last_day_of_week

    @property
    def width(self) -> int:
        return (self.last - self.first_day_of_week + 7) % 7 + 1

    def contains(self, day_of_week: int) -> bool:
        first, last = self.first_day_of_week, self.last
        if last >= first:
            return first <= day_of_week <= last
        # Wrapping window: only the days strictly between last and first are excluded
        return day_of_week >= first or day_of_week <= last

    def weekdays(self) -> list[int]:
        """Return the visible weekdays in display order."""
        day = self.first_day_of_week
        days = [day]
        while day != self.last:
            day = next_weekday(day)
            days.append(day)
        return days


@dataclass(frozen=True)
class ValidDateBounds:
    """Optional first/last selectable day; ``None`` means unbounded."""

    first_valid_day: Optional[date] = None
    last_valid_day: Optional[date] = None

    def __post_init__(self) -> None:
        first, last = self.first_valid_day, self.last_valid_day
        if first is not None and last is not None and first > last:
            raise ConfigurationError(
                f"first_valid_day {first.isoformat()} is after last_valid_day {last.isoformat()}"
            )

    def __contains__(self, d: date) -> bool:
        if self.first_valid_day is not None and d < self.first_valid_day:
            return False
        if self.last_valid_day is not None and d > self.last_valid_day:
            return False
        return True


@dataclass(frozen=True)
class DayCell:
    date: date
    is_enabled: bool
    is_in_anchor_month: bool
    category_colors: tuple[str, ...] = ()

    @property
    def day_of_month(self) -> int:
        return self.date.day

    @property
    def day_of_week(self) -> int:
        return self.date.isoweekday()


@dataclass(frozen=True)
class HeaderLabel:
    day_of_week: int
    text: str


WeekRow = tuple[DayCell, ...]


# ---------------------------------------------------------------------------
# Grid generation
# ---------------------------------------------------------------------------

def first_grid_day(year: int, month: int, first_day_of_week: int) -> date:
    """Return the *first_day_of_week* on or before the 1st of the month."""
    first = date(year, month, 1)
    return first - timedelta(days=(first.isoweekday() - first_day_of_week) % 7)


def check_month(year: int, month: int) -> None:
    """Raise ConfigurationError unless (year, month) can anchor a grid."""
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise ConfigurationError(f"year must be {MINYEAR}-{MAXYEAR}, got {year!r}")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ConfigurationError(f"month must be 1-12, got {month!r}")
    # The trailing week runs into the following month
    if (year, month) == (MAXYEAR, 12):
        raise ConfigurationError(f"{MAXYEAR}-12 has no following month to finish the last week")


def grid_start(year: int, month: int, first_day_of_week: int) -> date:
    """Validate the anchor month and return the first day shown in its grid."""
    check_month(year, month)
    try:
        return first_grid_day(year, month, first_day_of_week)
    except OverflowError as exc:
        raise ConfigurationError(
            f"grid for {year:04d}-{month:02d} starts before {date.min.isoformat()}"
        ) from exc


def _iter_days(start: date) -> Iterator[date]:
    cursor = start
    while True:
        yield cursor
        cursor += _ONE_DAY


def build_grid(
    year: int,
    month: int,
    window: DayOfWeekWindow,
    bounds: ValidDateBounds | None = None,
    is_day_enabled: Callable[[date], bool] | None = None,
    category_colors: Callable[[date], Sequence[str] | None] | None = None,
) -> tuple[WeekRow, ...]:
    """Return the week rows shown for *month* of *year*.

    Rows start on ``window.first_day_of_week`` and end on ``window.last``.
    Leading and trailing days from adjacent months fill out the first and
    last row and are always disabled.  *is_day_enabled* is asked about every
    visible day; *category_colors* only about enabled ones.
    """
    start = grid_start(year, month, window.first_day_of_week)
    bounds = bounds or ValidDateBounds()
    last_day_of_week = window.last
    stop_day_of_week = next_weekday(last_day_of_week)
    anchor = (year, month)

    rows: list[WeekRow] = []
    row: list[DayCell] = []
    for current in _iter_days(start):
        day_of_week = current.isoweekday()
        if (current.year, current.month) > anchor and day_of_week == stop_day_of_week:
            break
        if not window.contains(day_of_week):
            continue

        in_month = (current.year, current.month) == anchor
        allowed = is_day_enabled(current) if is_day_enabled is not None else True
        enabled = bool(allowed) and in_month and current in bounds
        colors: tuple[str, ...] = ()
        if enabled and category_colors is not None:
            colors = tuple(category_colors(current) or ())
        row.append(DayCell(current, enabled, in_month, colors))

        if day_of_week == last_day_of_week:
            rows.append(tuple(row))
            row = []

    if row:
        rows.append(tuple(row))
    return tuple(rows)


def build_headers(window: DayOfWeekWindow) -> tuple[HeaderLabel, ...]:
    """Return one header per visible weekday, starting at the first day of the window."""
    return tuple(HeaderLabel(d, day_name(d)) for d in window.weekdays())


# ---------------------------------------------------------------------------
# Month navigation
# ---------------------------------------------------------------------------

def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
