"""Controller refresh cycle against an in-memory view."""

from datetime import date

import pytest

from calendar_controller import CalendarController
from calendar_logic import FRIDAY, MONDAY, SUNDAY, ConfigurationError
from day_adapter import DayAdapter


class FakeView:
    def __init__(self, width=0):
        self.width = width
        self.renders = []
        self.sizes = []
        self.visible = None
        self.layout_listener = None
        self.click_listener = None

    def render(self, headers, rows, typeface=None):
        self.renders.append((headers, rows, typeface))
        header_targets = [f"header-{h.day_of_week}" for h in headers]
        day_targets = [[f"day-{c.date.isoformat()}" for c in row] for row in rows]
        return header_targets, day_targets

    def available_width(self):
        return self.width

    def apply_tile_size(self, size):
        self.sizes.append(size)

    def set_visible(self, visible):
        self.visible = visible

    def set_layout_listener(self, listener):
        self.layout_listener = listener

    def set_click_listener(self, listener):
        self.click_listener = listener


class RecordingAdapter(DayAdapter):
    def __init__(self, disabled=()):
        self.disabled = set(disabled)
        self.days = []
        self.headers = []

    def is_day_enabled(self, day):
        return day not in self.disabled

    def get_category_colors(self, day):
        return ["#FF0000"] if day.day == 1 else None

    def update_day(self, target, day):
        self.days.append((target, day))

    def update_header(self, target, day_of_week):
        self.headers.append((target, day_of_week))


@pytest.fixture
def view():
    return FakeView()


def _controller(view, **kwargs):
    kwargs.setdefault("year", 2025)
    kwargs.setdefault("month", 6)
    return CalendarController(view, kwargs.pop("adapter", None), **kwargs)


def test_registers_listeners_with_view(view):
    c = _controller(view)
    assert view.layout_listener == c.on_layout
    assert view.click_listener is not None
    assert not c.is_initialized


def test_refresh_renders_grid_and_headers(view):
    c = _controller(view, typeface="Segoe UI 9")
    c.refresh()
    assert c.is_initialized
    headers, rows, typeface = view.renders[-1]
    assert headers == c.headers
    assert rows == c.rows
    assert typeface == "Segoe UI 9"
    assert len(rows) == 6
    assert rows[0][0].date == date(2025, 5, 26)


def test_hooks_called_for_headers_and_enabled_days_only(view):
    adapter = RecordingAdapter(disabled={date(2025, 6, 10)})
    c = _controller(view, adapter=adapter)
    c.refresh()
    assert adapter.headers == [(f"header-{d}", d) for d in range(1, 8)]
    expected_days = [date(2025, 6, d) for d in range(1, 31) if d != 10]
    assert [d for _t, d in adapter.days] == expected_days
    assert all(t == f"day-{d.isoformat()}" for t, d in adapter.days)

    june_1 = next(cell for row in c.rows for cell in row if cell.date == date(2025, 6, 1))
    july_1 = next(cell for row in c.rows for cell in row if cell.date == date(2025, 7, 1))
    assert june_1.category_colors == ("#FF0000",)
    assert july_1.category_colors == ()


def test_hidden_until_width_is_known(view):
    c = _controller(view)
    c.refresh()
    assert c.tile_size is None
    assert view.visible is False
    assert view.sizes == []


def test_layout_signal_sizes_and_shows(view):
    c = _controller(view, padding_per_side=8, max_tile_size=48)
    c.refresh()
    view.width = 320
    view.layout_listener()
    assert c.tile_size == 29
    assert view.sizes == [29]
    assert view.visible is True


def test_layout_signal_is_idempotent(view):
    c = _controller(view, padding_per_side=8, max_tile_size=48)
    view.width = 320
    c.refresh()
    rows = c.rows
    for _ in range(3):
        c.on_layout()
    assert view.sizes == [29, 29, 29, 29]
    assert c.rows is rows
    assert view.visible is True


def test_degenerate_size_hides_view(view):
    c = _controller(view, padding_per_side=8, max_tile_size=48)
    view.width = 320
    c.refresh()
    view.width = 100
    c.on_layout()
    assert c.tile_size == 0
    assert view.visible is False


def test_layout_before_refresh_does_nothing(view):
    c = _controller(view)
    view.width = 320
    c.on_layout()
    assert view.sizes == []
    assert view.visible is None


def test_custom_window_uses_its_width_for_sizing(view):
    c = _controller(view, last_day_of_week=FRIDAY, padding_per_side=8, max_tile_size=48)
    view.width = 320
    c.refresh()
    assert all(len(row) == 5 for row in c.rows)
    assert c.tile_size == 41


def test_rebuild_replaces_grid(view):
    c = _controller(view)
    c.refresh()
    old_rows = c.rows
    c.next_month()
    assert (c.year, c.month) == (2025, 7)
    assert c.rows is not old_rows
    assert c.rows[0][0].date == date(2025, 6, 30)
    assert len(view.renders) == 2


def test_navigation_across_year(view):
    c = _controller(view, year=2025, month=12)
    c.next_month()
    assert (c.year, c.month) == (2026, 1)
    c.prev_month()
    c.prev_month()
    assert (c.year, c.month) == (2025, 11)


def test_set_first_day_of_week(view):
    c = _controller(view)
    c.set_first_day_of_week(SUNDAY)
    assert c.rows[0][0].date == date(2025, 6, 1)
    assert [h.text for h in c.headers][:2] == ["Sun", "Mon"]


def test_set_last_day_of_week_back_to_full_week(view):
    c = _controller(view, last_day_of_week=FRIDAY)
    c.refresh()
    c.set_last_day_of_week(None)
    assert c.window.width == 7


def test_invalid_configuration_keeps_previous_state(view):
    c = _controller(view)
    c.refresh()
    rows, window = c.rows, c.window
    with pytest.raises(ConfigurationError):
        c.set_first_day_of_week(9)
    with pytest.raises(ConfigurationError):
        c.set_valid_range(date(2025, 6, 20), date(2025, 6, 1))
    with pytest.raises(ConfigurationError):
        c.set_month(2025, 0)
    with pytest.raises(ConfigurationError):
        c.set_month(0, 1)
    with pytest.raises(ConfigurationError):
        c.set_month(10000, 1)
    assert (c.year, c.month) == (2025, 6)
    assert c.rows is rows
    assert c.window == window
    assert len(view.renders) == 1


def test_invalid_constructor_arguments():
    with pytest.raises(ConfigurationError):
        _controller(FakeView(), first_day_of_week=0)
    with pytest.raises(ConfigurationError):
        _controller(FakeView(), month=13)
    with pytest.raises(ConfigurationError):
        _controller(FakeView(), year=0)


def test_valid_range_disables_days(view):
    adapter = RecordingAdapter()
    c = _controller(view, adapter=adapter)
    c.set_valid_range(date(2025, 6, 10), date(2025, 6, 12))
    assert [d for _t, d in adapter.days] == [date(2025, 6, 10), date(2025, 6, 11), date(2025, 6, 12)]


def test_set_adapter_and_typeface_refresh(view):
    c = _controller(view)
    c.set_adapter(RecordingAdapter(disabled={date(2025, 6, 2)}))
    c.set_typeface("Courier 10")
    assert view.renders[-1][2] == "Courier 10"
    june_2 = c.rows[1][0]
    assert june_2.date == date(2025, 6, 2) and not june_2.is_enabled


def test_click_is_forwarded(view):
    clicked = []
    _controller(view, on_day_click=clicked.append)
    view.click_listener(date(2025, 6, 3))
    assert clicked == [date(2025, 6, 3)]


def test_click_without_listener_is_ignored(view):
    _controller(view)
    view.click_listener(date(2025, 6, 3))


def test_defaults_to_current_month(view):
    today = date.today()
    c = CalendarController(view)
    assert (c.year, c.month) == (today.year, today.month)
    assert c.window.first_day_of_week == MONDAY


def test_navigation_stops_at_the_end_of_the_date_range(view):
    c = _controller(view, year=9999, month=11)
    c.refresh()
    rows = c.rows
    with pytest.raises(ConfigurationError):
        c.next_month()
    assert (c.year, c.month) == (9999, 11)
    assert c.rows is rows
    c.prev_month()
    assert (c.year, c.month) == (9999, 10)


def test_failed_refresh_restores_previous_window(view):
    # 0001-01-01 is a Monday; a Sunday start needs a day before it
    c = _controller(view, year=1, month=1)
    c.refresh()
    window = c.window
    with pytest.raises(ConfigurationError):
        c.set_first_day_of_week(SUNDAY)
    assert c.window == window
    with pytest.raises(ConfigurationError):
        c.prev_month()
    assert (c.year, c.month) == (1, 1)
    c.set_last_day_of_week(FRIDAY)
    assert all(len(row) == 5 for row in c.rows)
