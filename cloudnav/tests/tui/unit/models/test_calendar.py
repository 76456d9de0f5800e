"""Unit tests for the calendar picker state."""

from __future__ import annotations

from datetime import date

from cloudnav.models.state.calendar import CalendarState, shift_months


class TestCalendarState:
    """Test cursor movement."""

    def test_day_and_week_steps(self) -> None:
        calendar = CalendarState(cursor=date(2024, 3, 1))
        calendar.prev_day()
        assert calendar.cursor == date(2024, 2, 29)
        calendar.next_week()
        assert calendar.cursor == date(2024, 3, 7)
        calendar.prev_week()
        calendar.next_day()
        assert calendar.cursor == date(2024, 3, 1)

    def test_month_steps_clamp_day(self) -> None:
        calendar = CalendarState(cursor=date(2024, 1, 31))
        calendar.next_month()
        assert calendar.cursor == date(2024, 2, 29)
        calendar.prev_month()
        assert calendar.cursor == date(2024, 1, 29)

    def test_shift_across_year(self) -> None:
        assert shift_months(date(2023, 12, 15), 1) == date(2024, 1, 15)
        assert shift_months(date(2024, 1, 15), -1) == date(2023, 12, 15)

    def test_month_grid_pads_with_zero(self) -> None:
        grid = CalendarState(cursor=date(2024, 5, 10)).month_grid()
        assert grid[0][:2] == [0, 0]
        assert grid[0][2] == 1
        assert max(max(week) for week in grid) == 31
