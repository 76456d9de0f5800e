"""Date cursor behind the calendar picker."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from cloudnav.constants.enums import CalendarField


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the target month's length."""
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


@dataclass
class CalendarState:
    """Cursor date plus the field the picker writes back to."""

    cursor: date
    target: CalendarField = CalendarField.START

    def prev_day(self) -> None:
        self.cursor -= timedelta(days=1)

    def next_day(self) -> None:
        self.cursor += timedelta(days=1)

    def prev_week(self) -> None:
        self.cursor -= timedelta(weeks=1)

    def next_week(self) -> None:
        self.cursor += timedelta(weeks=1)

    def prev_month(self) -> None:
        self.cursor = shift_months(self.cursor, -1)

    def next_month(self) -> None:
        self.cursor = shift_months(self.cursor, 1)

    def month_grid(self) -> list[list[int]]:
        """Weeks of the cursor's month, Monday first, 0 for padding days."""
        return calendar.monthcalendar(self.cursor.year, self.cursor.month)


__all__ = ["CalendarState", "shift_months"]
