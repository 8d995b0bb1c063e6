# dayplanner/view_state.py

import calendar
from dataclasses import dataclass, replace
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional, Tuple

from .carousel import CarouselState


class ViewMode(Enum):
    CAROUSEL = "carousel"
    MONTH = "month"


@dataclass(frozen=True)
class ScreenState:
    """Which schedule view is showing and where the month view is pointed.

    ``cursor`` is the highlighted day of the month grid; the month shown is
    always the cursor's month.
    """
    cursor: date
    view_mode: ViewMode = ViewMode.CAROUSEL
    expanded_day: Optional[str] = None

    @classmethod
    def for_today(cls, today: date) -> "ScreenState":
        return cls(cursor=today)

    @property
    def current_month(self) -> Tuple[int, int]:
        return self.cursor.year, self.cursor.month

    @property
    def month_title(self) -> str:
        return f"{calendar.month_name[self.cursor.month]} {self.cursor.year}"

    def previous_month(self) -> "ScreenState":
        year, month = self.current_month
        if month == 1:
            year, month = year - 1, 12
        else:
            month -= 1
        return replace(self, cursor=date(year, month, 1))

    def next_month(self) -> "ScreenState":
        year, month = self.current_month
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1
        return replace(self, cursor=date(year, month, 1))

    def this_month(self, today: date) -> "ScreenState":
        return replace(self, cursor=today)

    def move_cursor(self, days: int) -> "ScreenState":
        return replace(self, cursor=self.cursor + timedelta(days=days))

    def open_day(self, date_key: str) -> "ScreenState":
        """Expand a day from the month grid into the day editor."""
        if self.view_mode is not ViewMode.MONTH:
            return self
        return replace(self, expanded_day=date_key)

    def close_day(self) -> "ScreenState":
        return replace(self, expanded_day=None)


def toggle_view_mode(screen: ScreenState, carousel: CarouselState) -> Tuple[ScreenState, CarouselState]:
    """Switch between carousel and month view.

    Any expanded day is closed so a day is never open in both views.
    """
    new_mode = ViewMode.MONTH if screen.view_mode is ViewMode.CAROUSEL else ViewMode.CAROUSEL
    return replace(screen, view_mode=new_mode, expanded_day=None), carousel.close()


def month_grid(year: int, month: int) -> List[List[Optional[date]]]:
    """Weeks of the month, Sunday first; days outside the month are None."""
    weeks = calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(year, month)
    return [[date(year, month, day) if day else None for day in week] for week in weeks]
