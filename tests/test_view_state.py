# tests/test_view_state.py

from __future__ import annotations

from datetime import date

from dayplanner.carousel import CarouselState
from dayplanner.view_state import ScreenState, ViewMode, month_grid, toggle_view_mode


def test_toggle_view_mode_closes_expanded_day() -> None:
    screen = ScreenState.for_today(date(2024, 5, 14))
    carousel = CarouselState(focused_index=2).expand()

    screen, carousel = toggle_view_mode(screen, carousel)
    assert screen.view_mode is ViewMode.MONTH
    assert carousel == CarouselState(focused_index=2)

    screen = screen.open_day("2024-05-20")
    assert screen.expanded_day == "2024-05-20"

    screen, carousel = toggle_view_mode(screen, carousel)
    assert screen.view_mode is ViewMode.CAROUSEL
    assert screen.expanded_day is None


def test_open_day_only_applies_in_month_view() -> None:
    screen = ScreenState.for_today(date(2024, 5, 14))
    assert screen.open_day("2024-05-20") is screen


def test_month_navigation_rolls_over_years() -> None:
    screen = ScreenState.for_today(date(2024, 1, 31))

    assert screen.previous_month().current_month == (2023, 12)
    assert screen.next_month().current_month == (2024, 2)
    assert ScreenState.for_today(date(2024, 12, 2)).next_month().current_month == (2025, 1)
    assert screen.next_month().month_title == "February 2024"


def test_cursor_moves_carry_the_month() -> None:
    screen = ScreenState.for_today(date(2024, 5, 30))
    moved = screen.move_cursor(7)
    assert moved.cursor == date(2024, 6, 6)
    assert moved.current_month == (2024, 6)
    assert moved.this_month(date(2024, 5, 14)).current_month == (2024, 5)


def test_month_grid_starts_on_sunday() -> None:
    weeks = month_grid(2024, 5)  # May 1st 2024 is a Wednesday

    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][:3] == [None, None, None]
    assert weeks[0][3] == date(2024, 5, 1)
    days = [day for week in weeks for day in week if day]
    assert len(days) == 31
    assert days[-1] == date(2024, 5, 31)
