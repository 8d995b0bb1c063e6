# tests/test_planner_app.py

from __future__ import annotations

import pytest

from dayplanner.confirm_screen import ConfirmScreen
from dayplanner.context import PlannerContext
from dayplanner.data_model import TaskDraft
from dayplanner.day_screen import DayScreen
from dayplanner.inbox_screen import InboxScreen, ScheduleDateScreen
from dayplanner.planner_app import PlannerApp
from dayplanner.schedule_store import tasks_for
from dayplanner.view_state import ViewMode


@pytest.fixture()
def app(provider, today) -> PlannerApp:
    return PlannerApp(PlannerContext(provider, today), today=lambda: today)


@pytest.mark.asyncio
async def test_arrow_keys_move_focus_within_reach(app: PlannerApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("right")
        assert app.carousel.focused_index == 2

        await pilot.press("right", "right", "right", "right", "right")
        assert app.carousel.focused_index == 6

        await pilot.press("t")
        assert app.carousel.focused_index == 1

        await pilot.press("left", "left")
        assert app.carousel.focused_index == 0


@pytest.mark.asyncio
async def test_enter_expands_and_escape_closes(app: PlannerApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        assert app.carousel.is_expanded
        assert isinstance(app.screen, DayScreen)

        await pilot.press("right")
        assert app.carousel.focused_index == 1

        await pilot.press("escape")
        await pilot.pause()
        assert not app.carousel.is_expanded
        assert not isinstance(app.screen, DayScreen)


@pytest.mark.asyncio
async def test_switching_to_month_view(app: PlannerApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("m")
        assert app.screen_state.view_mode is ViewMode.MONTH

        await pilot.press("right_square_bracket")
        assert app.screen_state.current_month == (2024, 6)

        await pilot.press("m")
        assert app.screen_state.view_mode is ViewMode.CAROUSEL


@pytest.mark.asyncio
async def test_adding_a_task_from_the_day_screen(app: PlannerApp, today_key: str) -> None:
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("a")
        await pilot.pause()
        await pilot.press("g", "y", "m", "enter")
        await pilot.pause()

        titles = [task.title for task in tasks_for(app.context.state.schedule, today_key)]
        assert titles == ["Deep Work Session", "gym"]


@pytest.mark.asyncio
async def test_day_screen_opens_with_the_first_row_selected(app: PlannerApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

        row = app.screen.list_view.highlighted_child
        assert row is not None
        assert row.task.title == "Deep Work Session"


@pytest.mark.asyncio
async def test_delete_asks_first_and_can_be_kept_or_confirmed(app: PlannerApp, today_key: str) -> None:
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

        await pilot.press("d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmScreen)
        assert app.deletion.is_pending

        await pilot.press("n")
        await pilot.pause()
        assert isinstance(app.screen, DayScreen)
        assert not app.deletion.is_pending
        assert [task.title for task in tasks_for(app.context.state.schedule, today_key)] == ["Deep Work Session"]

        await pilot.press("d")
        await pilot.pause()
        await pilot.press("y")
        await pilot.pause()
        assert isinstance(app.screen, DayScreen)
        assert tasks_for(app.context.state.schedule, today_key) == ()
        assert app.context.logs[-1].endswith("Deleted: 'Deep Work Session'")


@pytest.mark.asyncio
async def test_cursor_follows_a_task_when_starring_reorders_it(app: PlannerApp, today_key: str) -> None:
    async with app.run_test() as pilot:
        app.context.add_task(today_key, TaskDraft(title="Gym"))
        gym = tasks_for(app.context.state.schedule, today_key)[-1]
        app.context.toggle_star(today_key, gym.id)
        await pilot.press("enter")
        await pilot.pause()
        assert app.screen.list_view.highlighted_child.task.title == "Deep Work Session"

        # Unstarring moves "Deep Work Session" below "Gym".
        await pilot.press("s")
        await pilot.pause()

        titles = [task.title for task in tasks_for(app.context.state.schedule, today_key)]
        assert titles == ["Deep Work Session", "Gym"]
        assert app.screen.list_view.index == 1
        assert app.screen.list_view.highlighted_child.task.title == "Deep Work Session"


@pytest.mark.asyncio
async def test_inbox_migration_defaults_to_the_app_clock(app: PlannerApp, today_key: str) -> None:
    async with app.run_test() as pilot:
        await pilot.press("i")
        await pilot.pause()
        assert isinstance(app.screen, InboxScreen)

        await pilot.press("tab")
        await pilot.pause()
        await pilot.press("m")
        await pilot.pause()
        assert isinstance(app.screen, ScheduleDateScreen)
        assert app.screen.date_input.value == today_key

        await pilot.press("enter")
        await pilot.pause()
        titles = [task.title for task in tasks_for(app.context.state.schedule, today_key)]
        assert titles == ["Deep Work Session", "Press m to schedule this item ->"]
