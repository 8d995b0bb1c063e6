# tests/test_end_to_end.py

from __future__ import annotations

from dayplanner.data_model import Recurrence, TaskDraft
from dayplanner.schedule_store import add_task, tasks_for


def test_weekly_task_on_seeded_today(seeded_state, today_key) -> None:
    assert len(tasks_for(seeded_state.schedule, today_key)) == 1

    schedule = add_task(seeded_state.schedule, today_key, TaskDraft(title="Plan trip"), Recurrence.WEEKLY)

    assert [task.title for task in tasks_for(schedule, today_key)] == ["Deep Work Session", "Plan trip"]
    others = {key: tasks for key, tasks in schedule.items() if key != today_key}
    assert len(others) == 12
    assert all(key > today_key for key in others)
    assert all(len(tasks) == 1 and tasks[0].title == "Plan trip" for tasks in others.values())
