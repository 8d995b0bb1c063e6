# tests/test_context.py

from __future__ import annotations

import json
import logging

from dayplanner.config import INBOX_KEY, TASKS_KEY
from dayplanner.context import PlannerContext
from dayplanner.data_model import Recurrence, TaskDraft
from dayplanner.persistence import MemoryProvider
from dayplanner.schedule_store import task_count, tasks_for


def test_context_flushes_every_change(provider, today, today_key) -> None:
    context = PlannerContext(provider, today)
    seen = []
    context.subscribe(seen.append)

    assert context.add_task(today_key, TaskDraft(title="Gym"))

    saved = json.loads(provider.values[TASKS_KEY])
    assert [task["title"] for task in saved[today_key]] == ["Deep Work Session", "Gym"]
    assert seen == [context.state]
    assert context.logs[-1].endswith(f"Added task: 'Gym' on {today_key}")


def test_no_op_changes_are_not_committed(provider, today, today_key) -> None:
    context = PlannerContext(provider, today)
    seen = []
    context.subscribe(seen.append)

    assert not context.toggle_star(today_key, "missing")
    assert not context.add_inbox_item("   ")
    assert seen == []


def test_migration_is_a_single_commit(provider, today, today_key) -> None:
    context = PlannerContext(provider, today)
    seen = []
    context.subscribe(seen.append)
    item = context.state.inbox[0]

    assert context.migrate_inbox_item(item.id, "2024-05-20")

    assert len(seen) == 1
    assert item not in seen[0].inbox
    assert tasks_for(seen[0].schedule, "2024-05-20")[0].title == item.text
    assert len(json.loads(provider.values[INBOX_KEY])) == 1
    assert not context.migrate_inbox_item(item.id, "2024-05-20")
    assert task_count(context.state.schedule, "2024-05-20") == 1


def test_state_survives_a_restart(provider, today, today_key) -> None:
    context = PlannerContext(provider, today)
    context.add_task(today_key, TaskDraft(title="Run"), Recurrence.DAILY)
    context.add_inbox_item("Call mum")

    reloaded = PlannerContext(provider, today)
    assert reloaded.state == context.state
    assert reloaded.logs == context.logs


class ReadOnlyProvider(MemoryProvider):
    """Accepts writes until it is locked, then fails like a read-only disk."""

    def __init__(self):
        super().__init__()
        self.locked = False

    def set(self, key: str, value: str) -> None:
        if self.locked:
            raise OSError("read-only file system")
        super().set(key, value)


def test_failed_save_keeps_the_current_snapshot(today, today_key, caplog) -> None:
    provider = ReadOnlyProvider()
    context = PlannerContext(provider, today)
    before = context.state
    seen = []
    context.subscribe(seen.append)

    provider.locked = True
    with caplog.at_level(logging.WARNING):
        assert not context.add_task(today_key, TaskDraft(title="Gym"))

    assert context.state is before
    assert task_count(context.state.schedule, today_key) == 1
    assert seen == []
    assert "Could not save planner state" in caplog.text
