# dayplanner/schedule_store.py
"""Date-keyed task store.

The store is a mapping of ``YYYY-MM-DD`` keys to tuples of tasks. Every
operation here returns a new mapping and leaves its input untouched, so a
snapshot handed to the view can never change underneath it. A missing key
and an empty tuple mean the same thing.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, Mapping, Tuple

from .config import INBOX_MIGRATION_MARKER
from .data_model import ChecklistItem, InboxItem, Recurrence, Task, TaskDraft
from .recurrence import expand
from .utils import generate_id

Schedule = Mapping[str, Tuple[Task, ...]]

logger = logging.getLogger(__name__)


def tasks_for(store: Schedule, date_key: str) -> Tuple[Task, ...]:
    return tuple(store.get(date_key, ()))


def task_count(store: Schedule, date_key: str) -> int:
    return len(store.get(date_key, ()))


def display_order(tasks: Iterable[Task]) -> Tuple[Task, ...]:
    """Starred tasks first, otherwise stored order."""
    return tuple(sorted(tasks, key=lambda task: not task.starred))


def _with_day(store: Schedule, date_key: str, tasks: Tuple[Task, ...]) -> Dict[str, Tuple[Task, ...]]:
    new_store = dict(store)
    if tasks:
        new_store[date_key] = tasks
    else:
        new_store.pop(date_key, None)
    return new_store


def _update_task(store: Schedule, date_key: str, task_id: str,
                 change: Callable[[Task], Task]) -> Schedule:
    day = tasks_for(store, date_key)
    if not any(task.id == task_id for task in day):
        return store
    return _with_day(store, date_key, tuple(
        change(task) if task.id == task_id else task for task in day
    ))


def _fresh_copy(base: Task) -> Task:
    # Each occurrence gets its own ids, including the checklist rows.
    return replace(
        base,
        id=generate_id(),
        checklist=tuple(replace(item, id=generate_id()) for item in base.checklist),
    )


def add_task(store: Schedule, date_key: str, draft: TaskDraft,
             recurrence: Recurrence = Recurrence.NONE) -> Schedule:
    """File a task built from draft under date_key and every recurrence date.

    The caller must not submit a blank title. Empty checklist rows are
    dropped.
    """
    base = Task(
        id="",
        title=draft.title.strip(),
        time=draft.time,
        details=draft.details,
        checklist=tuple(
            ChecklistItem(id="", text=text) for text in draft.checklist if text.strip()
        ),
    )
    targets = expand(date_key, recurrence)

    new_store = dict(store)
    for target in targets:
        new_store[target] = tasks_for(new_store, target) + (_fresh_copy(base),)
    logger.debug(f"Added '{base.title}' to {len(targets)} day(s) starting {date_key}")
    return new_store


def delete_task(store: Schedule, date_key: str, task_id: str) -> Schedule:
    day = tasks_for(store, date_key)
    remaining = tuple(task for task in day if task.id != task_id)
    if len(remaining) == len(day):
        return store
    return _with_day(store, date_key, remaining)


def toggle_star(store: Schedule, date_key: str, task_id: str) -> Schedule:
    return _update_task(
        store, date_key, task_id,
        lambda task: replace(task, starred=not task.starred),
    )


def toggle_checklist_item(store: Schedule, date_key: str, task_id: str, item_id: str) -> Schedule:
    def flip(task: Task) -> Task:
        if not any(item.id == item_id for item in task.checklist):
            return task
        checklist = tuple(
            replace(item, done=not item.done) if item.id == item_id else item
            for item in task.checklist
        )
        return replace(task, checklist=checklist)

    new_store = _update_task(store, date_key, task_id, flip)
    if tasks_for(new_store, date_key) == tasks_for(store, date_key):
        return store
    return new_store


def migrate_inbox_item(store: Schedule, inbox_item: InboxItem, target_date_key: str) -> Schedule:
    """Append a task made from an inbox item to target_date_key.

    Removing the item from the inbox is the caller's half of the move; see
    ``planner_state.migrate_inbox_item`` which applies both together.
    """
    task = Task(
        id=generate_id(),
        title=inbox_item.text,
        details=INBOX_MIGRATION_MARKER,
        starred=inbox_item.starred,
    )
    return _with_day(store, target_date_key, tasks_for(store, target_date_key) + (task,))
