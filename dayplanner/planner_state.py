# dayplanner/planner_state.py

from dataclasses import dataclass, field, replace
from typing import Mapping, Tuple

from . import inbox as inbox_ops
from . import schedule_store
from .data_model import InboxItem, Task

# Mapping of date-key to that day's tasks; see schedule_store.
ScheduleMap = Mapping[str, Tuple[Task, ...]]


@dataclass(frozen=True)
class PlannerState:
    """Everything the planner persists: the dated schedule and the inbox."""
    schedule: ScheduleMap = field(default_factory=dict)
    inbox: Tuple[InboxItem, ...] = ()

    def with_schedule(self, schedule: ScheduleMap) -> "PlannerState":
        return replace(self, schedule=schedule)

    def with_inbox(self, inbox: Tuple[InboxItem, ...]) -> "PlannerState":
        return replace(self, inbox=tuple(inbox))


def migrate_inbox_item(state: PlannerState, item_id: str, target_date_key: str) -> PlannerState:
    """Move an inbox item onto the schedule as one state change.

    The returned snapshot has the item removed from the inbox and the new
    task filed under target_date_key. An item that is no longer in the inbox
    leaves the state untouched.
    """
    item = inbox_ops.find_item(state.inbox, item_id)
    if item is None:
        return state
    return PlannerState(
        schedule=schedule_store.migrate_inbox_item(state.schedule, item, target_date_key),
        inbox=inbox_ops.delete_item(state.inbox, item_id),
    )
