# dayplanner/confirm.py
"""Two-step deletion shared by every screen that deletes something.

``request_delete`` only remembers what should go. ``confirm`` applies the
delete to a planner snapshot and forgets the target; ``cancel`` just
forgets it. There is never more than one pending target: a new request
replaces the old one.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from . import inbox as inbox_ops
from . import schedule_store
from .planner_state import PlannerState


@dataclass(frozen=True)
class ScheduledTaskTarget:
    date_key: str
    task_id: str

    def apply(self, state: PlannerState) -> PlannerState:
        return state.with_schedule(
            schedule_store.delete_task(state.schedule, self.date_key, self.task_id)
        )


@dataclass(frozen=True)
class InboxItemTarget:
    item_id: str

    def apply(self, state: PlannerState) -> PlannerState:
        return state.with_inbox(inbox_ops.delete_item(state.inbox, self.item_id))


DeleteTarget = Union[ScheduledTaskTarget, InboxItemTarget]


@dataclass(frozen=True)
class DeletionFlow:
    pending: Optional[DeleteTarget] = None

    @property
    def is_pending(self) -> bool:
        return self.pending is not None

    def request_delete(self, target: DeleteTarget) -> "DeletionFlow":
        return DeletionFlow(pending=target)

    def confirm(self, state: PlannerState) -> Tuple["DeletionFlow", PlannerState]:
        if self.pending is None:
            return self, state
        return DeletionFlow(), self.pending.apply(state)

    def cancel(self) -> "DeletionFlow":
        return DeletionFlow()
