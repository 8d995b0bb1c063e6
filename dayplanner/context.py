# dayplanner/context.py

import logging
import datetime
from typing import Callable, List, Optional

from . import inbox as inbox_ops
from . import schedule_store
from .data_model import Recurrence, TaskDraft
from .persistence import StorageProvider, load_logs, load_state, log_action, save_state
from .planner_state import PlannerState, migrate_inbox_item

logger = logging.getLogger(__name__)

Listener = Callable[[PlannerState], None]


class PlannerContext:
    """Owns the current planner snapshot.

    State is loaded from the provider once, here, and every committed
    snapshot is written straight back to it. Screens hold a reference to the
    context and never keep task data of their own.
    """

    def __init__(self, provider: StorageProvider, today: Optional[datetime.date] = None):
        self.provider = provider
        self._state = load_state(provider, today)
        self.logs: List[str] = load_logs(provider)
        self._listeners: List[Listener] = []
        save_state(provider, self._state)
        logger.debug(
            f"PlannerContext loaded: {len(self._state.schedule)} day(s), "
            f"{len(self._state.inbox)} inbox item(s)"
        )

    @property
    def state(self) -> PlannerState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def commit(self, new_state: PlannerState, action: Optional[str] = None) -> bool:
        """Replace the snapshot, persist it and notify listeners.

        Returns False when the operation was a no-op or the snapshot could
        not be written, in which case the current snapshot is kept.
        """
        if new_state == self._state:
            return False
        try:
            save_state(self.provider, new_state)
        except OSError as e:
            logger.warning(f"Could not save planner state, change dropped: {e}")
            return False
        self._state = new_state
        if action:
            log_action(self.provider, self.logs, action)
        for listener in self._listeners:
            listener(new_state)
        return True

    # ---- schedule ----

    def add_task(self, date_key: str, draft: TaskDraft,
                 recurrence: Recurrence = Recurrence.NONE) -> bool:
        schedule = schedule_store.add_task(self._state.schedule, date_key, draft, recurrence)
        suffix = "" if recurrence is Recurrence.NONE else f" ({recurrence.value})"
        return self.commit(self._state.with_schedule(schedule),
                           f"Added task: '{draft.title.strip()}' on {date_key}{suffix}")

    def toggle_star(self, date_key: str, task_id: str) -> bool:
        schedule = schedule_store.toggle_star(self._state.schedule, date_key, task_id)
        return self.commit(self._state.with_schedule(schedule))

    def toggle_checklist_item(self, date_key: str, task_id: str, item_id: str) -> bool:
        schedule = schedule_store.toggle_checklist_item(self._state.schedule, date_key, task_id, item_id)
        return self.commit(self._state.with_schedule(schedule))

    # ---- inbox ----

    def add_inbox_item(self, text: str) -> bool:
        return self.commit(self._state.with_inbox(inbox_ops.add_item(self._state.inbox, text)),
                           f"Added inbox item: '{text.strip()}'")

    def toggle_inbox_done(self, item_id: str) -> bool:
        return self.commit(self._state.with_inbox(inbox_ops.toggle_done(self._state.inbox, item_id)))

    def toggle_inbox_star(self, item_id: str) -> bool:
        return self.commit(self._state.with_inbox(inbox_ops.toggle_star(self._state.inbox, item_id)))

    def migrate_inbox_item(self, item_id: str, target_date_key: str) -> bool:
        item = inbox_ops.find_item(self._state.inbox, item_id)
        text = item.text if item else item_id
        return self.commit(migrate_inbox_item(self._state, item_id, target_date_key),
                           f"Scheduled inbox item: '{text}' on {target_date_key}")
