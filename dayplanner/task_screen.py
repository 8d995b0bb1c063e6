# dayplanner/task_screen.py

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Label, Input

from .data_model import Recurrence, TaskDraft

RECURRENCE_LABELS = {
    Recurrence.NONE: "Once",
    Recurrence.DAILY: "Daily (15 days)",
    Recurrence.WEEKLY: "Weekly (13 weeks)",
}
CHECKLIST_SEPARATOR = ";"


class TaskScreenResult(Message):
    """Message containing the result of TaskScreen operations."""
    def __init__(self, cancelled: bool, draft: Optional[TaskDraft] = None,
                 recurrence: Recurrence = Recurrence.NONE) -> None:
        super().__init__()
        self.cancelled = cancelled
        self.draft = draft
        self.recurrence = recurrence


class TaskScreen(Screen):
    """Screen for adding a task to a day."""
    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+r", "cycle_repeat", "Change repeat"),
    ]

    def __init__(self, day_label: str, parent_screen: Optional[Screen] = None):
        super().__init__()
        self._day_label = day_label
        self._parent_screen = parent_screen
        self.recurrence = Recurrence.NONE

        self.title_input = Input(placeholder="Title (required)", select_on_focus=False)
        self.time_input = Input(placeholder="Time (optional, e.g. 10:00 AM)", select_on_focus=False)
        self.details_input = Input(placeholder="Details (optional)", select_on_focus=False)
        self.checklist_input = Input(
            placeholder=f"Checklist items separated by '{CHECKLIST_SEPARATOR}' (optional)",
            select_on_focus=False,
        )
        self.repeat_label = Label(self._repeat_text())
        self.hint_label = Label("")

        self.logger = logging.getLogger(__name__)

    def _repeat_text(self) -> str:
        return f"Repeat: {RECURRENCE_LABELS[self.recurrence]}   (ctrl+r to change)"

    def on_mount(self):
        """Called once the screen is mounted."""
        self.title_input.focus()

    def compose(self) -> ComposeResult:
        yield Label(f"New task for {self._day_label}")
        yield Label("Title:")
        yield self.title_input
        yield Label("Time:")
        yield self.time_input
        yield Label("Details:")
        yield self.details_input
        yield Label("Checklist:")
        yield self.checklist_input
        yield self.repeat_label
        yield self.hint_label

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any field saves the task."""
        event.stop()
        self.action_submit()

    def action_cycle_repeat(self) -> None:
        order = list(Recurrence)
        self.recurrence = order[(order.index(self.recurrence) + 1) % len(order)]
        self.repeat_label.update(self._repeat_text())

    def _post_result(self, result: TaskScreenResult) -> None:
        if self._parent_screen:
            self._parent_screen.post_message(result)
        else:
            self.post_message(result)

    def action_submit(self) -> None:
        """Handle Enter key for saving the task."""
        title = self.title_input.value.strip()
        if not title:
            self.logger.debug("Title is required, submission aborted")
            self.hint_label.update("A title is required.")
            return

        draft = TaskDraft(
            title=title,
            time=self.time_input.value.strip(),
            details=self.details_input.value.strip(),
            checklist=tuple(
                text.strip() for text in self.checklist_input.value.split(CHECKLIST_SEPARATOR)
            ),
        )
        self._post_result(TaskScreenResult(cancelled=False, draft=draft, recurrence=self.recurrence))
        self.app.pop_screen()

    def action_cancel(self) -> None:
        """Handle Escape key for canceling the new task."""
        self.logger.debug("Cancel action triggered")
        self._post_result(TaskScreenResult(cancelled=True))
        self.app.pop_screen()
