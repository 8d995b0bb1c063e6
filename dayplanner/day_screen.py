# dayplanner/day_screen.py

import logging
from typing import Optional, Union

from textual.app import ComposeResult
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Label, ListView

from .confirm import ScheduledTaskTarget
from .schedule_store import display_order, tasks_for
from .task_screen import TaskScreen, TaskScreenResult
from .textual_widgets import ChecklistRow, TaskRow

Row = Union[TaskRow, ChecklistRow]


def _row_key(row: Row):
    item_id = row.item.id if isinstance(row, ChecklistRow) else None
    return row.task.id, item_id


class DayScreen(Screen):
    """Full-screen editor for one day: its tasks, checklists and new tasks."""

    CSS = """
    #day-header {
        dock: top;
        color: #00dd00;
        text-style: bold;
        padding: 0 1 1 1;
        height: 2;
    }

    ListView {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        ("escape", "close", "Back"),
        ("a", "add_task", "Add task"),
        ("s", "toggle_star", "Star"),
        ("space", "toggle_item", "Tick checklist item"),
        ("d", "delete_task", "Delete task"),
    ]

    def __init__(self, date_key: str, day_label: str):
        super().__init__()
        self.date_key = date_key
        self.day_label = day_label
        self.list_view = ListView()
        self.logger = logging.getLogger(__name__)

    def compose(self) -> ComposeResult:
        yield Label(f"{self.day_label}   (a add · s star · space tick · d delete · esc back)",
                    id="day-header")
        yield self.list_view

    def on_mount(self):
        """Called when screen is mounted."""
        self.refresh_rows()
        self.list_view.focus()

    class MoveCursor(Message):
        """Message to move cursor to specific position."""
        def __init__(self, target_index: int) -> None:
            super().__init__()
            self.target_index = target_index

    def on_day_screen_move_cursor(self, message: MoveCursor) -> None:
        """Handle cursor movement message."""
        if len(self.list_view.children):
            self.list_view.index = min(message.target_index, len(self.list_view.children) - 1)
        self.list_view.focus()

    def refresh_rows(self) -> None:
        """Rebuild the rows from the current planner snapshot.

        The cursor follows the highlighted task (or checklist item) by id,
        since starring reorders the list. It starts on the first row.
        """
        current_index = self.list_view.index
        selected = self._selected_row()
        selected_key = _row_key(selected) if selected is not None else None

        self.list_view.clear()
        rows = []
        tasks = tasks_for(self.app.context.state.schedule, self.date_key)
        for task in display_order(tasks):
            rows.append(TaskRow(task))
            for item in task.checklist:
                rows.append(ChecklistRow(task, item))
        for row in rows:
            self.list_view.append(row)

        if not rows:
            return
        keys = [_row_key(row) for row in rows]
        if selected_key in keys:
            target_index = keys.index(selected_key)
        else:
            target_index = current_index or 0
        self.post_message(self.MoveCursor(target_index))

    def _selected_row(self) -> Optional[Row]:
        row = self.list_view.highlighted_child
        if isinstance(row, (TaskRow, ChecklistRow)):
            return row
        return None

    def action_close(self) -> None:
        self.dismiss()

    def action_add_task(self) -> None:
        self.app.push_screen(TaskScreen(self.day_label, parent_screen=self))

    def on_task_screen_result(self, message: TaskScreenResult) -> None:
        """Handle the result from the task screen."""
        if message.cancelled or message.draft is None:
            return
        self.app.context.add_task(self.date_key, message.draft, message.recurrence)

    def action_toggle_star(self) -> None:
        row = self._selected_row()
        if row is None:
            return
        self.app.context.toggle_star(self.date_key, row.task.id)

    def action_toggle_item(self) -> None:
        row = self._selected_row()
        if not isinstance(row, ChecklistRow):
            return
        self.app.context.toggle_checklist_item(self.date_key, row.task.id, row.item.id)

    def action_delete_task(self) -> None:
        row = self._selected_row()
        if row is None:
            return
        self.app.request_delete(ScheduledTaskTarget(self.date_key, row.task.id), row.task.title)
