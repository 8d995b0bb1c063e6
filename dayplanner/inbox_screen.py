# dayplanner/inbox_screen.py

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.screen import ModalScreen, Screen
from textual.widgets import Input, Label, ListView

from . import inbox as inbox_ops
from .confirm import InboxItemTarget
from .textual_widgets import InboxRow
from .utils import format_date_key, parse_date_key


class ScheduleDateScreen(ModalScreen[Optional[str]]):
    """Asks for the day an inbox item should move to."""

    CSS = """
    ScheduleDateScreen {
        align: center middle;
    }

    #date-box {
        width: 50;
        height: auto;
        border: heavy #00dd00;
        padding: 1 2;
        background: black;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, item_text: str, default_key: str):
        super().__init__()
        self._item_text = item_text
        self.date_input = Input(value=default_key, placeholder="YYYY-MM-DD", select_on_focus=True)
        self.hint_label = Label("")

    def compose(self) -> ComposeResult:
        with Vertical(id="date-box"):
            yield Label(f"Schedule '{self._item_text}' on:", markup=False)
            yield self.date_input
            yield self.hint_label

    def on_mount(self) -> None:
        self.date_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        try:
            day = parse_date_key(event.value.strip())
        except ValueError:
            self.hint_label.update("Use the form YYYY-MM-DD, e.g. 2024-03-09.")
            return
        self.dismiss(format_date_key(day))

    def action_cancel(self) -> None:
        self.dismiss(None)


class InboxScreen(Screen):
    """Unscheduled tasks. Items can be ticked, starred, deleted or moved onto a day."""

    CSS = """
    #inbox-header {
        color: #00dd00;
        text-style: bold;
        padding: 0 1;
    }

    ListView {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        ("escape", "close", "Back"),
        ("space", "toggle_done", "Done"),
        ("s", "toggle_star", "Star"),
        ("d", "delete_item", "Delete"),
        ("m", "migrate_item", "Schedule"),
    ]

    def __init__(self):
        super().__init__()
        self.new_item_input = Input(placeholder="Add to inbox and press Enter", select_on_focus=False)
        self.list_view = ListView()
        self.logger = logging.getLogger(__name__)

    def compose(self) -> ComposeResult:
        yield Label("Inbox   (tab list · space done · s star · m schedule · d delete · esc back)",
                    id="inbox-header")
        yield self.new_item_input
        yield self.list_view

    def on_mount(self):
        self.refresh_rows()
        self.new_item_input.focus()

    class MoveCursor(Message):
        """Message to move cursor to specific position."""
        def __init__(self, target_index: int) -> None:
            super().__init__()
            self.target_index = target_index

    def on_inbox_screen_move_cursor(self, message: MoveCursor) -> None:
        if len(self.list_view.children):
            self.list_view.index = min(message.target_index, len(self.list_view.children) - 1)

    def refresh_rows(self) -> None:
        current_index = self.list_view.index
        selected = self._selected()
        selected_id = selected.item.id if selected is not None else None

        self.list_view.clear()
        items = inbox_ops.display_order(self.app.context.state.inbox)
        for item in items:
            self.list_view.append(InboxRow(item))

        if not items:
            return
        ids = [item.id for item in items]
        target_index = ids.index(selected_id) if selected_id in ids else current_index or 0
        self.post_message(self.MoveCursor(target_index))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.app.context.add_inbox_item(event.value):
            self.new_item_input.value = ""

    def _selected(self) -> Optional[InboxRow]:
        row = self.list_view.highlighted_child
        return row if isinstance(row, InboxRow) else None

    def action_close(self) -> None:
        self.dismiss()

    def action_toggle_done(self) -> None:
        row = self._selected()
        if row is not None:
            self.app.context.toggle_inbox_done(row.item.id)

    def action_toggle_star(self) -> None:
        row = self._selected()
        if row is not None:
            self.app.context.toggle_inbox_star(row.item.id)

    def action_delete_item(self) -> None:
        row = self._selected()
        if row is not None:
            self.app.request_delete(InboxItemTarget(row.item.id), row.item.text)

    def action_migrate_item(self) -> None:
        row = self._selected()
        if row is None:
            return
        item = row.item

        def schedule(date_key: Optional[str]) -> None:
            if date_key is None:
                return
            if self.app.context.migrate_inbox_item(item.id, date_key):
                self.logger.debug(f"Moved inbox item {item.id} to {date_key}")
                self.dismiss()

        default_key = format_date_key(self.app.today())
        self.app.push_screen(ScheduleDateScreen(item.text, default_key), schedule)
