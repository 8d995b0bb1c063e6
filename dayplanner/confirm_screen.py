# dayplanner/confirm_screen.py

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no prompt shown before anything is deleted."""

    CSS = """
    ConfirmScreen {
        align: center middle;
    }

    #confirm-box {
        width: 50;
        height: auto;
        border: heavy #dd0000;
        padding: 1 2;
        background: black;
    }

    #confirm-title {
        color: #dd0000;
        text-style: bold;
    }
    """

    BINDINGS = [
        ("y", "confirm", "Delete"),
        ("enter", "confirm", "Delete"),
        ("n", "cancel", "Keep"),
        ("escape", "cancel", "Keep"),
    ]

    def __init__(self, title: str = "Delete Task?",
                 message: str = "This can't be undone."):
        super().__init__()
        self._prompt_title = title
        self._prompt_message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-box"):
            yield Label(self._prompt_title, id="confirm-title")
            yield Label(self._prompt_message)
            yield Label("y: delete   n: keep")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
