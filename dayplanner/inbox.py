# dayplanner/inbox.py

from dataclasses import replace
from typing import Callable, Optional, Tuple

from .data_model import InboxItem
from .utils import generate_id

Inbox = Tuple[InboxItem, ...]


def find_item(inbox: Inbox, item_id: str) -> Optional[InboxItem]:
    return next((item for item in inbox if item.id == item_id), None)


def add_item(inbox: Inbox, text: str) -> Inbox:
    """Put a new item at the top of the inbox. Blank text is ignored."""
    text = text.strip()
    if not text:
        return inbox
    return (InboxItem(id=generate_id(), text=text),) + tuple(inbox)


def _update(inbox: Inbox, item_id: str, change: Callable[[InboxItem], InboxItem]) -> Inbox:
    if find_item(inbox, item_id) is None:
        return inbox
    return tuple(change(item) if item.id == item_id else item for item in inbox)


def toggle_done(inbox: Inbox, item_id: str) -> Inbox:
    return _update(inbox, item_id, lambda item: replace(item, done=not item.done))


def toggle_star(inbox: Inbox, item_id: str) -> Inbox:
    return _update(inbox, item_id, lambda item: replace(item, starred=not item.starred))


def delete_item(inbox: Inbox, item_id: str) -> Inbox:
    if find_item(inbox, item_id) is None:
        return inbox
    return tuple(item for item in inbox if item.id != item_id)


def display_order(inbox: Inbox) -> Inbox:
    """Open items before done ones, starred first within each group."""
    return tuple(sorted(inbox, key=lambda item: (item.done, not item.starred)))
