# dayplanner/data_model.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Tuple


class Recurrence(Enum):
    """How many copies a new task is expanded into at creation time."""
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"


def _require_mapping(data, kind: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{kind} record must be an object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class ChecklistItem:
    """A single checklist row belonging to a task."""
    id: str
    text: str
    done: bool = False

    def to_dict(self):
        return {"id": self.id, "text": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, data: dict):
        data = _require_mapping(data, "checklist item")
        return cls(id=str(data["id"]), text=str(data["text"]), done=bool(data.get("done", False)))


@dataclass(frozen=True)
class Task:
    """A task filed under one calendar day."""
    id: str
    title: str
    time: str = ""
    details: str = ""
    starred: bool = False
    checklist: Tuple[ChecklistItem, ...] = ()

    @property
    def checklist_progress(self) -> Tuple[int, int]:
        """Return (done, total) for the checklist."""
        return sum(1 for item in self.checklist if item.done), len(self.checklist)

    def to_dict(self):
        """Convert Task to a dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "time": self.time,
            "details": self.details,
            "starred": self.starred,
            "todos": [item.to_dict() for item in self.checklist],
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create Task from a dictionary (JSON deserialization)."""
        data = _require_mapping(data, "task")
        todos = data.get("todos") or []
        if not isinstance(todos, list):
            raise TypeError("task 'todos' must be a list")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            time=str(data.get("time") or ""),
            details=str(data.get("details") or ""),
            starred=bool(data.get("starred", False)),
            checklist=tuple(ChecklistItem.from_dict(item) for item in todos),
        )

    def __repr__(self):
        return f"Task(id={self.id}, title={self.title}, starred={self.starred})"


@dataclass(frozen=True)
class InboxItem:
    """An unscheduled task waiting in the inbox."""
    id: str
    text: str
    done: bool = False
    starred: bool = False

    def to_dict(self):
        return {"id": self.id, "text": self.text, "done": self.done, "starred": self.starred}

    @classmethod
    def from_dict(cls, data: dict):
        data = _require_mapping(data, "inbox item")
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            done=bool(data.get("done", False)),
            starred=bool(data.get("starred", False)),
        )


@dataclass(frozen=True)
class TaskDraft:
    """Unsaved content of the add-task form."""
    title: str
    time: str = ""
    details: str = ""
    checklist: Sequence[str] = field(default_factory=tuple)
