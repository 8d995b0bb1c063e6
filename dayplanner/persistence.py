# dayplanner/persistence.py

import json
import logging
import datetime
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from .config import INBOX_KEY, LOGS_KEY, TASKS_KEY
from .data_model import ChecklistItem, InboxItem, Task
from .planner_state import PlannerState, ScheduleMap
from .utils import format_date_key, generate_id, parse_date_key

logger = logging.getLogger(__name__)


class StorageProvider(Protocol):
    """Key-value store the planner reads on startup and writes on change."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class JsonFileProvider:
    """Stores each key as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")


class MemoryProvider:
    """Keeps values in a dict. Used by tests and throwaway sessions."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


###############################################################################
# Seed data for first-time users
###############################################################################

def seed_schedule(today: datetime.date) -> ScheduleMap:
    return {
        format_date_key(today): (
            Task(
                id=generate_id(),
                title="Deep Work Session",
                time="10:00 AM",
                details="Open this day with Enter to work through the checklist.",
                starred=True,
                checklist=(
                    ChecklistItem(id=generate_id(), text="Close all tabs", done=True),
                    ChecklistItem(id=generate_id(), text="Finish report", done=False),
                ),
            ),
        )
    }


def seed_inbox():
    return (
        InboxItem(id=generate_id(), text="Buy groceries"),
        InboxItem(id=generate_id(), text="Press m to schedule this item ->", starred=True),
    )


###############################################################################
# Loading & saving
###############################################################################

def schedule_from_json(raw: str) -> ScheduleMap:
    """Decode a saved schedule. Raises ValueError/KeyError/TypeError if malformed."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise TypeError("schedule must be a JSON object")
    schedule = {}
    for date_key, tasks in data.items():
        parse_date_key(date_key)
        if not isinstance(tasks, list):
            raise TypeError(f"tasks for {date_key} must be a list")
        if tasks:
            schedule[date_key] = tuple(Task.from_dict(item) for item in tasks)
    return schedule


def inbox_from_json(raw: str):
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError("inbox must be a JSON array")
    return tuple(InboxItem.from_dict(item) for item in data)


def schedule_to_json(schedule: ScheduleMap) -> str:
    data = {
        date_key: [task.to_dict() for task in tasks]
        for date_key, tasks in sorted(schedule.items())
        if tasks
    }
    return json.dumps(data, indent=2)


def inbox_to_json(inbox) -> str:
    return json.dumps([item.to_dict() for item in inbox], indent=2)


def _read(provider: StorageProvider, key: str) -> Optional[str]:
    try:
        return provider.get(key)
    except OSError as e:
        logger.warning(f"Could not read '{key}' from storage: {e}")
        return None


def load_state(provider: StorageProvider, today: Optional[datetime.date] = None) -> PlannerState:
    """Load schedule and inbox, falling back to seed data per key."""
    today = today or datetime.date.today()

    schedule = None
    raw = _read(provider, TASKS_KEY)
    if raw is not None:
        try:
            schedule = schedule_from_json(raw)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to load tasks from storage, using seed data: {e!r}")
    if schedule is None:
        schedule = seed_schedule(today)

    inbox = None
    raw = _read(provider, INBOX_KEY)
    if raw is not None:
        try:
            inbox = inbox_from_json(raw)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to load inbox from storage, using seed data: {e!r}")
    if inbox is None:
        inbox = seed_inbox()

    return PlannerState(schedule=schedule, inbox=inbox)


def save_state(provider: StorageProvider, state: PlannerState) -> None:
    """Persist the full snapshot."""
    provider.set(TASKS_KEY, schedule_to_json(state.schedule))
    provider.set(INBOX_KEY, inbox_to_json(state.inbox))


###############################################################################
# Action log
###############################################################################

def load_logs(provider: StorageProvider) -> List[str]:
    """Load log entries; anything unreadable starts a fresh log."""
    raw = _read(provider, LOGS_KEY)
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Action log is not valid JSON, starting a new one")
        return []
    if not isinstance(data, list):
        return []
    return [str(entry) for entry in data]


def save_logs(provider: StorageProvider, logs: List[str]):
    try:
        provider.set(LOGS_KEY, json.dumps(logs, indent=2))
    except OSError as e:
        logger.warning(f"Could not write action log: {e}")


def log_action(provider: StorageProvider, logs: List[str], message: str):
    """Add timestamped log entry and persist."""
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"[{timestamp}] {message}"
    logs.append(entry)
    save_logs(provider, logs)
