# dayplanner/config.py

import os
from dataclasses import dataclass
from pathlib import Path

# Recurrence horizon: extra occurrences generated after the anchor date.
DAILY_OCCURRENCES = 14
WEEKLY_OCCURRENCES = 12
WEEKLY_INTERVAL_DAYS = 7

# Carousel window is yesterday .. five days ahead; index 1 is today.
CAROUSEL_FIRST_OFFSET = -1
CAROUSEL_LAST_OFFSET = 5
CAROUSEL_TODAY_INDEX = 1
CAROUSEL_REACH = 2

# Persistence keys, kept compatible with existing saved data.
TASKS_KEY = "schedule_tasksMap"
INBOX_KEY = "schedule_inboxTodos"
LOGS_KEY = "schedule_actionLog"

INBOX_MIGRATION_MARKER = "Migrated from Inbox"

DEBUG_LOG_FILE = "debug.log"

ENV_PREFIX = "DAYPLANNER"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    """Runtime settings for the planner app."""
    data_dir: Path = Path(".")
    release: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        data_dir = os.getenv(f"{ENV_PREFIX}_DATA_DIR") or "."
        return cls(
            data_dir=Path(data_dir).expanduser(),
            release=_env_bool(f"{ENV_PREFIX}_RELEASE", False),
        )
