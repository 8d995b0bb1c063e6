# dayplanner/utils.py

import string
import secrets
from datetime import date, datetime
from typing import Optional, Set

DATE_KEY_FORMAT = "%Y-%m-%d"
ID_LENGTH = 9
_ID_ALPHABET = string.ascii_lowercase + string.digits

_issued_ids: Set[str] = set()


def format_date_key(value: date) -> str:
    """Return the canonical YYYY-MM-DD key for a calendar date."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    """Parse a YYYY-MM-DD key back into a date.

    Raises ValueError unless the key is exactly in canonical form, so
    "2024-5-14" or " 2024-05-14" are rejected.
    """
    parsed = datetime.strptime(key, DATE_KEY_FORMAT).date()
    if format_date_key(parsed) != key:
        raise ValueError(f"not a canonical date key: {key!r}")
    return parsed


def today_key(today: Optional[date] = None) -> str:
    return format_date_key(today or date.today())


def generate_id() -> str:
    """Return a short alphanumeric id not handed out before in this process."""
    while True:
        candidate = "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in _issued_ids:
            _issued_ids.add(candidate)
            return candidate
