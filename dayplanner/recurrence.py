# dayplanner/recurrence.py
"""Recurrence expansion.

A recurring task is materialized once, at creation time, into a fixed
number of independent copies. Nothing about the rule is kept afterwards.
"""

from datetime import timedelta
from typing import List

from .config import DAILY_OCCURRENCES, WEEKLY_INTERVAL_DAYS, WEEKLY_OCCURRENCES
from .data_model import Recurrence
from .utils import format_date_key, parse_date_key


def _step_and_count(rule: Recurrence):
    if rule is Recurrence.DAILY:
        return 1, DAILY_OCCURRENCES
    if rule is Recurrence.WEEKLY:
        return WEEKLY_INTERVAL_DAYS, WEEKLY_OCCURRENCES
    return 0, 0


def expand(anchor_key: str, rule: Recurrence) -> List[str]:
    """Return the date-keys a task created on anchor_key is filed under.

    The anchor always comes first. Dates are computed on a real date value,
    so month and year rollovers come from the calendar.
    """
    step, count = _step_and_count(rule)
    if count == 0:
        return [anchor_key]

    anchor = parse_date_key(anchor_key)
    return [anchor_key] + [
        format_date_key(anchor + timedelta(days=step * i))
        for i in range(1, count + 1)
    ]
