# dayplanner/stats.py

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from .planner_state import ScheduleMap
from .utils import format_date_key

ACTIVITY_DAYS = 30


@dataclass(frozen=True)
class DashboardStats:
    total_tasks: int
    starred: int
    checklist_total: int
    checklist_done: int

    @property
    def completion_rate(self) -> int:
        """Done checklist items as a rounded percentage."""
        if self.checklist_total == 0:
            return 0
        return round(self.checklist_done * 100 / self.checklist_total)


@dataclass(frozen=True)
class ActivityDay:
    date_key: str
    count: int

    @property
    def level(self) -> int:
        if self.count == 0:
            return 0
        if self.count <= 2:
            return 1
        if self.count <= 4:
            return 2
        return 3


def summarize(schedule: ScheduleMap) -> DashboardStats:
    total = starred = checklist_total = checklist_done = 0
    for tasks in schedule.values():
        for task in tasks:
            total += 1
            starred += task.starred
            done, count = task.checklist_progress
            checklist_done += done
            checklist_total += count
    return DashboardStats(total, starred, checklist_total, checklist_done)


def activity(schedule: ScheduleMap, today: date, days: int = ACTIVITY_DAYS) -> List[ActivityDay]:
    """Task counts for the trailing window of days ending today, oldest first."""
    result = []
    for back in range(days - 1, -1, -1):
        key = format_date_key(today - timedelta(days=back))
        result.append(ActivityDay(key, len(schedule.get(key, ()))))
    return result
