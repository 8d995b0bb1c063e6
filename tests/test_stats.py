# tests/test_stats.py

from __future__ import annotations

from datetime import date

from dayplanner.data_model import ChecklistItem, Task
from dayplanner.stats import ActivityDay, activity, summarize


def test_summarize_counts_tasks_stars_and_checklists() -> None:
    schedule = {
        "2024-05-13": (
            Task(id="1", title="a", starred=True,
                 checklist=(ChecklistItem("c1", "x", True), ChecklistItem("c2", "y", False))),
        ),
        "2024-05-14": (
            Task(id="2", title="b", checklist=(ChecklistItem("c3", "z", True),)),
            Task(id="3", title="c", starred=True),
        ),
    }
    stats = summarize(schedule)

    assert stats.total_tasks == 3
    assert stats.starred == 2
    assert (stats.checklist_done, stats.checklist_total) == (2, 3)
    assert stats.completion_rate == 67


def test_completion_rate_without_checklists_is_zero() -> None:
    assert summarize({}).completion_rate == 0


def test_activity_window_ends_today() -> None:
    schedule = {
        "2024-05-14": tuple(Task(id=str(i), title="t") for i in range(5)),
        "2024-04-15": (Task(id="old", title="old"),),
        "2024-04-14": (Task(id="older", title="too old"),),
    }
    days = activity(schedule, date(2024, 5, 14))

    assert len(days) == 30
    assert days[0].date_key == "2024-04-15"
    assert days[-1].date_key == "2024-05-14"
    assert days[0].count == 1
    assert days[-1].count == 5
    assert days[-1].level == 3


def test_heat_levels() -> None:
    assert [ActivityDay("k", n).level for n in (0, 1, 2, 3, 4, 5, 9)] == [0, 1, 1, 2, 2, 3, 3]
