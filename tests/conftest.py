# tests/conftest.py

from __future__ import annotations

from datetime import date

import pytest

from dayplanner.data_model import TaskDraft
from dayplanner.persistence import MemoryProvider, load_state
from dayplanner.planner_state import PlannerState


@pytest.fixture()
def today() -> date:
    return date(2024, 5, 14)


@pytest.fixture()
def today_key(today: date) -> str:
    return today.isoformat()


@pytest.fixture()
def provider() -> MemoryProvider:
    return MemoryProvider()


@pytest.fixture()
def seeded_state(provider: MemoryProvider, today: date) -> PlannerState:
    """Seed data as a first-time user sees it."""
    return load_state(provider, today)


@pytest.fixture()
def draft() -> TaskDraft:
    return TaskDraft(
        title="  Plan trip  ",
        time="09:00",
        details="Flights and hotel",
        checklist=("Book flights", "   ", "Reserve hotel", ""),
    )
