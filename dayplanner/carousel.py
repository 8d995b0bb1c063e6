# dayplanner/carousel.py
"""Day carousel view-state.

The carousel shows a fixed window of days (yesterday through five days
ahead). One day is focused; the focused day can be expanded into the
full-screen day editor. Only nearby days can be focused in one step, except
today, which is always one step away.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from .config import (
    CAROUSEL_FIRST_OFFSET,
    CAROUSEL_LAST_OFFSET,
    CAROUSEL_REACH,
    CAROUSEL_TODAY_INDEX,
)
from .utils import format_date_key

logger = logging.getLogger(__name__)

WINDOW_SIZE = CAROUSEL_LAST_OFFSET - CAROUSEL_FIRST_OFFSET + 1

# Layout curve for unfocused cards.
CARD_SPACING = 115
ROTATION_PER_STEP = 15
MAX_ROTATION = 45
SCALE_PER_STEP = 0.12
MIN_SCALE = 0.5
OPACITY_PER_STEP = 0.35
BASE_Z_INDEX = 20
EXPANDED_Z_INDEX = 50


@dataclass(frozen=True)
class CarouselDay:
    index: int
    date: date
    date_key: str
    day_name: str
    date_label: str
    is_today: bool


def carousel_window(today: date) -> List[CarouselDay]:
    """Return the days of the carousel for the given 'today'."""
    days = []
    for index, offset in enumerate(range(CAROUSEL_FIRST_OFFSET, CAROUSEL_LAST_OFFSET + 1)):
        day = today + timedelta(days=offset)
        days.append(CarouselDay(
            index=index,
            date=day,
            date_key=format_date_key(day),
            day_name=day.strftime("%A"),
            date_label=f"{day.strftime('%b')} {day.day}",
            is_today=offset == 0,
        ))
    return days


@dataclass(frozen=True)
class CarouselState:
    focused_index: int = CAROUSEL_TODAY_INDEX
    is_expanded: bool = False

    @property
    def is_browsing(self) -> bool:
        return not self.is_expanded

    @property
    def is_on_today(self) -> bool:
        return self.focused_index == CAROUSEL_TODAY_INDEX

    def can_select(self, index: int) -> bool:
        if self.is_expanded or not 0 <= index < WINDOW_SIZE:
            return False
        if index == CAROUSEL_TODAY_INDEX:
            return True
        return abs(index - self.focused_index) <= CAROUSEL_REACH

    def select(self, index: int) -> "CarouselState":
        """Focus another day; unreachable days leave the state as it is."""
        if index == self.focused_index or not self.can_select(index):
            if index != self.focused_index:
                logger.debug(f"Ignored carousel select({index}) from {self}")
            return self
        return CarouselState(focused_index=index)

    def step(self, delta: int) -> "CarouselState":
        return self.select(self.focused_index + delta)

    def jump_to_today(self) -> "CarouselState":
        return self.select(CAROUSEL_TODAY_INDEX)

    def expand(self) -> "CarouselState":
        return CarouselState(focused_index=self.focused_index, is_expanded=True)

    def close(self) -> "CarouselState":
        return CarouselState(focused_index=self.focused_index, is_expanded=False)


@dataclass(frozen=True)
class CardLayout:
    offset: int
    translate_x: int
    rotate_y: int
    scale: float
    z_index: int
    opacity: float
    clickable: bool

    @property
    def visible(self) -> bool:
        return self.opacity > 0


def layout_for(index: int, state: CarouselState) -> CardLayout:
    """Placement of the card at window index relative to the focused one.

    Scale, opacity and stacking never grow as the distance from the focused
    card grows, and the focused card always has the largest of each.
    """
    offset = index - state.focused_index
    distance = abs(offset)
    focused_and_expanded = offset == 0 and state.is_expanded

    return CardLayout(
        offset=offset,
        translate_x=offset * CARD_SPACING,
        rotate_y=max(-MAX_ROTATION, min(MAX_ROTATION, -offset * ROTATION_PER_STEP)),
        scale=1.0 if focused_and_expanded else max(MIN_SCALE, 1 - distance * SCALE_PER_STEP),
        z_index=EXPANDED_Z_INDEX if focused_and_expanded else BASE_Z_INDEX - distance,
        opacity=1.0 if focused_and_expanded else max(0.0, 1 - distance * OPACITY_PER_STEP),
        clickable=distance <= CAROUSEL_REACH,
    )
