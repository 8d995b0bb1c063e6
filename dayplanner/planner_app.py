# dayplanner/planner_app.py

import logging
import datetime
from typing import Callable, List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, RichLog, Static

from .carousel import CarouselState, carousel_window, layout_for
from .confirm import DeleteTarget, DeletionFlow
from .confirm_screen import ConfirmScreen
from .context import PlannerContext
from .day_screen import DayScreen
from .inbox_screen import InboxScreen
from .planner_state import PlannerState
from .schedule_store import tasks_for
from .stats import activity, summarize
from .textual_widgets import DashboardPanel, DayCard, MonthGrid
from .utils import format_date_key
from .view_state import ScreenState, ViewMode, toggle_view_mode


class HelpPanel(Static):
    """Shows the help (available commands)."""
    def compose(self) -> ComposeResult:
        lines = [
            "Commands:",
            "  ← / → : Focus previous / next day (carousel) or day (month)",
            "  ↑ / ↓ : Move a week (month)",
            "  [ / ] : Previous / next month",
            "  t: Jump to today",
            "  enter: Open the focused day",
            "  m: Switch carousel / month view",
            "  i: Open the inbox",
            "  v: Toggle the velocity dashboard",
            "  L: Toggle action log panel",
            "  h: Toggle this help panel",
            "  q: Quit",
        ]
        yield Label("\n".join(lines), markup=False)


class PlannerApp(App):
    """Main TUI Application."""
    AUTO_FOCUS = None
    CSS = """
    Screen {
        color: #00dd00;
    }

    #header {
        dock: top;
        background: black;
        color: #00dd00;
        text-style: bold;
        padding: 0 1 1 1;
        width: 100%;
        height: 2;
    }

    #carousel {
        height: 1fr;
    }

    MonthGrid {
        height: 1fr;
        padding: 1 2;
    }

    DashboardPanel, HelpPanel {
        height: auto;
        border: round #005500;
        padding: 0 1;
    }

    RichLog {
        height: 8;
        border: round #005500;
    }
    """

    BINDINGS = [
        ("left", "step(-1)", "Previous"),
        ("right", "step(1)", "Next"),
        ("up", "week(-1)", "Week up"),
        ("down", "week(1)", "Week down"),
        ("left_square_bracket", "month(-1)", "Previous month"),
        ("right_square_bracket", "month(1)", "Next month"),
        ("t", "today", "Today"),
        ("enter", "open_day", "Open day"),
        ("m", "toggle_view", "Carousel/Month"),
        ("i", "inbox", "Inbox"),
        ("v", "toggle_dashboard", "Dashboard"),
        ("L", "toggle_log", "Log"),
        ("h", "show_help", "Help"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, context: PlannerContext,
                 today: Callable[[], datetime.date] = datetime.date.today):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.context = context
        self._clock = today

        self.carousel = CarouselState()
        self.screen_state = ScreenState.for_today(today())
        self.deletion = DeletionFlow()
        self._pending_label = ""

        self.header: Optional[Label] = None
        self.carousel_row: Optional[Horizontal] = None
        self.day_cards: List[DayCard] = []
        self.month_grid: Optional[MonthGrid] = None
        self.dashboard: Optional[DashboardPanel] = None
        self.help_panel: Optional[HelpPanel] = None
        self.log_panel: Optional[RichLog] = None

        self.context.subscribe(self._on_state_changed)
        self.logger.debug("PlannerApp initialized")

    def today(self) -> datetime.date:
        """The current date according to the injected clock."""
        return self._clock()

    def compose(self) -> ComposeResult:
        self.header = Label("", id="header")
        yield self.header
        self.carousel_row = Horizontal(id="carousel")
        with self.carousel_row:
            for _ in carousel_window(self.today()):
                card = DayCard()
                self.day_cards.append(card)
                yield card
        self.month_grid = MonthGrid()
        yield self.month_grid
        self.dashboard = DashboardPanel()
        yield self.dashboard
        self.help_panel = HelpPanel()
        yield self.help_panel
        self.log_panel = RichLog()
        self.log_panel.can_focus = False
        yield self.log_panel

    def on_mount(self) -> None:
        """Called once the app is fully loaded."""
        self.dashboard.display = False
        self.help_panel.display = False
        self.log_panel.display = False
        for entry in self.context.logs:
            self.log_panel.write(entry)
        self.update_views()

    ############################################################################
    # Rendering
    ############################################################################
    def update_views(self) -> None:
        """Re-render the main screen from the current snapshot and view state."""
        if self.month_grid is None:
            return
        today = self.today()
        schedule = self.context.state.schedule
        in_carousel = self.screen_state.view_mode is ViewMode.CAROUSEL

        header = f"Day Planner - {today.strftime('%A %d.%m.%Y')}"
        if in_carousel and not self.carousel.is_on_today:
            header += "   (t: back to today)"
        elif not in_carousel:
            header += f"   {self.screen_state.month_title}"
        self.header.update(header)

        self.carousel_row.display = in_carousel
        for day, card in zip(carousel_window(today), self.day_cards):
            card.show(day, tasks_for(schedule, day.date_key), layout_for(day.index, self.carousel))

        self.month_grid.display = not in_carousel
        year, month = self.screen_state.current_month
        self.month_grid.show(year, month, schedule, today, self.screen_state.cursor)

        self.dashboard.show(summarize(schedule), activity(schedule, today))

    def _on_state_changed(self, state: PlannerState) -> None:
        self.update_views()
        for screen in self.screen_stack:
            refresh_rows = getattr(screen, "refresh_rows", None)
            if refresh_rows is not None:
                refresh_rows()
        if self.log_panel is not None and self.context.logs:
            self.log_panel.write(self.context.logs[-1])

    def _on_main_screen(self) -> bool:
        return len(self.screen_stack) == 1

    ############################################################################
    # Navigation
    ############################################################################
    def action_step(self, delta: int) -> None:
        if not self._on_main_screen():
            return
        if self.screen_state.view_mode is ViewMode.CAROUSEL:
            self.carousel = self.carousel.step(delta)
        else:
            self.screen_state = self.screen_state.move_cursor(delta)
        self.update_views()

    def action_week(self, delta: int) -> None:
        if not self._on_main_screen() or self.screen_state.view_mode is not ViewMode.MONTH:
            return
        self.screen_state = self.screen_state.move_cursor(7 * delta)
        self.update_views()

    def action_month(self, delta: int) -> None:
        if not self._on_main_screen() or self.screen_state.view_mode is not ViewMode.MONTH:
            return
        if delta < 0:
            self.screen_state = self.screen_state.previous_month()
        else:
            self.screen_state = self.screen_state.next_month()
        self.update_views()

    def action_today(self) -> None:
        if not self._on_main_screen():
            return
        self.carousel = self.carousel.jump_to_today()
        self.screen_state = self.screen_state.this_month(self.today())
        self.update_views()

    def action_toggle_view(self) -> None:
        if not self._on_main_screen():
            return
        self.screen_state, self.carousel = toggle_view_mode(self.screen_state, self.carousel)
        self.logger.debug(f"View mode is now {self.screen_state.view_mode.value}")
        self.update_views()

    def action_open_day(self) -> None:
        """Expand the focused day (carousel) or the highlighted day (month)."""
        if not self._on_main_screen():
            return
        if self.screen_state.view_mode is ViewMode.CAROUSEL:
            day = carousel_window(self.today())[self.carousel.focused_index]
            self.carousel = self.carousel.expand()
            date_key, label = day.date_key, f"{day.day_name}, {day.date_label}"
        else:
            cursor = self.screen_state.cursor
            date_key = format_date_key(cursor)
            self.screen_state = self.screen_state.open_day(date_key)
            label = f"{cursor.strftime('%A')}, {cursor.strftime('%b')} {cursor.day}"
        self.update_views()
        self.push_screen(DayScreen(date_key, label), self._on_day_closed)

    def _on_day_closed(self, result=None) -> None:
        self.carousel = self.carousel.close()
        self.screen_state = self.screen_state.close_day()
        self.update_views()

    def action_inbox(self) -> None:
        if not self._on_main_screen():
            return
        self.push_screen(InboxScreen())

    def action_toggle_dashboard(self) -> None:
        if self.dashboard:
            self.dashboard.display = not self.dashboard.display

    def action_toggle_log(self):
        """Toggle the log panel (L)."""
        if self.log_panel:
            self.log_panel.display = not self.log_panel.display

    def action_show_help(self):
        """Toggle help panel (h)."""
        if self.help_panel:
            self.help_panel.display = not self.help_panel.display

    ############################################################################
    # Deletion
    ############################################################################
    def request_delete(self, target: DeleteTarget, label: str) -> None:
        """Ask before deleting; a newer request replaces a pending one."""
        self.deletion = self.deletion.request_delete(target)
        self._pending_label = label
        self.push_screen(
            ConfirmScreen(message=f"'{escape(label)}' will be removed."),
            self._on_delete_answered,
        )

    def _on_delete_answered(self, confirmed: Optional[bool]) -> None:
        if not confirmed:
            self.deletion = self.deletion.cancel()
            return
        self.deletion, new_state = self.deletion.confirm(self.context.state)
        self.context.commit(new_state, f"Deleted: '{self._pending_label}'")
