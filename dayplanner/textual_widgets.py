# dayplanner/textual_widgets.py

from datetime import date
from typing import Sequence

from rich.markup import escape
from textual.widgets import ListItem, Label, Static

from .carousel import CardLayout, CarouselDay
from .data_model import ChecklistItem, InboxItem, Task
from .schedule_store import display_order
from .stats import ActivityDay, DashboardStats
from .utils import format_date_key
from .view_state import month_grid

STAR = "★"
HEAT_MARKS = ("·", "░", "▒", "█")
WEEKDAY_NAMES = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def task_line(task: Task) -> str:
    marker = f"[yellow]{STAR}[/yellow] " if task.starred else "  "
    time = f"[dim]{escape(task.time)}[/dim] " if task.time else ""
    done, total = task.checklist_progress
    progress = f" [dim]({done}/{total})[/dim]" if total else ""
    return f"{marker}{time}{escape(task.title)}{progress}"


class DayCard(Static):
    """One day of the carousel."""

    DEFAULT_CSS = """
    DayCard {
        height: 100%;
        border: round #005500;
        padding: 0 1;
    }

    DayCard.-focused {
        border: heavy #00dd00;
    }

    DayCard.-today {
        border-title-color: #ffdd00;
    }
    """

    def show(self, day: CarouselDay, tasks: Sequence[Task], layout: CardLayout) -> None:
        self.border_title = f"{day.day_name} · {day.date_label}"
        lines = [task_line(task) for task in display_order(tasks)] or ["[dim]Nothing planned[/dim]"]
        self.update("\n".join(lines))

        self.display = layout.visible
        self.styles.opacity = layout.opacity
        self.styles.width = f"{max(1, round(layout.scale * 10))}fr"
        self.set_class(layout.offset == 0, "-focused")
        self.set_class(day.is_today, "-today")


class TaskRow(ListItem):
    """A ListItem representing a task on the day screen."""

    DEFAULT_CSS = """
    TaskRow {
        color: #00dd00;
        text-style: bold;
    }
    """

    def __init__(self, task: Task):
        self._task_item = task
        self._label = Label(self.render_text())
        super().__init__(self._label)

    def render_text(self) -> str:
        text = task_line(self._task_item)
        if self._task_item.details:
            text += f"\n    [dim]{escape(self._task_item.details)}[/dim]"
        return text

    @property
    def task(self) -> Task:
        return self._task_item


class ChecklistRow(ListItem):
    """A checklist item shown under its task."""

    DEFAULT_CSS = """
    ChecklistRow.-resolved,
    ChecklistRow.-resolved > Label {
        color: #666666;
    }
    """

    def __init__(self, task: Task, item: ChecklistItem):
        self._task_item = task
        self._item = item
        super().__init__(Label(self.render_text()))
        if item.done:
            self.add_class("-resolved")

    def render_text(self) -> str:
        box = "[x]" if self._item.done else "[ ]"
        return f"      {escape(box)} {escape(self._item.text)}"

    @property
    def task(self) -> Task:
        return self._task_item

    @property
    def item(self) -> ChecklistItem:
        return self._item


class InboxRow(ListItem):
    """A ListItem representing an inbox item."""

    DEFAULT_CSS = """
    InboxRow {
        color: #00dd00;
        text-style: bold;
    }

    InboxRow.-resolved,
    InboxRow.-resolved > Label {
        color: #666666;
    }
    """

    def __init__(self, item: InboxItem):
        self._item = item
        super().__init__(Label(self.render_text()))
        if item.done:
            self.add_class("-resolved")

    def render_text(self) -> str:
        marker = "[R]" if self._item.done else "   "
        star = f" [yellow]{STAR}[/yellow]" if self._item.starred else ""
        return f"{escape(marker)} {escape(self._item.text)}{star}"

    @property
    def item(self) -> InboxItem:
        return self._item


class MonthGrid(Static):
    """Month calendar with a task count for each day."""

    def show(self, year: int, month: int, schedule, today: date, cursor: date) -> None:
        lines = ["".join(f"  {name}  " for name in WEEKDAY_NAMES)]
        for week in month_grid(year, month):
            cells = []
            for day in week:
                if day is None:
                    cells.append("      ")
                    continue
                count = len(schedule.get(format_date_key(day), ()))
                badge = "  " if not count else (f"·{count}" if count < 10 else "·+")
                cell = f"{day.day:>2}{badge}"
                if day == cursor:
                    cell = f"[reverse]{cell}[/reverse]"
                elif day == today:
                    cell = f"[yellow]{cell}[/yellow]"
                cells.append(f" {cell} ")
            lines.append("".join(cells))
        self.update("\n".join(lines))


class DashboardPanel(Static):
    """Velocity dashboard: totals and a 30-day activity strip."""

    def show(self, stats: DashboardStats, days: Sequence[ActivityDay]) -> None:
        strip = "".join(HEAT_MARKS[day.level] for day in days)
        self.update(
            f"Tasks: {stats.total_tasks}   Starred: {stats.starred}   "
            f"Checklist: {stats.checklist_done}/{stats.checklist_total} "
            f"({stats.completion_rate}%)\n"
            f"Last {len(days)} days: {strip}"
        )
