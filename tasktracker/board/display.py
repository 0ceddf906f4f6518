"""Display helpers for rendering tasks on the board."""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel

from tasktracker.models.enums import Priority
from tasktracker.schemas.task import TaskResponse

EMPTY_LIST_TITLE = "No tasks found"
EMPTY_LIST_HINT = "Get started by adding your first task above!"


@dataclass(frozen=True)
class PriorityStyle:
    color: str
    background: str
    icon: str


PRIORITY_STYLES: Dict[Priority, PriorityStyle] = {
    Priority.HIGH: PriorityStyle(color="text-red-600", background="bg-red-100", icon="alert-circle"),
    Priority.MEDIUM: PriorityStyle(color="text-yellow-600", background="bg-yellow-100", icon="clock"),
    Priority.LOW: PriorityStyle(color="text-green-600", background="bg-green-100", icon="circle"),
}


@dataclass(frozen=True)
class DueLabel:
    text: str
    color: str


class TaskView(BaseModel):
    """A task plus everything the item renderer shows next to it."""
    task: TaskResponse
    priority_label: str
    priority_color: str
    priority_background: str
    priority_icon: str
    due_label: Optional[str] = None
    due_color: Optional[str] = None
    created_label: str


def priority_label(priority: Priority) -> str:
    """``Priority.HIGH`` -> ``"High Priority"``."""
    return f"{Priority(priority).value.capitalize()} Priority"


def priority_style(priority: Priority) -> PriorityStyle:
    return PRIORITY_STYLES[Priority(priority)]


def _plural_days(days: int) -> str:
    return f"{days} day" if days == 1 else f"{days} days"


def format_due_date(due_date: str, today: Optional[date] = None) -> DueLabel:
    """Relative label for a ``YYYY-MM-DD`` due date."""
    today = today or date.today()
    diff_days = (date.fromisoformat(due_date) - today).days

    if diff_days < 0:
        return DueLabel(f"Overdue by {_plural_days(abs(diff_days))}", "text-red-600")
    if diff_days == 0:
        return DueLabel("Due today", "text-orange-600")
    if diff_days == 1:
        return DueLabel("Due tomorrow", "text-yellow-600")
    return DueLabel(f"Due in {diff_days} days", "text-gray-600")


def created_label(created_at: int) -> str:
    created = datetime.fromtimestamp(created_at / 1000, tz=timezone.utc)
    return f"Created {created.date().isoformat()}"


def character_count(value: str, limit: int) -> str:
    """Counter shown under form fields, e.g. ``"12/200 characters"``."""
    return f"{len(value)}/{limit} characters"


def task_list_heading(count: int) -> str:
    return f"Tasks ({count})"


def render_task(task: TaskResponse, today: Optional[date] = None) -> TaskView:
    style = priority_style(task.priority)
    due = format_due_date(task.due_date, today) if task.due_date else None
    return TaskView(
        task=task,
        priority_label=priority_label(task.priority),
        priority_color=style.color,
        priority_background=style.background,
        priority_icon=style.icon,
        due_label=due.text if due else None,
        due_color=due.color if due else None,
        created_label=created_label(task.created_at),
    )
