"""Form state for creating a task and for editing one inline."""
from dataclasses import dataclass, fields

from tasktracker.board.display import character_count
from tasktracker.models.enums import Priority
from tasktracker.models.task import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
from tasktracker.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from tasktracker.services.errors import ValidationError
from tasktracker.services.validation import (
    normalize_description,
    normalize_due_date,
    normalize_priority,
    normalize_title,
)


@dataclass
class TaskFormFields:
    """Raw field values as typed by the user; empty strings mean "not set"."""
    title: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: str = ""

    def set_field(self, field: str, value) -> None:
        if field not in {f.name for f in fields(self)}:
            raise ValidationError(f"Unknown form field: {field}", details={"field": field})
        if field == "priority":
            value = normalize_priority(value)
        setattr(self, field, value)

    @property
    def can_submit(self) -> bool:
        return bool(self.title.strip())

    @property
    def title_counter(self) -> str:
        return character_count(self.title, TITLE_MAX_LENGTH)

    @property
    def description_counter(self) -> str:
        return character_count(self.description, DESCRIPTION_MAX_LENGTH)

    def cleaned(self) -> dict:
        """Validated, trimmed values with blanks turned into ``None``.

        Raises:
            ValidationError: on an empty or oversized field
        """
        return {
            "title": normalize_title(self.title),
            "description": normalize_description(self.description),
            "priority": normalize_priority(self.priority),
            "due_date": normalize_due_date(self.due_date),
        }


class AddTaskForm(TaskFormFields):
    """The "Add New Task" form."""

    def to_create(self) -> TaskCreate:
        return TaskCreate(**self.cleaned())

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.priority = Priority.MEDIUM
        self.due_date = ""


class EditDraft(TaskFormFields):
    """Inline edit buffer, seeded from the task being edited."""

    @classmethod
    def from_task(cls, task: TaskResponse) -> "EditDraft":
        return cls(
            title=task.title,
            description=task.description or "",
            priority=task.priority,
            due_date=task.due_date or "",
        )

    def to_update(self) -> TaskUpdate:
        # Every field is sent so a cleared description or due date is removed
        return TaskUpdate(**self.cleaned())

