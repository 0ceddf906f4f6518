"""Field validation and normalization shared by the service and the task board."""
from datetime import date
from typing import Any, Dict, Optional
import re

from tasktracker.models.enums import Priority
from tasktracker.models.task import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
from tasktracker.schemas.task import TaskUpdate
from tasktracker.services.errors import ValidationError

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def normalize_title(title: Optional[str]) -> str:
    """Trim ``title`` and enforce the non-empty and length rules."""
    if title is None or not title.strip():
        raise ValidationError("Task title cannot be empty", details={"field": "title"})
    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Task title cannot exceed {TITLE_MAX_LENGTH} characters",
            details={"field": "title", "length": len(title)},
        )
    return title


def normalize_description(description: Optional[str]) -> Optional[str]:
    """Trim ``description``; blank becomes ``None``."""
    if description is None:
        return None
    description = description.strip()
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Task description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            details={"field": "description", "length": len(description)},
        )
    return description or None


def normalize_due_date(due_date: Optional[str]) -> Optional[str]:
    """Accept an ISO calendar date (``YYYY-MM-DD``); blank becomes ``None``."""
    if due_date is None or not due_date.strip():
        return None
    due_date = due_date.strip()
    error = ValidationError(
        "Due date must be an ISO date (YYYY-MM-DD)",
        details={"field": "due_date", "value": due_date},
    )
    if not ISO_DATE.fullmatch(due_date):
        raise error
    try:
        return date.fromisoformat(due_date).isoformat()
    except ValueError:
        raise error


def normalize_priority(priority: Any) -> Priority:
    try:
        return Priority(priority)
    except ValueError:
        raise ValidationError(
            "Priority must be one of: low, medium, high",
            details={"field": "priority", "value": priority},
        )


def clean_changes(changes: TaskUpdate) -> Dict[str, Any]:
    """Validate the fields set on a partial update.

    Returns only the supplied fields, normalized. ``title``, ``priority`` and
    ``completed`` cannot be cleared; ``description`` and ``due_date`` can.
    """
    updates = changes.model_dump(exclude_unset=True)
    for field in ("title", "completed", "priority"):
        if field in updates and updates[field] is None:
            raise ValidationError(f"Task {field} cannot be null", details={"field": field})

    values: Dict[str, Any] = {}
    if "title" in updates:
        values["title"] = normalize_title(updates["title"])
    if "description" in updates:
        values["description"] = normalize_description(updates["description"])
    if "priority" in updates:
        values["priority"] = normalize_priority(updates["priority"])
    if "due_date" in updates:
        values["due_date"] = normalize_due_date(updates["due_date"])
    if "completed" in updates:
        values["completed"] = bool(updates["completed"])
    return values
