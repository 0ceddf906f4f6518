"""Task service: the query and mutation handlers over the ``tasks`` table."""
from sqlmodel import Session, select
from typing import List, Optional

from tasktracker.models.enums import Priority
from tasktracker.models.task import Task, now_ms
from tasktracker.schemas.task import TaskUpdate
from tasktracker.services.errors import NotFoundError
from tasktracker.services.validation import (
    clean_changes,
    normalize_description,
    normalize_due_date,
    normalize_priority,
    normalize_title,
)
from tasktracker.utils.logger import get_logger

audit = get_logger("tasktracker.audit")


def next_timestamp(previous: int) -> int:
    """Timestamp for a mutation of a record last stamped at ``previous``.

    Two mutations inside the same millisecond still move ``updated_at``
    forward.
    """
    return max(now_ms(), previous + 1)


class TaskService:
    """Service class for task CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    # Queries

    def list_tasks(self, user_id: str) -> List[Task]:
        """All tasks owned by ``user_id``, newest first."""
        statement = select(Task).where(Task.user_id == user_id)
        return self._newest_first(statement)

    def list_tasks_by_status(self, user_id: str, completed: bool) -> List[Task]:
        """Tasks owned by ``user_id`` with the given completion flag, newest first."""
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .where(Task.completed == completed)
        )
        return self._newest_first(statement)

    def list_tasks_by_priority(self, user_id: str, priority: Priority) -> List[Task]:
        """Tasks owned by ``user_id`` with the given priority, newest first."""
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .where(Task.priority == normalize_priority(priority))
        )
        return self._newest_first(statement)

    def get_task(self, task_id: int) -> Task:
        task = self.session.get(Task, task_id)
        if task is None:
            raise NotFoundError("Task not found", details={"task_id": task_id})
        return task

    def _newest_first(self, statement) -> List[Task]:
        statement = statement.order_by(Task.created_at.desc(), Task.id.desc())
        return list(self.session.exec(statement).all())

    # Mutations

    def create_task(
        self,
        user_id: str,
        title: str,
        description: Optional[str] = None,
        priority: Priority = Priority.MEDIUM,
        due_date: Optional[str] = None,
    ) -> Task:
        """Validate and insert a new pending task; returns the stored record."""
        now = now_ms()
        task = Task(
            user_id=user_id,
            title=normalize_title(title),
            description=normalize_description(description),
            completed=False,
            priority=normalize_priority(priority),
            due_date=normalize_due_date(due_date),
            created_at=now,
            updated_at=now,
        )

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        audit.info("task.created", task_id=task.id, user_id=user_id, priority=task.priority.value)
        return task

    def update_task(self, task_id: int, changes: TaskUpdate) -> Task:
        """Apply the fields set on ``changes``; unset fields are left untouched."""
        # Validate everything before touching the record
        values = clean_changes(changes)

        task = self.get_task(task_id)
        for field, value in values.items():
            setattr(task, field, value)
        task.updated_at = next_timestamp(task.updated_at)

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        audit.info("task.updated", task_id=task.id, fields=sorted(values))
        return task

    def delete_task(self, task_id: int) -> None:
        """Hard delete; a missing task raises NotFoundError."""
        task = self.get_task(task_id)
        owner = task.user_id
        self.session.delete(task)
        self.session.commit()
        audit.info("task.deleted", task_id=task_id, user_id=owner)

    def toggle_task(self, task_id: int) -> Task:
        """Flip ``completed`` and refresh ``updated_at``."""
        task = self.get_task(task_id)
        task.completed = not task.completed
        task.updated_at = next_timestamp(task.updated_at)

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        audit.info("task.toggled", task_id=task.id, completed=task.completed)
        return task
