"""
Task backends for the board.

The board talks to its data through ``TaskBackend``. ``InMemoryTaskBackend``
keeps the session's tasks in memory (demo mode); ``HttpTaskBackend`` calls
the Task Tracker REST API with httpx. Both raise the same domain errors.
"""

from abc import ABC, abstractmethod
from itertools import count
from typing import Callable, Iterable, List
import logging

import httpx

from tasktracker.board import state as reducers
from tasktracker.models.enums import Priority
from tasktracker.models.task import now_ms
from tasktracker.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from tasktracker.services.errors import (
    ConflictError,
    NotFoundError,
    TaskTrackerError,
    ValidationError,
)
from tasktracker.services.validation import (
    clean_changes,
    normalize_description,
    normalize_due_date,
    normalize_priority,
    normalize_title,
)

logger = logging.getLogger(__name__)

DAY_MS = 86_400_000


class TaskBackend(ABC):
    """Data access used by the task board."""

    @abstractmethod
    def list_tasks(self, user_id: str) -> List[TaskResponse]:
        """All tasks of ``user_id``, newest first."""

    @abstractmethod
    def create_task(self, user_id: str, data: TaskCreate) -> TaskResponse:
        pass

    @abstractmethod
    def update_task(self, task_id: int, changes: TaskUpdate) -> TaskResponse:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        pass

    @abstractmethod
    def toggle_task(self, task_id: int) -> TaskResponse:
        pass


class InMemoryTaskBackend(TaskBackend):
    """Session-only storage with the same rules as TaskService."""

    def __init__(self, tasks: Iterable[TaskResponse] = (), clock: Callable[[], int] = now_ms):
        self.tasks = tuple(tasks)
        self.clock = clock
        self._ids = count(max((task.id for task in self.tasks), default=0) + 1)

    @classmethod
    def with_demo_tasks(cls, user_id: str, clock: Callable[[], int] = now_ms) -> "InMemoryTaskBackend":
        """Backend seeded with three sample tasks for ``user_id``."""
        now = clock()
        samples = [
            TaskResponse(
                id=1,
                user_id=user_id,
                title="Complete project documentation",
                description="Write comprehensive documentation for the task management app",
                completed=False,
                priority=Priority.HIGH,
                due_date="2024-01-15",
                created_at=now - DAY_MS,
                updated_at=now - DAY_MS,
            ),
            TaskResponse(
                id=2,
                user_id=user_id,
                title="Review code changes",
                description="Review all recent code changes and provide feedback",
                completed=True,
                priority=Priority.MEDIUM,
                due_date="2024-01-10",
                created_at=now - 2 * DAY_MS,
                updated_at=now - DAY_MS,
            ),
            TaskResponse(
                id=3,
                user_id=user_id,
                title="Update dependencies",
                description="Update all project dependencies to latest versions",
                completed=False,
                priority=Priority.LOW,
                created_at=now - 3 * DAY_MS,
                updated_at=now - 3 * DAY_MS,
            ),
        ]
        return cls(samples, clock=clock)

    def _get(self, task_id: int) -> TaskResponse:
        task = reducers.find_task(self.tasks, task_id)
        if task is None:
            raise NotFoundError("Task not found", details={"task_id": task_id})
        return task

    def list_tasks(self, user_id: str) -> List[TaskResponse]:
        owned = [task for task in self.tasks if task.user_id == user_id]
        return sorted(owned, key=lambda task: (task.created_at, task.id), reverse=True)

    def create_task(self, user_id: str, data: TaskCreate) -> TaskResponse:
        now = self.clock()
        task = TaskResponse(
            id=next(self._ids),
            user_id=user_id,
            title=normalize_title(data.title),
            description=normalize_description(data.description),
            completed=False,
            priority=normalize_priority(data.priority),
            due_date=normalize_due_date(data.due_date),
            created_at=now,
            updated_at=now,
        )
        self.tasks = reducers.add_task(self.tasks, task)
        return task

    def update_task(self, task_id: int, changes: TaskUpdate) -> TaskResponse:
        values = clean_changes(changes)
        task = self._get(task_id)
        values["updated_at"] = max(self.clock(), task.updated_at + 1)
        updated = task.model_copy(update=values)
        self.tasks = reducers.replace_task(self.tasks, updated)
        return updated

    def delete_task(self, task_id: int) -> None:
        self._get(task_id)
        self.tasks = reducers.remove_task(self.tasks, task_id)

    def toggle_task(self, task_id: int) -> TaskResponse:
        task = self._get(task_id)
        timestamp = max(self.clock(), task.updated_at + 1)
        self.tasks = reducers.toggle_task(self.tasks, task_id, timestamp)
        return self._get(task_id)


class HttpTaskBackend(TaskBackend):
    """Backend that calls the REST API exposed by ``tasktracker.main``."""

    def __init__(self, client: httpx.Client, prefix: str = "/api"):
        self.client = client
        self.prefix = prefix.rstrip("/")

    @classmethod
    def from_url(cls, base_url: str, timeout: float = 10.0) -> "HttpTaskBackend":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self.client.close()

    def _check(self, response: httpx.Response) -> httpx.Response:
        """Translate error envelopes back into domain errors."""
        if response.is_success:
            return response

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        error = body.get("error")

        if error:
            kinds = {
                ValidationError.code: ValidationError,
                NotFoundError.code: NotFoundError,
                ConflictError.code: ConflictError,
            }
            kind = kinds.get(error.get("code"), TaskTrackerError)
            raise kind(error.get("message", "Request failed"), details=error.get("details"), code=error.get("code"))
        if response.status_code == 422:
            raise ValidationError("Invalid request", details={"errors": body.get("detail", [])})
        if response.status_code == 404:
            raise NotFoundError("Not found", details={"url": str(response.request.url)})

        logger.error("Task API returned %s for %s", response.status_code, response.request.url)
        response.raise_for_status()
        return response

    def list_tasks(self, user_id: str) -> List[TaskResponse]:
        response = self._check(self.client.get(f"{self.prefix}/users/{user_id}/tasks"))
        return [TaskResponse(**task) for task in response.json()["tasks"]]

    def create_task(self, user_id: str, data: TaskCreate) -> TaskResponse:
        response = self._check(
            self.client.post(f"{self.prefix}/users/{user_id}/tasks", json=data.model_dump(mode="json"))
        )
        return TaskResponse(**response.json())

    def update_task(self, task_id: int, changes: TaskUpdate) -> TaskResponse:
        response = self._check(
            self.client.patch(
                f"{self.prefix}/tasks/{task_id}",
                json=changes.model_dump(mode="json", exclude_unset=True),
            )
        )
        return TaskResponse(**response.json())

    def delete_task(self, task_id: int) -> None:
        self._check(self.client.delete(f"{self.prefix}/tasks/{task_id}"))

    def toggle_task(self, task_id: int) -> TaskResponse:
        response = self._check(self.client.patch(f"{self.prefix}/tasks/{task_id}/toggle"))
        return TaskResponse(**response.json())
