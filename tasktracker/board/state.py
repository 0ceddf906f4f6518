"""
Task board state.

``BoardState`` is immutable: every reducer returns a new state (or a new
task tuple) and never edits the one it was given. The visible list and the
statistics are derived from the state on every render.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from pydantic import BaseModel

from tasktracker.models.enums import PriorityFilter, StatusFilter
from tasktracker.schemas.task import TaskResponse

Tasks = Tuple[TaskResponse, ...]


class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int


@dataclass(frozen=True)
class BoardState:
    tasks: Tasks = ()
    status_filter: StatusFilter = StatusFilter.ALL
    priority_filter: PriorityFilter = PriorityFilter.ALL


# Reducers over the task collection

def add_task(tasks: Tasks, task: TaskResponse) -> Tasks:
    """Prepend ``task`` so the collection stays newest first."""
    return (task,) + tuple(tasks)


def replace_task(tasks: Tasks, task: TaskResponse) -> Tasks:
    return tuple(task if current.id == task.id else current for current in tasks)


def remove_task(tasks: Tasks, task_id: int) -> Tasks:
    return tuple(task for task in tasks if task.id != task_id)


def toggle_task(tasks: Tasks, task_id: int, timestamp: int) -> Tasks:
    return tuple(
        task.model_copy(update={"completed": not task.completed, "updated_at": timestamp})
        if task.id == task_id else task
        for task in tasks
    )


def find_task(tasks: Tasks, task_id: int):
    return next((task for task in tasks if task.id == task_id), None)


# Reducers over the board state

def with_tasks(state: BoardState, tasks: Iterable[TaskResponse]) -> BoardState:
    return replace(state, tasks=tuple(tasks))


def set_status_filter(state: BoardState, status_filter: StatusFilter) -> BoardState:
    return replace(state, status_filter=StatusFilter(status_filter))


def set_priority_filter(state: BoardState, priority_filter: PriorityFilter) -> BoardState:
    return replace(state, priority_filter=PriorityFilter(priority_filter))


# Derived values

def matches_status(task: TaskResponse, status_filter: StatusFilter) -> bool:
    if status_filter == StatusFilter.COMPLETED:
        return task.completed
    if status_filter == StatusFilter.PENDING:
        return not task.completed
    return True


def matches_priority(task: TaskResponse, priority_filter: PriorityFilter) -> bool:
    if priority_filter == PriorityFilter.ALL:
        return True
    return task.priority.value == priority_filter.value


def filter_tasks(tasks: Iterable[TaskResponse], status_filter: StatusFilter,
                 priority_filter: PriorityFilter) -> Tasks:
    """Both predicates must pass."""
    return tuple(
        task for task in tasks
        if matches_status(task, status_filter) and matches_priority(task, priority_filter)
    )


def visible_tasks(state: BoardState) -> Tasks:
    return filter_tasks(state.tasks, state.status_filter, state.priority_filter)


def task_stats(tasks: Iterable[TaskResponse]) -> TaskStats:
    """Totals over the whole collection, ignoring the active filters."""
    tasks = tuple(tasks)
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)
    return TaskStats(total=total, completed=completed, pending=total - completed)
