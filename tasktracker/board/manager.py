"""
Task board orchestrator.

``TaskManager`` owns the board state for one user and is the single place
where user actions (create, edit, delete, toggle, filter) are turned into
backend calls. Results are folded into the state with the pure reducers in
``tasktracker.board.state``; a failed action never changes the state.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional
import logging

from pydantic import BaseModel

from tasktracker.board import state as reducers
from tasktracker.board.backends import InMemoryTaskBackend, TaskBackend
from tasktracker.board.display import (
    EMPTY_LIST_HINT,
    EMPTY_LIST_TITLE,
    TaskView,
    render_task,
    task_list_heading,
)
from tasktracker.board.forms import AddTaskForm, EditDraft
from tasktracker.board.state import BoardState, TaskStats
from tasktracker.config import DEMO_USER_ID
from tasktracker.models.enums import PriorityFilter, StatusFilter
from tasktracker.services.errors import NotFoundError, ValidationError
from tasktracker.utils.logger import get_logger

logger = logging.getLogger(__name__)
audit = get_logger("tasktracker.board")


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a board action.

    ``error`` is ``"validation"`` (blocking message, nothing submitted),
    ``"not_found"``, ``"cancelled"`` or ``"failure"``; ``None`` on success.
    """
    ok: bool
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "ActionResult":
        return cls(ok=True)


class BoardView(BaseModel):
    """Everything one render of the board needs."""
    stats: TaskStats
    heading: str
    tasks: List[TaskView]
    status_filter: StatusFilter
    priority_filter: PriorityFilter
    empty_title: Optional[str] = None
    empty_hint: Optional[str] = None


@dataclass
class TaskManager:
    user_id: str
    backend: TaskBackend
    state: BoardState = field(default_factory=BoardState)
    form: AddTaskForm = field(default_factory=AddTaskForm)
    drafts: Dict[int, EditDraft] = field(default_factory=dict)

    @classmethod
    def demo(cls, user_id: str = DEMO_USER_ID) -> "TaskManager":
        """A board backed by the in-memory sample tasks."""
        manager = cls(user_id=user_id, backend=InMemoryTaskBackend.with_demo_tasks(user_id))
        manager.refresh()
        return manager

    def _run(self, action: str, call) -> ActionResult:
        """Run ``call`` and map its failure to an ActionResult.

        ``call`` returns the new BoardState; it is applied only on success.
        """
        try:
            new_state = call()
        except ValidationError as e:
            return ActionResult(ok=False, error="validation", message=e.message)
        except NotFoundError as e:
            logger.warning("%s failed: %s", action, e.message)
            return ActionResult(ok=False, error="not_found", message=e.message)
        except Exception:
            audit.exception("board.action_failed", action=action, user_id=self.user_id)
            return ActionResult(ok=False, error="failure", message=f"Could not {action.replace('_', ' ')}")
        self.state = new_state
        return ActionResult.success()

    def refresh(self) -> ActionResult:
        return self._run(
            "load_tasks",
            lambda: reducers.with_tasks(self.state, self.backend.list_tasks(self.user_id)),
        )

    # Add task form

    def submit_form(self) -> ActionResult:
        """Validate the add form, create the task, and reset the form on success."""
        def create():
            data = self.form.to_create()
            task = self.backend.create_task(self.user_id, data)
            return reducers.with_tasks(self.state, reducers.add_task(self.state.tasks, task))

        result = self._run("create_task", create)
        if result.ok:
            self.form.reset()
        return result

    # Inline edit

    def start_edit(self, task_id: int) -> ActionResult:
        task = reducers.find_task(self.state.tasks, task_id)
        if task is None:
            return ActionResult(ok=False, error="not_found", message="Task not found")
        self.drafts[task_id] = EditDraft.from_task(task)
        return ActionResult.success()

    def cancel_edit(self, task_id: int) -> None:
        self.drafts.pop(task_id, None)

    def is_editing(self, task_id: int) -> bool:
        return task_id in self.drafts

    def save_edit(self, task_id: int) -> ActionResult:
        draft = self.drafts.get(task_id)
        if draft is None:
            return ActionResult(ok=False, error="not_found", message="Task is not being edited")

        def update():
            task = self.backend.update_task(task_id, draft.to_update())
            return reducers.with_tasks(self.state, reducers.replace_task(self.state.tasks, task))

        result = self._run("update_task", update)
        if result.ok:
            self.drafts.pop(task_id, None)
        return result

    # Item actions

    def delete_task(self, task_id: int, confirmed: bool = True) -> ActionResult:
        if not confirmed:
            return ActionResult(ok=False, error="cancelled", message="Delete cancelled")

        def delete():
            self.backend.delete_task(task_id)
            return reducers.with_tasks(self.state, reducers.remove_task(self.state.tasks, task_id))

        result = self._run("delete_task", delete)
        if result.ok:
            self.drafts.pop(task_id, None)
        return result

    def toggle_task(self, task_id: int) -> ActionResult:
        def toggle():
            task = self.backend.toggle_task(task_id)
            return reducers.with_tasks(self.state, reducers.replace_task(self.state.tasks, task))

        return self._run("toggle_task", toggle)

    # Filters

    def set_status_filter(self, status_filter: StatusFilter) -> None:
        self.state = reducers.set_status_filter(self.state, status_filter)

    def set_priority_filter(self, priority_filter: PriorityFilter) -> None:
        self.state = reducers.set_priority_filter(self.state, priority_filter)

    # Render

    def view(self, today: Optional[date] = None) -> BoardView:
        return build_view(self.state, today)


def build_view(board: BoardState, today: Optional[date] = None) -> BoardView:
    visible = reducers.visible_tasks(board)
    return BoardView(
        stats=reducers.task_stats(board.tasks),
        heading=task_list_heading(len(visible)),
        tasks=[render_task(task, today) for task in visible],
        status_filter=board.status_filter,
        priority_filter=board.priority_filter,
        empty_title=None if visible else EMPTY_LIST_TITLE,
        empty_hint=None if visible else EMPTY_LIST_HINT,
    )
