"""Task board: state, forms, display helpers and the TaskManager orchestrator."""

from .manager import ActionResult, BoardView, TaskManager, build_view
from .state import BoardState, TaskStats, task_stats, visible_tasks

__all__ = [
    "ActionResult",
    "BoardState",
    "BoardView",
    "TaskManager",
    "TaskStats",
    "build_view",
    "task_stats",
    "visible_tasks",
]
