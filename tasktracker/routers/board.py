"""Board router: the filtered task list and statistics for one user."""
from fastapi import APIRouter, Depends, Query

from tasktracker.board import BoardState, BoardView, build_view
from tasktracker.models.enums import PriorityFilter, StatusFilter
from tasktracker.routers.tasks import get_task_service
from tasktracker.services.task_service import TaskService
from tasktracker.schemas.task import TaskResponse

router = APIRouter(tags=["Board"])


@router.get("/users/{user_id}/board", response_model=BoardView)
async def get_board(
    user_id: str,
    status: StatusFilter = Query(StatusFilter.ALL, description="all, completed or pending"),
    priority: PriorityFilter = Query(PriorityFilter.ALL, description="all, low, medium or high"),
    service: TaskService = Depends(get_task_service),
):
    """Render the board: statistics over all tasks plus the filtered list."""
    tasks = tuple(TaskResponse.model_validate(task) for task in service.list_tasks(user_id))
    board = BoardState(tasks=tasks, status_filter=status, priority_filter=priority)
    return build_view(board)
