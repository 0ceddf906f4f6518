"""Task router: query and mutation endpoints."""
from fastapi import APIRouter, Depends, status, Response
from sqlmodel import Session

from tasktracker.db.config import get_session
from tasktracker.models.enums import Priority
from tasktracker.schemas.task import TaskCreate, TaskListResponse, TaskResponse, TaskUpdate
from tasktracker.services.task_service import TaskService

router = APIRouter(tags=["Tasks"])  # No prefix since main.py adds /api prefix


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


@router.get("/users/{user_id}/tasks", response_model=TaskListResponse)
async def list_tasks(user_id: str, service: TaskService = Depends(get_task_service)):
    """List all tasks of a user, newest first."""
    tasks = service.list_tasks(user_id)
    return {"tasks": tasks, "count": len(tasks)}


@router.get("/users/{user_id}/tasks/status/{completed}", response_model=TaskListResponse)
async def list_tasks_by_status(
    user_id: str,
    completed: bool,
    service: TaskService = Depends(get_task_service),
):
    """List the user's completed (``true``) or pending (``false``) tasks."""
    tasks = service.list_tasks_by_status(user_id, completed)
    return {"tasks": tasks, "count": len(tasks)}


@router.get("/users/{user_id}/tasks/priority/{priority}", response_model=TaskListResponse)
async def list_tasks_by_priority(
    user_id: str,
    priority: Priority,
    service: TaskService = Depends(get_task_service),
):
    """List the user's tasks with one priority level."""
    tasks = service.list_tasks_by_priority(user_id, priority)
    return {"tasks": tasks, "count": len(tasks)}


@router.post("/users/{user_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    user_id: str,
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a new pending task for the user."""
    return service.create_task(
        user_id=user_id,
        title=task_data.title,
        description=task_data.description,
        priority=task_data.priority,
        due_date=task_data.due_date,
    )


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID."""
    return service.get_task(task_id)


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Update the fields present in the body; absent fields are kept."""
    return service.update_task(task_id, task_data)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a task."""
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/tasks/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Toggle task completion status."""
    return service.toggle_task(task_id)
