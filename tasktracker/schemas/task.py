"""Task schemas for the Task Tracker API."""
from pydantic import BaseModel, Field
from typing import Optional, List

from tasktracker.models.enums import Priority


class TaskCreate(BaseModel):
    """Schema for creating a task. Length rules are enforced by TaskService."""
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[str] = Field(None, description="ISO date, YYYY-MM-DD")


class TaskUpdate(BaseModel):
    """Schema for a partial task update; only fields that are set are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    due_date: Optional[str] = Field(None, description="ISO date, YYYY-MM-DD; null or empty clears it")


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    id: int
    user_id: str
    title: str
    description: Optional[str] = None
    completed: bool
    priority: Priority
    due_date: Optional[str] = None
    created_at: int  # epoch milliseconds
    updated_at: int  # epoch milliseconds

    class Config:
        from_attributes = True


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]
    count: int
