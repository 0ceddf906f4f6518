"""Routers package for the Task Tracker API."""

from .board import router as board_router
from .tasks import router as tasks_router
from .users import router as users_router

__all__ = ["board_router", "tasks_router", "users_router"]
