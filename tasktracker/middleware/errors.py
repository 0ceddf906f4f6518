"""Translate domain errors into JSON error responses."""
from fastapi import Request, status
from fastapi.responses import JSONResponse
import logging

from tasktracker.services.errors import (
    ConflictError,
    NotFoundError,
    TaskTrackerError,
    ValidationError,
    create_error_response,
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


async def handle_task_tracker_error(request: Request, exc: TaskTrackerError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc.code)
    return JSONResponse(status_code=status_code, content=create_error_response(exc))


def add_error_handlers(app):
    """Register the domain error handler on the FastAPI application."""
    app.add_exception_handler(TaskTrackerError, handle_task_tracker_error)
