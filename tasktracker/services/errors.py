"""
Domain errors raised by the task and user services.

Every error carries a machine readable ``code`` so the HTTP layer and the
task board can react to the kind of failure without parsing messages.
"""

from typing import Any, Dict, Optional


class TaskTrackerError(Exception):
    """Base exception for task tracker errors"""
    code = "ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, code: Optional[str] = None):
        self.code = code or self.code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TaskTrackerError):
    """Input rejected before anything is written (empty or oversized fields)."""
    code = "VALIDATION_ERROR"


class NotFoundError(TaskTrackerError):
    """The referenced record does not exist."""
    code = "NOT_FOUND"


class ConflictError(TaskTrackerError):
    """The write would violate a uniqueness rule."""
    code = "CONFLICT"


def create_error_response(error: TaskTrackerError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The TaskTrackerError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }
