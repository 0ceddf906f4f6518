"""Closed enumerations shared by the models, schemas and task board."""
from enum import Enum


class Priority(str, Enum):
    """Task priority level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StatusFilter(str, Enum):
    """Completion filter on the task board."""
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class PriorityFilter(str, Enum):
    """Priority filter on the task board; ``ALL`` disables it."""
    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
