"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, BigInteger, Boolean, Enum as SAEnum, Index, String, Text
from typing import Optional
import time

from tasktracker.models.enums import Priority

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class Task(SQLModel, table=True):
    """A single todo item owned by an opaque user id."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("by_user", "user_id"),
        Index("by_user_completed", "user_id", "completed"),
        Index("by_user_priority", "user_id", "priority"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    # Owner reference only; users are not a foreign key
    user_id: str = Field(sa_column=Column(String(255), nullable=False))
    title: str = Field(sa_column=Column(String(TITLE_MAX_LENGTH), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    completed: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    priority: Priority = Field(
        default=Priority.MEDIUM,
        sa_column=Column(
            SAEnum(
                Priority,
                name="task_priority",
                native_enum=False,
                create_constraint=True,
                length=20,
                values_callable=lambda enum: [member.value for member in enum],
            ),
            nullable=False,
        ),
    )
    due_date: Optional[str] = Field(default=None, sa_column=Column(String(10), nullable=True))  # YYYY-MM-DD
    created_at: int = Field(sa_column=Column(BigInteger, nullable=False))
    updated_at: int = Field(sa_column=Column(BigInteger, nullable=False))
