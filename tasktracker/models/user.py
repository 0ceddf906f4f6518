"""User model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Index
from typing import Optional
import uuid


class User(SQLModel, table=True):
    """User profile. Tasks reference it by ``user_id`` without a foreign key."""

    __tablename__ = "users"
    __table_args__ = (
        Index("by_email", "email", unique=True),
    )

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    image: Optional[str] = Field(default=None, max_length=500)
