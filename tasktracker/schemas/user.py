"""User schemas for the Task Tracker API."""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class UserCreate(BaseModel):
    """Create user request body."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    image: Optional[str] = Field(None, max_length=500)


class UserResponse(BaseModel):
    """User profile returned by the API."""
    id: str
    name: str
    email: str
    image: Optional[str] = None

    class Config:
        from_attributes = True
