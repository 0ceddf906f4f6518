"""User router: profile records referenced by tasks."""
from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr
from sqlmodel import Session

from tasktracker.db.config import get_session
from tasktracker.schemas.user import UserCreate, UserResponse
from tasktracker.services.errors import NotFoundError
from tasktracker.services.user_service import UserService

router = APIRouter(tags=["Users"])


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, service: UserService = Depends(get_user_service)):
    """Create a user; the email must not be taken."""
    return service.create_user(user_data)


@router.get("/users", response_model=UserResponse)
async def get_user_by_email(
    email: EmailStr = Query(..., description="Email address to look up"),
    service: UserService = Depends(get_user_service),
):
    """Look a user up by email."""
    user = service.find_by_email(email)
    if user is None:
        raise NotFoundError("User not found", details={"email": email})
    return user


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.get_user(user_id)
