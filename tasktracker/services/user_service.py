"""User service for profile records."""
from sqlmodel import Session, select

from tasktracker.models.user import User
from tasktracker.schemas.user import UserCreate
from tasktracker.services.errors import ConflictError, NotFoundError, ValidationError
from tasktracker.utils.logger import get_logger

audit = get_logger("tasktracker.audit")


class UserService:
    """Create and look up users."""

    def __init__(self, session: Session):
        self.session = session

    def create_user(self, data: UserCreate) -> User:
        name = data.name.strip()
        if not name:
            raise ValidationError("User name cannot be empty", details={"field": "name"})
        email = data.email.lower()
        if self.find_by_email(email) is not None:
            raise ConflictError("User with this email already exists", details={"email": email})

        user = User(name=name, email=email, image=data.image)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        audit.info("user.created", user_id=user.id)
        return user

    def get_user(self, user_id: str) -> User:
        user = self.session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found", details={"user_id": user_id})
        return user

    def find_by_email(self, email: str):
        """Look a user up through the ``by_email`` index; ``None`` if absent."""
        statement = select(User).where(User.email == email.lower())
        return self.session.exec(statement).first()
