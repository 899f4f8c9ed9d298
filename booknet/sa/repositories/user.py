# booknet/sa/repositories/user.py
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from ..models import User

class UserRepository:
    """Repository for managing User entities."""

    def __init__(self, session: Session):
        self.session = session

    def create_user(self, name: str) -> User:
        """Create a new user.

        Args:
            name: The name of the user

        Returns:
            The created User object

        Raises:
            ValueError: If a user with the given name already exists
        """
        existing = self.get_by_name(name)
        if existing:
            raise ValueError(f"User with name '{name}' already exists")

        user = User(name=name)
        self.session.add(user)
        try:
            self.session.commit()
            return user
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with name '{name}' already exists")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.query(User).filter(User.id == user_id).first()

    def get_by_name(self, name: str) -> Optional[User]:
        return self.session.query(User).filter(User.name == name).first()
