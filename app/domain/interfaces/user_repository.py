"""User repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.user import UserEntity, UserProjection


class UserRepositoryInterface(ABC):
    """Interface for user repository"""

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        """Check whether a username is taken"""
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Check whether an email is taken"""
        pass

    @abstractmethod
    async def create(self, user: UserEntity) -> UserEntity:
        """Create a new user

        Raises UserAlreadyExistsError when the storage layer rejects the
        insert because of a uniqueness constraint.
        """
        pass

    @abstractmethod
    async def find_by_username_or_email(self, identifier: str) -> Optional[UserEntity]:
        """Get the user whose username or email equals the identifier"""
        pass

    @abstractmethod
    async def list_users(self) -> list[UserProjection]:
        """List all users without passwords, ordered by ID"""
        pass
