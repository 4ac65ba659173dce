"""User domain entity"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class UserProjection:
    """Public view of a user, never carries the password"""

    id: int
    username: str
    email: str
    full_name: str
    created_at: Optional[datetime] = None


@dataclass
class UserEntity:
    """User domain entity"""

    id: Optional[int]
    username: str
    email: str
    password_hash: str
    full_name: str
    created_at: Optional[datetime] = None

    def to_projection(self) -> UserProjection:
        """Strip credentials for external callers"""
        if self.id is None:
            raise ValueError("User has not been persisted")

        return UserProjection(
            id=self.id,
            username=self.username,
            email=self.email,
            full_name=self.full_name,
            created_at=self.created_at,
        )
