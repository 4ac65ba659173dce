"""User repository implementation"""

import logging
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.domain.entities.user import UserEntity, UserProjection
from app.domain.exceptions import UserAlreadyExistsError
from app.domain.interfaces.user_repository import UserRepositoryInterface
from app.infrastructure.database.models import User

logger = logging.getLogger(__name__)


class UserRepository(UserRepositoryInterface):
    """Async SQLAlchemy implementation of user repository"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def username_exists(self, username: str) -> bool:
        """Check whether a username is taken"""
        stmt = select(func.count()).select_from(User).where(User.username == username)
        result = await self.db.execute(stmt)
        return result.scalar_one() > 0

    async def email_exists(self, email: str) -> bool:
        """Check whether an email is taken"""
        stmt = select(func.count()).select_from(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one() > 0

    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Create a new user"""
        db_user = User(
            username=user_entity.username,
            email=user_entity.email,
            password_hash=user_entity.password_hash,
            full_name=user_entity.full_name,
        )

        try:
            self.db.add(db_user)
            await self.db.commit()
            await self.db.refresh(db_user)

            return self._to_entity(db_user)
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Uniqueness constraint rejected user {user_entity.username!r}")
            # The pre-check lost a race; attribute the conflict like the pre-check would
            if await self.username_exists(user_entity.username):
                raise UserAlreadyExistsError("username", "Username already exists")
            raise UserAlreadyExistsError("email", "Email already exists")

    async def find_by_username_or_email(self, identifier: str) -> Optional[UserEntity]:
        """Get user by username or email"""
        stmt = (
            select(User)
            .where(or_(User.username == identifier, User.email == identifier))
            .order_by(User.id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        db_user = result.scalars().first()
        return self._to_entity(db_user) if db_user else None

    async def list_users(self) -> list[UserProjection]:
        """List all users without passwords"""
        stmt = select(User).order_by(User.id)
        result = await self.db.execute(stmt)
        return [self._to_entity(db_user).to_projection() for db_user in result.scalars().all()]

    def _to_entity(self, db_user: User) -> UserEntity:
        """Convert database model to domain entity"""
        return UserEntity(
            id=db_user.id,
            username=db_user.username,
            email=db_user.email,
            password_hash=db_user.password_hash,
            full_name=db_user.full_name,
            created_at=db_user.created_at,
        )
