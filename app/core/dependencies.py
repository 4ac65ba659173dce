"""FastAPI dependencies wiring the user store into the use cases"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.auth_use_cases import (
    ListUsersUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from app.domain.interfaces.user_repository import UserRepositoryInterface
from app.infrastructure.database.connection import get_async_db
from app.infrastructure.repositories.user_repository import UserRepository


async def get_user_repository(
    db: AsyncSession = Depends(get_async_db),
) -> UserRepositoryInterface:
    """User store bound to the request's database session"""
    return UserRepository(db)


async def get_register_use_case(
    user_repository: UserRepositoryInterface = Depends(get_user_repository),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repository)


async def get_login_use_case(
    user_repository: UserRepositoryInterface = Depends(get_user_repository),
) -> LoginUserUseCase:
    return LoginUserUseCase(user_repository)


async def get_list_users_use_case(
    user_repository: UserRepositoryInterface = Depends(get_user_repository),
) -> ListUsersUseCase:
    return ListUsersUseCase(user_repository)
