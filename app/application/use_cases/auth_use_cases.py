"""Registration, authentication and listing use cases"""

import logging

from app.core.security import dummy_verify, get_password_hash, verify_password
from app.domain.entities.user import UserEntity, UserProjection
from app.domain.exceptions import (
    FormValidationError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from app.domain.interfaces.user_repository import UserRepositoryInterface
from app.domain.validators import validate_login_form, validate_registration_form
from app.domain.value_objects.forms import LoginForm, RegistrationForm

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for user registration"""

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository

    async def execute(self, form: RegistrationForm) -> UserProjection:
        """Register a new user

        Field errors are reported all at once; uniqueness conflicts are
        reported one at a time, username before email.
        """
        validation = validate_registration_form(form)
        if not validation.is_valid:
            raise FormValidationError(validation.errors)

        # Validated above, so these are non-empty strings
        username: str = form.username  # type: ignore[assignment]
        email: str = form.email  # type: ignore[assignment]

        if await self.user_repository.username_exists(username):
            raise UserAlreadyExistsError("username", "Username already exists")

        if await self.user_repository.email_exists(email):
            raise UserAlreadyExistsError("email", "Email already exists")

        user_entity = UserEntity(
            id=None,
            username=username,
            email=email,
            password_hash=get_password_hash(form.password),  # type: ignore[arg-type]
            full_name=form.full_name.strip(),  # type: ignore[union-attr]
        )

        user = await self.user_repository.create(user_entity)
        logger.info(f"Registered user {user.username} (id={user.id})")

        return user.to_projection()


class LoginUserUseCase:
    """Use case for user login"""

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository

    async def execute(self, form: LoginForm) -> UserProjection:
        """Authenticate a user by username or email"""
        validation = validate_login_form(form)
        if not validation.is_valid:
            raise FormValidationError(validation.errors)

        identifier: str = form.identifier  # type: ignore[assignment]
        password: str = form.password  # type: ignore[assignment]

        user = await self.user_repository.find_by_username_or_email(identifier)
        if not user:
            dummy_verify()
            logger.info("Login failed: unknown identifier")
            raise InvalidCredentialsError()

        if not verify_password(password, user.password_hash):
            logger.info(f"Login failed: wrong password for user id={user.id}")
            raise InvalidCredentialsError()

        return user.to_projection()


class ListUsersUseCase:
    """Use case for listing registered users"""

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository

    async def execute(self) -> list[UserProjection]:
        """List all users, passwords excluded"""
        return await self.user_repository.list_users()
