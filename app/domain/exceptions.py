"""Domain exceptions raised by the user workflows"""

from typing import Sequence

from app.domain.value_objects.validation import FieldError

INVALID_CREDENTIALS_MESSAGE = "Invalid username/email or password"


class UserServiceError(Exception):
    """Base exception for expected user workflow failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormValidationError(UserServiceError):
    """Raised when one or more submitted fields are invalid"""

    def __init__(self, errors: Sequence[FieldError]):
        super().__init__("Form validation failed")
        self.errors = list(errors)


class UserAlreadyExistsError(UserServiceError):
    """Raised when a username or email is already taken"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    @property
    def errors(self) -> list[dict[str, str]]:
        """Single field error in wire format"""
        return [{"field": self.field, "message": self.message}]


class InvalidCredentialsError(UserServiceError):
    """Raised when login fails, without saying which part was wrong"""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)
