"""Field validation rules for the registration and login forms

Single-field validators return the first violated rule for that field or
``None``. Form validators run every field check and collect all failures in a
fixed order so clients can display them deterministically.
"""

import re
from typing import Optional

from app.domain.value_objects.forms import LoginForm, RegistrationForm
from app.domain.value_objects.validation import FieldError, ValidationCode, ValidationResult

# Only flat character classes, so matching stays linear in the input length
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{3,20}", re.ASCII)
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", re.ASCII)

EMAIL_MAX_LENGTH = 254
PASSWORD_MIN_LENGTH = 8
FULL_NAME_MIN_LENGTH = 2


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def validate_username(username: Optional[str]) -> Optional[FieldError]:
    """Validate username format"""
    if _is_blank(username):
        return FieldError("username", ValidationCode.REQUIRED, "Username is required")

    if USERNAME_PATTERN.fullmatch(username) is None:  # type: ignore[arg-type]
        return FieldError(
            "username",
            ValidationCode.FORMAT_INVALID,
            "Username must be 3-20 characters and contain only letters, numbers, and underscores",
        )

    return None


def validate_email(email: Optional[str]) -> Optional[FieldError]:
    """Validate email format"""
    if _is_blank(email):
        return FieldError("email", ValidationCode.REQUIRED, "Email is required")

    if len(email) > EMAIL_MAX_LENGTH or EMAIL_PATTERN.fullmatch(email) is None:  # type: ignore
        return FieldError(
            "email", ValidationCode.FORMAT_INVALID, "Please enter a valid email address"
        )

    return None


def validate_password(password: Optional[str]) -> Optional[FieldError]:
    """Validate password strength, reporting only the first failed rule"""
    if not password:
        return FieldError("password", ValidationCode.REQUIRED, "Password is required")

    if len(password) < PASSWORD_MIN_LENGTH:
        return FieldError(
            "password",
            ValidationCode.TOO_SHORT,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )

    if not any("A" <= char <= "Z" for char in password):
        return FieldError(
            "password",
            ValidationCode.MISSING_UPPERCASE,
            "Password must contain at least one uppercase letter",
        )

    if not any("a" <= char <= "z" for char in password):
        return FieldError(
            "password",
            ValidationCode.MISSING_LOWERCASE,
            "Password must contain at least one lowercase letter",
        )

    if not any("0" <= char <= "9" for char in password):
        return FieldError(
            "password", ValidationCode.MISSING_DIGIT, "Password must contain at least one number"
        )

    return None


def validate_full_name(full_name: Optional[str]) -> Optional[FieldError]:
    """Validate full name length"""
    if _is_blank(full_name):
        return FieldError("fullName", ValidationCode.REQUIRED, "Full name is required")

    if len(full_name.strip()) < FULL_NAME_MIN_LENGTH:  # type: ignore[union-attr]
        return FieldError(
            "fullName",
            ValidationCode.TOO_SHORT,
            f"Full name must be at least {FULL_NAME_MIN_LENGTH} characters long",
        )

    return None


def validate_registration_form(form: RegistrationForm) -> ValidationResult:
    """Validate every registration field and collect all failures"""
    errors = [
        validate_username(form.username),
        validate_email(form.email),
        validate_password(form.password),
    ]

    if form.password != form.confirm_password:
        errors.append(
            FieldError("confirmPassword", ValidationCode.MISMATCH, "Passwords do not match")
        )

    errors.append(validate_full_name(form.full_name))

    return ValidationResult(tuple(error for error in errors if error is not None))


def validate_login_form(form: LoginForm) -> ValidationResult:
    """Check that login credentials are present (no strength rules)"""
    errors = []

    if _is_blank(form.identifier):
        errors.append(
            FieldError("identifier", ValidationCode.REQUIRED, "Username or email is required")
        )

    if not form.password:
        errors.append(FieldError("password", ValidationCode.REQUIRED, "Password is required"))

    return ValidationResult(tuple(errors))
