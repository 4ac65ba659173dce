"""Submitted form value objects"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegistrationForm:
    """Fields submitted by the registration form"""

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    full_name: Optional[str] = None


@dataclass(frozen=True)
class LoginForm:
    """Fields submitted by the login form"""

    identifier: Optional[str] = None
    password: Optional[str] = None
