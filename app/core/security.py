"""Security utilities for password hashing"""

from passlib.context import CryptContext

from app.core.config import settings

# Password hashing context
pwd_context = CryptContext(schemes=[settings.password_hash_scheme], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)  # type: ignore


def get_password_hash(password: str) -> str:
    """Generate password hash"""
    return pwd_context.hash(password)  # type: ignore


def dummy_verify() -> None:
    """Spend the same time as a real verification when no user matched"""
    pwd_context.dummy_verify()
