"""SQLAlchemy database models"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from app.infrastructure.database.connection import Base


class User(Base):
    """User model

    Usernames and emails are unique at the storage layer so concurrent
    registrations cannot both succeed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(20), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
