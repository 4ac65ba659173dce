"""Tests for the SQLAlchemy user store"""

import dataclasses

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_password_hash, verify_password
from app.domain.entities.user import UserEntity
from app.domain.exceptions import UserAlreadyExistsError
from app.infrastructure.database.models import User
from app.infrastructure.repositories.user_repository import UserRepository


def make_user(username: str = "alice123", email: str = "a@b.co") -> UserEntity:
    return UserEntity(
        id=None,
        username=username,
        email=email,
        password_hash=get_password_hash("Abcdefg1"),
        full_name="Alice A",
    )


async def count_users(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(User))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_assigns_id_and_created_at(user_repository: UserRepository) -> None:
    user = await user_repository.create(make_user())

    assert user.id is not None
    assert user.created_at is not None
    assert user.username == "alice123"
    assert user.full_name == "Alice A"


@pytest.mark.asyncio
async def test_password_is_stored_hashed(
    user_repository: UserRepository, db_session: AsyncSession
) -> None:
    await user_repository.create(make_user())

    result = await db_session.execute(select(User.password_hash))
    stored = result.scalar_one()

    assert stored != "Abcdefg1"
    assert verify_password("Abcdefg1", stored)


@pytest.mark.asyncio
async def test_exists_checks_are_exact_and_repeatable(user_repository: UserRepository) -> None:
    assert await user_repository.username_exists("alice123") is False
    assert await user_repository.email_exists("a@b.co") is False

    await user_repository.create(make_user())

    for _ in range(2):
        assert await user_repository.username_exists("alice123") is True
        assert await user_repository.email_exists("a@b.co") is True

    assert await user_repository.username_exists("ALICE123") is False
    assert await user_repository.email_exists("A@B.CO") is False


@pytest.mark.asyncio
async def test_find_by_username_or_email_round_trip(user_repository: UserRepository) -> None:
    created = await user_repository.create(make_user())

    by_username = await user_repository.find_by_username_or_email("alice123")
    by_email = await user_repository.find_by_username_or_email("a@b.co")

    assert by_username is not None and by_email is not None
    assert by_username.to_projection() == by_email.to_projection() == created.to_projection()

    projection_fields = {field.name for field in dataclasses.fields(by_username.to_projection())}
    assert "password" not in projection_fields
    assert "password_hash" not in projection_fields


@pytest.mark.asyncio
async def test_find_unknown_identifier_returns_none(user_repository: UserRepository) -> None:
    await user_repository.create(make_user())

    assert await user_repository.find_by_username_or_email("nouser") is None


@pytest.mark.asyncio
async def test_find_prefers_lowest_id_on_ambiguous_identifier(
    user_repository: UserRepository,
) -> None:
    # The username of one user equals the email of another
    first = await user_repository.create(make_user(username="first", email="x@y.zz"))
    await user_repository.create(make_user(username="second", email="first"))

    found = await user_repository.find_by_username_or_email("first")

    assert found is not None
    assert found.id == first.id


@pytest.mark.asyncio
async def test_duplicate_username_violates_constraint(
    user_repository: UserRepository, db_session: AsyncSession
) -> None:
    await user_repository.create(make_user())

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        await user_repository.create(make_user(email="other@b.co"))

    assert exc_info.value.field == "username"
    assert exc_info.value.message == "Username already exists"
    assert await count_users(db_session) == 1


@pytest.mark.asyncio
async def test_duplicate_email_violates_constraint(
    user_repository: UserRepository, db_session: AsyncSession
) -> None:
    await user_repository.create(make_user())

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        await user_repository.create(make_user(username="bob"))

    assert exc_info.value.field == "email"
    assert exc_info.value.errors == [{"field": "email", "message": "Email already exists"}]
    assert await count_users(db_session) == 1


@pytest.mark.asyncio
async def test_list_users_ordered_without_passwords(user_repository: UserRepository) -> None:
    await user_repository.create(make_user(username="alice123", email="a@b.co"))
    await user_repository.create(make_user(username="bob", email="bob@b.co"))

    users = await user_repository.list_users()

    assert [user.username for user in users] == ["alice123", "bob"]
    assert users[0].id < users[1].id
    for user in users:
        assert not hasattr(user, "password_hash")
        assert not hasattr(user, "password")
