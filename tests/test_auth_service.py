"""
Tests for registration and login.
"""

import pytest
from sqlalchemy import func, select

from agroscan.modules.user_management.application.dto.user_dto import LoginRequestDTO, RegisterRequestDTO
from agroscan.modules.user_management.domain.models.user import UserRole
from agroscan.modules.user_management.infrastructure.database.models import UserModel
from agroscan.shared.core.exceptions import AuthenticationError, DuplicateResourceError


def registration(email="ana@x.com", **overrides):
    data = {
        "first_name": "Ana",
        "last_name": "Lee",
        "email": email,
        "password": "Secret123",
    }
    data.update(overrides)
    return RegisterRequestDTO(**data)


async def count_users(session) -> int:
    return await session.scalar(select(func.count()).select_from(UserModel))


async def test_register_creates_farmer_and_signs_in(auth_service, token_service):
    response = await auth_service.register(registration())

    assert response.user.role == UserRole.FARMER
    assert response.user.email == "ana@x.com"
    assert response.user.created_at == response.user.updated_at
    assert response.token_type == "bearer"
    assert token_service.validate(response.token) == response.user.id


async def test_register_ignores_requested_role(auth_service):
    response = await auth_service.register(registration(role="Admin"))

    assert response.user.role == UserRole.FARMER


async def test_register_stores_hash_not_password(auth_service, session, password_hasher):
    response = await auth_service.register(registration())

    stored = await session.get(UserModel, response.user.id)
    assert stored.password_hash != "Secret123"
    assert password_hasher.verify("Secret123", stored.password_hash)


async def test_register_duplicate_email_fails_without_new_row(auth_service, session):
    await auth_service.register(registration())
    before = await count_users(session)

    with pytest.raises(DuplicateResourceError) as exc_info:
        await auth_service.register(registration(first_name="Other"))

    assert exc_info.value.status_code == 409
    assert await count_users(session) == before


async def test_login_succeeds_with_correct_password(auth_service, token_service):
    registered = await auth_service.register(registration())

    response = await auth_service.login(LoginRequestDTO(email="ana@x.com", password="Secret123"))

    assert response.user.id == registered.user.id
    assert token_service.validate(response.token) == registered.user.id


async def test_login_failures_share_one_message(auth_service):
    await auth_service.register(registration())

    with pytest.raises(AuthenticationError) as wrong_password:
        await auth_service.login(LoginRequestDTO(email="ana@x.com", password="wrong"))
    with pytest.raises(AuthenticationError) as unknown_email:
        await auth_service.login(LoginRequestDTO(email="nobody@x.com", password="Secret123"))

    assert wrong_password.value.message == unknown_email.value.message
    assert wrong_password.value.message == "Invalid email or password"
