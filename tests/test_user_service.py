"""
Tests for account management rules.
"""

import pytest
from sqlalchemy import func, select

from agroscan.modules.inspection_management.application.dto.inspection_dto import CreateInspectionDTO
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionModel
from agroscan.modules.user_management.application.dto.user_dto import CreateUserDTO, UpdateUserDTO
from agroscan.modules.user_management.domain.models.user import UserRole
from agroscan.shared.core.exceptions import AuthorizationError, DuplicateResourceError


def update_for(user, **overrides):
    data = {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
    }
    data.update(overrides)
    return UpdateUserDTO(**data)


async def test_create_user_with_explicit_role(user_service):
    created = await user_service.create_user(
        CreateUserDTO(
            first_name="Root",
            last_name="Admin",
            email="root@example.com",
            password="Secret123",
            role=UserRole.ADMIN,
        )
    )

    assert created.role == UserRole.ADMIN
    assert created.created_at == created.updated_at


async def test_create_user_duplicate_email(user_service, farmer):
    with pytest.raises(DuplicateResourceError):
        await user_service.create_user(
            CreateUserDTO(first_name="X", last_name="Y", email=farmer.email, password="Secret123")
        )


async def test_get_all_users(user_service, farmer, other_farmer, admin):
    users = await user_service.get_all_users()

    assert {u.id for u in users} == {farmer.id, other_farmer.id, admin.id}


async def test_get_user_missing_returns_none(user_service, admin):
    assert await user_service.get_user_by_id(9999, admin.id, True) is None


async def test_get_other_user_requires_admin(user_service, farmer, other_farmer, admin):
    with pytest.raises(AuthorizationError):
        await user_service.get_user_by_id(other_farmer.id, farmer.id, False)

    assert (await user_service.get_user_by_id(farmer.id, farmer.id, False)).id == farmer.id
    assert (await user_service.get_user_by_id(farmer.id, admin.id, True)).id == farmer.id


async def test_update_own_account(user_service, farmer):
    updated = await user_service.update_user(
        farmer.id, update_for(farmer, first_name="Anabel"), farmer.id, False
    )

    assert updated.first_name == "Anabel"
    assert updated.updated_at >= updated.created_at


async def test_farmer_cannot_change_own_role(user_service, farmer):
    with pytest.raises(AuthorizationError):
        await user_service.update_user(
            farmer.id, update_for(farmer, role=UserRole.ADMIN), farmer.id, False
        )


async def test_admin_can_change_role(user_service, farmer, admin):
    updated = await user_service.update_user(
        farmer.id, update_for(farmer, role=UserRole.ADMIN), admin.id, True
    )

    assert updated.role == UserRole.ADMIN


async def test_update_to_taken_email(user_service, farmer, other_farmer):
    with pytest.raises(DuplicateResourceError):
        await user_service.update_user(
            farmer.id, update_for(farmer, email=other_farmer.email), farmer.id, False
        )


async def test_farmer_cannot_delete_another_user(user_service, farmer, other_farmer):
    with pytest.raises(AuthorizationError):
        await user_service.delete_user(other_farmer.id, farmer.id, False)


async def test_delete_missing_user(user_service, admin):
    assert await user_service.delete_user(9999, admin.id, True) is False


async def test_delete_user_cascades_to_inspections(user_service, inspection_service, session, farmer, admin):
    await inspection_service.create_inspection(
        CreateInspectionDTO(
            plant_name="Tomato",
            inspection_date="2024-05-01T10:00:00Z",
            country="Brazil",
            state="SP",
            city="Campinas",
            category="Vegetable",
        ),
        farmer.id,
    )

    assert await user_service.delete_user(farmer.id, admin.id, True) is True

    remaining = await session.scalar(
        select(func.count()).select_from(InspectionModel).where(InspectionModel.user_id == farmer.id)
    )
    assert remaining == 0
