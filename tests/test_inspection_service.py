"""
Tests for inspection ownership and visibility rules.
"""

from datetime import datetime, timezone

import pytest

from agroscan.modules.inspection_management.application.dto.inspection_dto import (
    CreateInspectionDTO,
    UpdateInspectionDTO,
)
from agroscan.modules.inspection_management.domain.models.inspection import (
    InspectionCategory,
    InspectionStatus,
)
from agroscan.shared.core.exceptions import AuthorizationError


def inspection_data(plant_name="Tomato", **overrides):
    data = {
        "plant_name": plant_name,
        "inspection_date": datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        "country": "Brazil",
        "state": "SP",
        "city": "Campinas",
        "notes": "Leaves turning yellow",
        "status": InspectionStatus.PENDING,
        "category": InspectionCategory.VEGETABLE,
    }
    data.update(overrides)
    return data


async def test_create_assigns_caller_as_owner(inspection_service, farmer):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    assert created.user_id == farmer.id
    assert created.plant_name == "Tomato"
    assert created.status == InspectionStatus.PENDING
    assert created.category == InspectionCategory.VEGETABLE
    assert created.images == []
    assert created.created_at == created.updated_at


async def test_listing_is_owner_scoped(inspection_service, farmer, other_farmer):
    mine = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)
    await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data("Basil")), other_farmer.id)

    listed = await inspection_service.list_inspections(farmer.id, is_admin=False)

    assert [i.id for i in listed] == [mine.id]


async def test_admin_lists_everything(inspection_service, farmer, other_farmer, admin):
    await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)
    await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data("Basil")), other_farmer.id)

    listed = await inspection_service.list_inspections(admin.id, is_admin=True)

    assert {i.plant_name for i in listed} == {"Tomato", "Basil"}


async def test_get_missing_returns_none(inspection_service, farmer):
    assert await inspection_service.get_inspection_by_id(9999, farmer.id, False) is None


async def test_get_other_farmers_inspection_is_rejected(inspection_service, farmer, other_farmer, admin):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    with pytest.raises(AuthorizationError):
        await inspection_service.get_inspection_by_id(created.id, other_farmer.id, False)

    assert (await inspection_service.get_inspection_by_id(created.id, admin.id, True)).id == created.id


async def test_update_by_owner(inspection_service, farmer):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    updated = await inspection_service.update_inspection(
        created.id,
        UpdateInspectionDTO(**inspection_data(status=InspectionStatus.COMPLETED)),
        farmer.id,
        False,
    )

    assert updated.status == InspectionStatus.COMPLETED
    assert updated.user_id == farmer.id


async def test_update_by_other_farmer_is_rejected(inspection_service, farmer, other_farmer):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    with pytest.raises(AuthorizationError):
        await inspection_service.update_inspection(
            created.id, UpdateInspectionDTO(**inspection_data("Changed")), other_farmer.id, False
        )

    unchanged = await inspection_service.get_inspection_by_id(created.id, farmer.id, False)
    assert unchanged.plant_name == "Tomato"


async def test_admin_can_update_any(inspection_service, farmer, admin):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    updated = await inspection_service.update_inspection(
        created.id, UpdateInspectionDTO(**inspection_data("Pepper")), admin.id, True
    )

    assert updated.plant_name == "Pepper"
    assert updated.user_id == farmer.id


async def test_update_missing_returns_none(inspection_service, farmer):
    result = await inspection_service.update_inspection(
        9999, UpdateInspectionDTO(**inspection_data()), farmer.id, False
    )
    assert result is None


async def test_delete_rules(inspection_service, farmer, other_farmer):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    with pytest.raises(AuthorizationError):
        await inspection_service.delete_inspection(created.id, other_farmer.id, False)

    assert await inspection_service.delete_inspection(created.id, farmer.id, False) is True
    assert await inspection_service.get_inspection_by_id(created.id, farmer.id, False) is None
    assert await inspection_service.delete_inspection(created.id, farmer.id, False) is False


async def test_admin_can_delete_any(inspection_service, farmer, admin):
    created = await inspection_service.create_inspection(CreateInspectionDTO(**inspection_data()), farmer.id)

    assert await inspection_service.delete_inspection(created.id, admin.id, True) is True
