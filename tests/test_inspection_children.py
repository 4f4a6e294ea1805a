"""
Tests for inspection images and analyses: parent checks, ownership,
ordering, cascade removal and stored files.
"""

import io
from datetime import datetime, timezone

import pytest
from PIL import Image
from sqlalchemy import func, select

from agroscan.modules.inspection_management.application.dto.inspection_analysis_dto import (
    CreateInspectionAnalysisDTO,
    UpdateInspectionAnalysisDTO,
)
from agroscan.modules.inspection_management.application.dto.inspection_dto import CreateInspectionDTO
from agroscan.modules.inspection_management.application.dto.inspection_image_dto import (
    CreateInspectionImageDTO,
)
from agroscan.modules.inspection_management.domain.models.inspection import AnalysisStatus
from agroscan.modules.inspection_management.domain.services.inspection_image_service import (
    InspectionImageService,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_image_repository_impl import (
    InspectionImageRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_repository_impl import (
    InspectionRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.models import (
    InspectionAnalysisModel,
    InspectionImageModel,
)
from agroscan.shared.core.exceptions import AuthorizationError, DatabaseError, InvalidReferenceError
from agroscan.shared.infrastructure.storage.file_manager import LocalFileStorage


async def count_rows(session, model, inspection_id) -> int:
    return await session.scalar(
        select(func.count()).select_from(model).where(model.inspection_id == inspection_id)
    )


@pytest.fixture
async def inspection(inspection_service, farmer):
    return await inspection_service.create_inspection(
        CreateInspectionDTO(
            plant_name="Tomato",
            inspection_date=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
            country="Brazil",
            state="SP",
            city="Campinas",
            category="Vegetable",
        ),
        farmer.id,
    )


def analysis_data(inspection_id, **overrides):
    data = {
        "inspection_id": inspection_id,
        "status": AnalysisStatus.COMPLETED,
        "confidence_score": 0.8,
        "description": "Early blight",
        "treatment_recommendation": "Copper fungicide",
    }
    data.update(overrides)
    return CreateInspectionAnalysisDTO(**data)


# =============================================================================
# IMAGES
# =============================================================================

async def test_add_image_to_own_inspection(image_service, inspection, farmer):
    image = await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="/uploads/inspections/leaf.jpg"),
        farmer.id,
        False,
    )

    assert image.inspection_id == inspection.id
    assert image.image == "/uploads/inspections/leaf.jpg"


async def test_image_for_missing_inspection_writes_nothing(image_service, session, farmer):
    with pytest.raises(InvalidReferenceError) as exc_info:
        await image_service.create_image(
            CreateInspectionImageDTO(inspection_id=9999, image="/uploads/inspections/leaf.jpg"),
            farmer.id,
            False,
        )

    assert exc_info.value.status_code == 409
    assert await session.scalar(select(func.count()).select_from(InspectionImageModel)) == 0


async def test_image_on_someone_elses_inspection_is_rejected(image_service, inspection, other_farmer):
    with pytest.raises(AuthorizationError):
        await image_service.create_image(
            CreateInspectionImageDTO(inspection_id=inspection.id, image="/uploads/inspections/leaf.jpg"),
            other_farmer.id,
            False,
        )


async def test_images_listed_oldest_first(image_service, inspection, farmer):
    first = await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="a.jpg"), farmer.id, False
    )
    second = await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="b.jpg"), farmer.id, False
    )

    images = await image_service.get_images_by_inspection_id(inspection.id, farmer.id, False)

    assert [i.id for i in images] == [first.id, second.id]


async def test_images_of_missing_inspection_is_none(image_service, farmer):
    assert await image_service.get_images_by_inspection_id(9999, farmer.id, False) is None


async def test_inspection_lists_image_paths(image_service, inspection_service, inspection, farmer):
    await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="a.jpg"), farmer.id, False
    )

    fetched = await inspection_service.get_inspection_by_id(inspection.id, farmer.id, False)

    assert fetched.images == ["a.jpg"]


async def test_delete_image(image_service, inspection, farmer, other_farmer):
    image = await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="a.jpg"), farmer.id, False
    )

    with pytest.raises(AuthorizationError):
        await image_service.delete_image(image.id, other_farmer.id, False)

    assert await image_service.delete_image(image.id, farmer.id, False) is True
    assert await image_service.get_image_by_id(image.id, farmer.id, False) is None
    assert await image_service.delete_image(image.id, farmer.id, False) is False


# =============================================================================
# ANALYSES
# =============================================================================

async def test_analysis_for_missing_inspection_writes_nothing(analysis_service, session, farmer):
    with pytest.raises(InvalidReferenceError):
        await analysis_service.create_analysis(analysis_data(9999), farmer.id, False)

    assert await session.scalar(select(func.count()).select_from(InspectionAnalysisModel)) == 0


async def test_analysis_on_someone_elses_inspection_is_rejected(analysis_service, inspection, other_farmer, admin):
    with pytest.raises(AuthorizationError):
        await analysis_service.create_analysis(analysis_data(inspection.id), other_farmer.id, False)

    created = await analysis_service.create_analysis(analysis_data(inspection.id), admin.id, True)
    assert created.inspection_id == inspection.id


async def test_latest_analysis_is_most_recent(analysis_service, session, inspection, farmer):
    t1 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    t2 = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    t3 = datetime(2024, 5, 1, 11, 0, tzinfo=timezone.utc)

    # Inserted out of order so ids do not follow creation time
    for created_at, description in ((t3, "third"), (t1, "first"), (t2, "second")):
        session.add(
            InspectionAnalysisModel(
                inspection_id=inspection.id,
                status=AnalysisStatus.COMPLETED,
                confidence_score=0.5,
                description=description,
                created_at=created_at,
                updated_at=created_at,
            )
        )
    await session.commit()

    latest = await analysis_service.get_latest_analysis_by_inspection_id(inspection.id, farmer.id, False)
    assert latest.description == "third"

    listed = await analysis_service.get_analyses_by_inspection_id(inspection.id, farmer.id, False)
    assert [a.description for a in listed] == ["third", "second", "first"]


async def test_latest_analysis_tie_goes_to_highest_id(analysis_service, session, inspection, farmer):
    same_time = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    for description in ("earlier", "later"):
        session.add(
            InspectionAnalysisModel(
                inspection_id=inspection.id,
                confidence_score=0.5,
                description=description,
                created_at=same_time,
                updated_at=same_time,
            )
        )
        await session.flush()
    await session.commit()

    latest = await analysis_service.get_latest_analysis_by_inspection_id(inspection.id, farmer.id, False)
    assert latest.description == "later"


async def test_latest_analysis_without_analyses(analysis_service, inspection, farmer):
    assert await analysis_service.get_latest_analysis_by_inspection_id(inspection.id, farmer.id, False) is None
    assert await analysis_service.get_latest_analysis_by_inspection_id(9999, farmer.id, False) is None


async def test_update_and_delete_analysis(analysis_service, inspection, farmer, other_farmer):
    created = await analysis_service.create_analysis(analysis_data(inspection.id), farmer.id, False)

    with pytest.raises(AuthorizationError):
        await analysis_service.update_analysis(
            created.id,
            UpdateInspectionAnalysisDTO(status=AnalysisStatus.FAILED, confidence_score=0.1),
            other_farmer.id,
            False,
        )

    updated = await analysis_service.update_analysis(
        created.id,
        UpdateInspectionAnalysisDTO(status=AnalysisStatus.FAILED, confidence_score=0.1),
        farmer.id,
        False,
    )
    assert updated.status == AnalysisStatus.FAILED
    assert updated.confidence_score == 0.1
    assert updated.description is None

    assert await analysis_service.delete_analysis(created.id, farmer.id, False) is True
    assert await analysis_service.get_analysis_by_id(created.id, farmer.id, False) is None


# =============================================================================
# CASCADE
# =============================================================================

async def test_deleting_inspection_removes_children(
    inspection_service, image_service, analysis_service, session, inspection, farmer
):
    await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="a.jpg"), farmer.id, False
    )
    await image_service.create_image(
        CreateInspectionImageDTO(inspection_id=inspection.id, image="b.jpg"), farmer.id, False
    )
    await analysis_service.create_analysis(analysis_data(inspection.id), farmer.id, False)

    assert await count_rows(session, InspectionImageModel, inspection.id) == 2
    assert await count_rows(session, InspectionAnalysisModel, inspection.id) == 1

    assert await inspection_service.delete_inspection(inspection.id, farmer.id, False) is True

    assert await count_rows(session, InspectionImageModel, inspection.id) == 0
    assert await count_rows(session, InspectionAnalysisModel, inspection.id) == 0


# =============================================================================
# STORED FILES
# =============================================================================

def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (16, 16), color=(60, 160, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def uploading_image_service(session, upload_dir):
    return InspectionImageService(
        image_repository=InspectionImageRepositoryImpl(session),
        inspection_repository=InspectionRepositoryImpl(session),
        file_storage=LocalFileStorage(root=str(upload_dir), url_prefix="/uploads"),
    )


def stored_file(upload_dir, url):
    return upload_dir / "inspections" / url.rsplit("/", 1)[1]


async def test_shared_file_kept_until_last_image_is_deleted(
    uploading_image_service, inspection_service, inspection, upload_dir, farmer
):
    uploaded = await uploading_image_service.upload_image(
        inspection.id, png_bytes(), "leaf.png", farmer.id, False
    )
    second_inspection = await inspection_service.create_inspection(
        CreateInspectionDTO(
            plant_name="Pepper",
            inspection_date=datetime(2024, 5, 2, 10, 0, tzinfo=timezone.utc),
            country="Brazil",
            state="SP",
            city="Campinas",
            category="Vegetable",
        ),
        farmer.id,
    )
    reused = await uploading_image_service.create_image(
        CreateInspectionImageDTO(inspection_id=second_inspection.id, image=uploaded.image),
        farmer.id,
        False,
    )

    assert await uploading_image_service.delete_image(uploaded.id, farmer.id, False) is True
    assert stored_file(upload_dir, uploaded.image).exists()

    assert await uploading_image_service.delete_image(reused.id, farmer.id, False) is True
    assert not stored_file(upload_dir, uploaded.image).exists()


async def test_upload_removes_file_when_record_is_not_saved(
    uploading_image_service, inspection, upload_dir, farmer, monkeypatch
):
    async def failing_commit():
        raise DatabaseError(operation="commit", table="inspection_images")

    monkeypatch.setattr(uploading_image_service.image_repository, "commit", failing_commit)

    with pytest.raises(DatabaseError):
        await uploading_image_service.upload_image(inspection.id, png_bytes(), "leaf.png", farmer.id, False)

    assert list((upload_dir / "inspections").iterdir()) == []
