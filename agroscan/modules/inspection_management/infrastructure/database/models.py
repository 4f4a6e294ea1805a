# 📄 File: agroscan/modules/inspection_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how inspections, their photos and their analysis results are stored
# in the database, and makes sure removing an inspection also removes its photos and results.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for inspections, inspection_images and inspection_analyses with
# ON DELETE CASCADE foreign keys, a range check on confidence_score, and eagerly
# (selectin) loaded child collections so async code never lazy-loads.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - agroscan.shared.config.database (declarative base)
# - agroscan.modules.inspection_management.domain.models (enums)
#
# 🔄 Connected Modules / Calls From:
# - inspection repository implementations
# - inspection services (entity construction)
# - migrations (schema generation)

"""
SQLAlchemy Models for Inspection Management

Models:
- InspectionModel: A plant or vegetable inspection owned by one user
- InspectionImageModel: Path or URL of a photo attached to an inspection
- InspectionAnalysisModel: Stored assessment (status, confidence, treatment)

Child rows are removed by the database when their inspection is deleted;
relationships use passive_deletes so the ORM defers to the foreign key.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from agroscan.modules.inspection_management.domain.models.inspection import (
    AnalysisStatus,
    InspectionCategory,
    InspectionStatus,
)
from agroscan.shared.config.database import DatabaseBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enum_column(enum_cls, name: str) -> Enum:
    """Store enums by value as plain strings, portable across SQLite and PostgreSQL."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda members: [m.value for m in members],
    )


# =============================================================================
# INSPECTION IMAGE MODEL
# =============================================================================

class InspectionImageModel(DatabaseBase):
    """
    SQLAlchemy model for images attached to an inspection.
    """
    __tablename__ = "inspection_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inspection_id = Column(
        Integer,
        ForeignKey("inspections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Parent inspection"
    )
    image = Column(String(500), nullable=False, comment="Stored image path or URL")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    inspection = relationship("InspectionModel", back_populates="images")

    def __repr__(self) -> str:
        return f"<InspectionImageModel(id={self.id}, inspection_id={self.inspection_id})>"


# =============================================================================
# INSPECTION ANALYSIS MODEL
# =============================================================================

class InspectionAnalysisModel(DatabaseBase):
    """
    SQLAlchemy model for analysis results attached to an inspection.

    Results are recorded here, not computed; an external process
    fills them in.
    """
    __tablename__ = "inspection_analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inspection_id = Column(
        Integer,
        ForeignKey("inspections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Parent inspection"
    )
    status = Column(
        _enum_column(AnalysisStatus, "analysis_status"),
        nullable=False,
        default=AnalysisStatus.PENDING
    )
    confidence_score = Column(Float, nullable=False, default=0.0, comment="Confidence between 0 and 1")
    description = Column(String(2000), nullable=True)
    treatment_recommendation = Column(String(2000), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    inspection = relationship("InspectionModel", back_populates="analyses")

    __table_args__ = (
        CheckConstraint(
            "confidence_score >= 0 AND confidence_score <= 1",
            name="confidence_score_range",
        ),
        Index("ix_inspection_analyses_inspection_created", "inspection_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<InspectionAnalysisModel(id={self.id}, inspection_id={self.inspection_id}, "
            f"status={self.status})>"
        )


# =============================================================================
# INSPECTION MODEL
# =============================================================================

class InspectionModel(DatabaseBase):
    """
    SQLAlchemy model for plant inspections.
    """
    __tablename__ = "inspections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_name = Column(String(200), nullable=False, comment="Inspected plant")
    inspection_date = Column(DateTime(timezone=True), nullable=False, comment="When the inspection took place")
    country = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    notes = Column(String(1000), nullable=True)
    status = Column(
        _enum_column(InspectionStatus, "inspection_status"),
        nullable=False,
        default=InspectionStatus.PENDING
    )
    category = Column(
        _enum_column(InspectionCategory, "inspection_category"),
        nullable=False
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user"
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    user = relationship("UserModel", back_populates="inspections")
    images = relationship(
        InspectionImageModel,
        back_populates="inspection",
        cascade="all",
        passive_deletes=True,
        lazy="selectin",
        order_by=(InspectionImageModel.created_at, InspectionImageModel.id),
    )
    analyses = relationship(
        InspectionAnalysisModel,
        back_populates="inspection",
        cascade="all",
        passive_deletes=True,
        lazy="selectin",
        order_by=(InspectionAnalysisModel.created_at.desc(), InspectionAnalysisModel.id.desc()),
    )

    def __repr__(self) -> str:
        return f"<InspectionModel(id={self.id}, plant_name={self.plant_name}, user_id={self.user_id})>"
