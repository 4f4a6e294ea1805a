# 📄 File: agroscan/modules/inspection_management/domain/models/inspection.py
# 🧭 Purpose (Layman Explanation):
# Lists the fixed choices used on inspection records: how far along an inspection is,
# whether it was a plant or a vegetable, and where an analysis result stands.
# 🧪 Purpose (Technical Summary):
# String enumerations for inspection status, inspection category and analysis status,
# persisted by value and serialized by value in API payloads.
# 🔗 Dependencies:
# enum
# 🔄 Connected Modules / Calls From:
# Inspection ORM models, inspection DTOs, inspection services

from enum import Enum


class InspectionStatus(str, Enum):
    """Progress of an inspection"""
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class InspectionCategory(str, Enum):
    """What kind of crop was inspected"""
    PLANT = "Plant"
    VEGETABLE = "Vegetable"


class AnalysisStatus(str, Enum):
    """Progress of an analysis attached to an inspection"""
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"
