"""Pydantic schemas for records, requests and responses."""

from medassess.schemas.assessment import (
    SEVERITY_LABELS,
    Assessment,
    AssessmentDraftRead,
    AssessmentRead,
    AssessmentStatus,
    AssessmentWrite,
    DurationUnit,
    Onset,
    SeveritySummary,
    Symptom,
    SymptomUpdate,
    compute_status,
    summarize_severity,
)
from medassess.schemas.library import Protocol, Reference, ReferenceType
from medassess.schemas.listing import FilteredList
from medassess.schemas.notification import Notification, NotificationLevel

__all__ = [
    "SEVERITY_LABELS",
    "Assessment",
    "AssessmentDraftRead",
    "AssessmentRead",
    "AssessmentStatus",
    "AssessmentWrite",
    "DurationUnit",
    "Onset",
    "SeveritySummary",
    "Symptom",
    "SymptomUpdate",
    "compute_status",
    "summarize_severity",
    "Protocol",
    "Reference",
    "ReferenceType",
    "FilteredList",
    "Notification",
    "NotificationLevel",
]
