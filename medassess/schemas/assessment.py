"""Assessment and symptom schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class AssessmentStatus(str, Enum):
    """Assessment workflow status.

    DRAFT and IN_PROGRESS are derived from symptom severities on submit.
    COMPLETE is only ever set externally.
    """

    DRAFT = "Draft"
    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"


class DurationUnit(str, Enum):
    """Unit for a symptom's duration."""

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


class Onset(str, Enum):
    """How a symptom started."""

    SUDDEN = "sudden"
    GRADUAL = "gradual"
    INTERMITTENT = "intermittent"
    CONSTANT = "constant"


SEVERITY_MIN = 0
SEVERITY_MAX = 5

SEVERITY_LABELS = {
    0: "None",
    1: "Mild",
    2: "Moderate",
    3: "Significant",
    4: "Severe",
    5: "Critical",
}


class Symptom(BaseModel):
    """A single symptom entry embedded in an assessment.

    ``id`` is the 1-based position in the symptom catalog.
    """

    id: int = Field(..., ge=1)
    name: str
    category: str
    severity: int = Field(0, ge=SEVERITY_MIN, le=SEVERITY_MAX)
    duration: float | None = Field(None, gt=0)
    duration_unit: DurationUnit = DurationUnit.DAYS
    onset: Onset | None = None
    notes: str = ""

    @property
    def is_present(self) -> bool:
        return self.severity > 0

    @property
    def severity_label(self) -> str:
        return SEVERITY_LABELS[self.severity]


class Assessment(BaseModel):
    """A patient assessment, either a draft or a stored record."""

    id: int | None = None
    patient_id: str = ""
    chief_complaint: str = ""
    symptoms: list[Symptom] = Field(default_factory=list)
    status: AssessmentStatus = AssessmentStatus.DRAFT
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SeveritySummary(BaseModel):
    """Counts of present symptoms by severity band."""

    mild: int = 0
    moderate: int = 0
    severe: int = 0
    total_present: int = 0


def compute_status(symptoms: list[Symptom]) -> AssessmentStatus:
    """Derive the status of a draft from its symptom severities.

    Never yields COMPLETE.
    """
    if any(symptom.severity > 0 for symptom in symptoms):
        return AssessmentStatus.IN_PROGRESS
    return AssessmentStatus.DRAFT


def summarize_severity(symptoms: list[Symptom]) -> SeveritySummary:
    """Count mild (1-2), moderate (3) and severe (4-5) symptoms."""
    summary = SeveritySummary()
    for symptom in symptoms:
        if 1 <= symptom.severity <= 2:
            summary.mild += 1
        elif symptom.severity == 3:
            summary.moderate += 1
        elif symptom.severity >= 4:
            summary.severe += 1
        if symptom.severity > 0:
            summary.total_present += 1
    return summary


class SymptomUpdate(BaseModel):
    """Editable symptom fields in a write request."""

    id: int = Field(..., ge=1)
    severity: int = Field(0, ge=SEVERITY_MIN, le=SEVERITY_MAX)
    duration: float | None = Field(None, gt=0)
    duration_unit: DurationUnit = DurationUnit.DAYS
    onset: Onset | None = None
    notes: str = ""


class AssessmentWrite(BaseModel):
    """Schema for creating or updating an assessment."""

    patient_id: str = ""
    chief_complaint: str = ""
    symptoms: list[SymptomUpdate] = Field(default_factory=list)


class AssessmentRead(Assessment):
    """Schema for reading a stored assessment."""

    id: int
    created_at: datetime
    updated_at: datetime
    severity_summary: SeveritySummary


class AssessmentDraftRead(BaseModel):
    """Blank draft returned to seed a new assessment form."""

    draft: Assessment
    status: AssessmentStatus
    groups: dict[str, list[int]]
    severity_labels: dict[int, str]
