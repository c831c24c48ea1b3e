"""Assessment form model: draft state, reducers and submission.

The reducers are pure functions returning a new draft. AssessmentForm
wraps them in a small state machine:

    new form      -> READY
    editing form  -> LOADING -> READY | LOAD_FAILED (retry -> LOADING)
    READY         -> SUBMITTING -> SUBMITTED | READY (store failure)

Once torn down, late results of an in-flight load or submit no longer
change the form.
"""

from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from medassess.core.exceptions import (
    FormStateError,
    MedAssessError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from medassess.fixtures.symptom_catalog import blank_symptoms, group_by_category
from medassess.schemas.assessment import Assessment, AssessmentStatus, Symptom, compute_status
from medassess.services.assessments import AssessmentService

EDITABLE_FIELDS = ("patient_id", "chief_complaint")
EDITABLE_SYMPTOM_FIELDS = ("severity", "duration", "duration_unit", "onset", "notes")
REQUIRED_FIELDS = ("patient_id", "chief_complaint")


class FormState(str, Enum):
    """Assessment form lifecycle state."""

    LOADING = "loading"
    LOAD_FAILED = "load_failed"
    READY = "ready"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


def new_draft() -> Assessment:
    """A blank draft seeded with the full symptom catalog."""
    return Assessment(symptoms=blank_symptoms())


def apply_field_change(draft: Assessment, field: str, value: str) -> Assessment:
    """Set a top-level text field on a draft.

    Raises:
        ValidationError: If the field is not user-editable
    """
    if field not in EDITABLE_FIELDS:
        raise ValidationError(f"Field '{field}' is not editable", [field])
    return draft.model_copy(update={field: value})


def apply_symptom_change(draft: Assessment, symptom_id: int, **changes: Any) -> Assessment:
    """Update editable sub-fields of the symptom with the given id.

    Symptom name and category are fixed by the catalog and cannot change.

    Raises:
        ValidationError: Unknown symptom id, non-editable field, or an
            out-of-range value
    """
    not_editable = sorted(set(changes) - set(EDITABLE_SYMPTOM_FIELDS))
    if not_editable:
        raise ValidationError(
            f"Symptom fields not editable: {', '.join(not_editable)}", not_editable
        )

    symptoms: list[Symptom] = []
    found = False
    for symptom in draft.symptoms:
        if symptom.id == symptom_id:
            try:
                symptom = Symptom.model_validate({**symptom.model_dump(), **changes})
            except PydanticValidationError as exc:
                fields = [str(error["loc"][0]) for error in exc.errors() if error["loc"]]
                raise ValidationError(
                    f"Invalid value for symptom {symptom_id}", fields
                ) from exc
            found = True
        symptoms.append(symptom)

    if not found:
        raise ValidationError(f"Unknown symptom id {symptom_id}", ["symptoms"])

    return draft.model_copy(update={"symptoms": symptoms})


def validate_draft(draft: Assessment) -> None:
    """Check the required top-level fields are non-empty after trimming.

    Raises:
        ValidationError: Listing the missing fields
    """
    missing = [field for field in REQUIRED_FIELDS if not getattr(draft, field).strip()]
    if missing:
        raise ValidationError("Please fill in all required fields", missing)


class AssessmentForm:
    """Draft assessment owned by a single form view."""

    def __init__(self, service: AssessmentService, assessment_id: int | None = None) -> None:
        self.service = service
        self.assessment_id = assessment_id
        self.error: MedAssessError | None = None
        self.saved: Assessment | None = None
        self._closed = False

        if assessment_id is None:
            self.draft = new_draft()
            self.state = FormState.READY
        else:
            self.draft = Assessment()
            self.state = FormState.LOADING

    @property
    def is_editing(self) -> bool:
        return self.assessment_id is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def status(self) -> AssessmentStatus:
        """Status the draft would be saved with."""
        return compute_status(self.draft.symptoms)

    def grouped_symptoms(self) -> dict[str, list[Symptom]]:
        return group_by_category(self.draft.symptoms)

    async def load(self) -> Assessment | None:
        """Load the assessment being edited.

        On failure the form moves to LOAD_FAILED and exposes ``error``;
        the error is not re-raised.
        """
        if not self.is_editing:
            raise FormStateError("A new assessment has nothing to load")
        if self.state not in (FormState.LOADING, FormState.LOAD_FAILED):
            raise FormStateError(f"Cannot load while {self.state.value}")

        self.state = FormState.LOADING
        self.error = None
        try:
            assessment = await self.service.get_assessment(self.assessment_id)
        except (NotFoundError, ServiceError) as exc:
            if not self._closed:
                self.error = exc
                self.state = FormState.LOAD_FAILED
            return None

        if self._closed:
            return None

        self.draft = assessment
        self.state = FormState.READY
        return assessment

    async def retry(self) -> Assessment | None:
        """Re-attempt a failed load of the same assessment."""
        if self.state != FormState.LOAD_FAILED:
            raise FormStateError("Only a failed load can be retried")
        return await self.load()

    def set_field(self, field: str, value: str) -> None:
        self._require_ready()
        self.draft = apply_field_change(self.draft, field, value)

    def update_symptom(self, symptom_id: int, **changes: Any) -> None:
        self._require_ready()
        self.draft = apply_symptom_change(self.draft, symptom_id, **changes)

    def set_severity(self, symptom_id: int, severity: int) -> None:
        self.update_symptom(symptom_id, severity=severity)

    async def submit(self) -> Assessment:
        """Validate, compute status and hand the draft to the store.

        Raises:
            FormStateError: The form is not READY (e.g. a save is outstanding)
            ValidationError: A required field is empty; no store call is made
            NotFoundError, ServiceError: The store call failed; the form
                returns to READY with the draft intact
        """
        if self.state == FormState.SUBMITTING:
            raise FormStateError("A save is already in progress")
        self._require_ready()

        try:
            validate_draft(self.draft)
        except ValidationError as exc:
            self.error = exc
            self.service.notifier.error(exc.message, action="validate", entity="assessment")
            raise

        self.state = FormState.SUBMITTING
        self.error = None
        payload = self.draft.model_copy(update={"status": self.status})

        try:
            if self.is_editing:
                saved = await self.service.update_assessment(self.assessment_id, payload)
            else:
                saved = await self.service.create_assessment(payload)
        except (NotFoundError, ServiceError) as exc:
            if not self._closed:
                self.error = exc
                self.state = FormState.READY
            raise

        if not self._closed:
            self.saved = saved
            self.draft = saved
            self.state = FormState.SUBMITTED
        return saved

    def teardown(self) -> None:
        """Detach the form; late results are ignored from now on."""
        self._closed = True

    def _require_ready(self) -> None:
        if self._closed:
            raise FormStateError("Form has been closed")
        if self.state != FormState.READY:
            raise FormStateError(f"Form is not editable while {self.state.value}")
