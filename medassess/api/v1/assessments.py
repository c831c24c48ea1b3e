"""Assessment endpoints.

Writes go through AssessmentForm so the API applies the same validation
and status rules as the form view.
"""

from fastapi import APIRouter, Query, status

from medassess.api.deps import Assessments
from medassess.core.exceptions import ServiceError
from medassess.fixtures.symptom_catalog import group_by_category
from medassess.schemas.assessment import (
    SEVERITY_LABELS,
    Assessment,
    AssessmentDraftRead,
    AssessmentRead,
    AssessmentWrite,
    summarize_severity,
)
from medassess.schemas.listing import FilteredList
from medassess.services.assessment_form import (
    AssessmentForm,
    FormState,
    new_draft,
    validate_draft,
)
from medassess.services.filtering import ALL, ASSESSMENT_FILTER

router = APIRouter()


def to_read(assessment: Assessment) -> AssessmentRead:
    return AssessmentRead(
        **assessment.model_dump(),
        severity_summary=summarize_severity(assessment.symptoms),
    )


def apply_write(form: AssessmentForm, body: AssessmentWrite) -> None:
    """Copy a write request onto a READY form.

    Only the symptom fields present in the request are changed.
    """
    form.set_field("patient_id", body.patient_id)
    form.set_field("chief_complaint", body.chief_complaint)
    for update in body.symptoms:
        form.update_symptom(update.id, **update.model_dump(exclude={"id"}, exclude_unset=True))


@router.get("", response_model=FilteredList[AssessmentRead])
async def list_assessments(
    service: Assessments,
    q: str = Query("", description="Matches patient ID or chief complaint"),
    status_filter: str = Query(ALL, alias="status"),
) -> FilteredList[AssessmentRead]:
    """List assessments newest first, filtered by query and status."""
    assessments = await service.list_assessments()
    visible = ASSESSMENT_FILTER.apply(assessments, q, status_filter)
    return FilteredList[AssessmentRead](
        items=[to_read(assessment) for assessment in visible],
        total=len(assessments),
        options=ASSESSMENT_FILTER.options(assessments),
        counts=ASSESSMENT_FILTER.counts(assessments),
    )


@router.get("/draft", response_model=AssessmentDraftRead)
async def get_blank_draft() -> AssessmentDraftRead:
    """Blank draft seeded with the symptom catalog, for a new assessment form."""
    draft = new_draft()
    return AssessmentDraftRead(
        draft=draft,
        status=draft.status,
        groups={
            category: [symptom.id for symptom in symptoms]
            for category, symptoms in group_by_category(draft.symptoms).items()
        },
        severity_labels=SEVERITY_LABELS,
    )


@router.get("/{assessment_id}", response_model=AssessmentRead)
async def get_assessment(assessment_id: int, service: Assessments) -> AssessmentRead:
    return to_read(await service.get_assessment(assessment_id))


@router.post("", response_model=AssessmentRead, status_code=status.HTTP_201_CREATED)
async def create_assessment(body: AssessmentWrite, service: Assessments) -> AssessmentRead:
    """Create an assessment from a new form draft."""
    form = AssessmentForm(service)
    apply_write(form, body)
    return to_read(await form.submit())


@router.put("/{assessment_id}", response_model=AssessmentRead)
async def update_assessment(
    assessment_id: int,
    body: AssessmentWrite,
    service: Assessments,
) -> AssessmentRead:
    """Load an assessment into a form, apply the changes and save."""
    form = AssessmentForm(service, assessment_id)
    await form.load()
    if form.state == FormState.LOAD_FAILED:
        raise form.error
    apply_write(form, body)
    return to_read(await form.submit())


@router.delete("/{assessment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assessment(assessment_id: int, service: Assessments) -> None:
    if not await service.delete_assessment(assessment_id):
        raise ServiceError("Deletion was not confirmed by the record store")


@router.post(
    "/batch",
    response_model=list[AssessmentRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_assessments(
    body: list[AssessmentWrite],
    service: Assessments,
) -> list[AssessmentRead]:
    """Create several assessments in one store call.

    Every draft is validated before anything is written. If the store
    rejects some records the response is 207 with the ids that were saved.
    """
    drafts: list[Assessment] = []
    for write in body:
        form = AssessmentForm(service)
        apply_write(form, write)
        validate_draft(form.draft)
        drafts.append(form.draft.model_copy(update={"status": form.status}))
    return [to_read(assessment) for assessment in await service.create_assessments(drafts)]
