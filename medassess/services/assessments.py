"""Record store client for patient assessments."""

from datetime import datetime
from typing import Any

from medassess.core.exceptions import ServiceError
from medassess.schemas.assessment import Assessment
from medassess.services.base import RecordClient
from medassess.services.codec import encode_symptoms
from medassess.services.filtering import sort_by
from medassess.services.normalize import normalize_assessment
from medassess.utils.time import format_datetime, utc_now


def to_record(
    draft: Assessment,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
) -> dict[str, Any]:
    """Serialize a draft into a raw store record.

    The id is never included; the store assigns it. Timestamps are only
    written when given.
    """
    record: dict[str, Any] = {
        "patient_id": draft.patient_id,
        "chief_complaint": draft.chief_complaint,
        "symptoms": encode_symptoms(draft.symptoms),
        "status": draft.status.value,
    }
    if created_at is not None:
        record["created_at"] = format_datetime(created_at)
    if updated_at is not None:
        record["updated_at"] = format_datetime(updated_at)
    return record


class AssessmentService(RecordClient[Assessment]):
    """Typed CRUD over the assessment table.

    Constructed per session with an injected record service and notifier.
    """

    table = "assessment"
    entity = "assessment"

    def normalize(self, raw: dict[str, Any]) -> Assessment:
        return normalize_assessment(raw)

    async def list_assessments(self) -> list[Assessment]:
        """Fetch all assessments, newest first."""
        assessments = await self._fetch_all("list", "Failed to load assessments")
        return sort_by(assessments, "created_at", descending=True)

    async def get_assessment(self, assessment_id: int) -> Assessment:
        """Fetch one assessment.

        Raises:
            NotFoundError: No assessment has this id
            ServiceError: The fetch failed
        """
        return await self._fetch_one(assessment_id, "get", "Failed to load assessment")

    async def create_assessment(self, draft: Assessment) -> Assessment:
        """Store a new assessment; created_at and updated_at are the submission instant.

        Raises:
            ServiceError: The store call failed or rejected the record
        """
        stored = await self.create_assessments([draft])
        if not stored:
            self._fail(
                ServiceError("Store did not return the created record"),
                "create",
                "Failed to create assessment",
            )
        return stored[0]

    async def create_assessments(self, drafts: list[Assessment]) -> list[Assessment]:
        """Store several assessments in one call.

        Raises:
            ServiceError: The call failed or every record was rejected
            PartialWriteFailure: Some records were stored and some rejected
        """
        now = utc_now()
        message = "Failed to create assessment"
        success_message = "Assessment created successfully"
        records = [to_record(draft, created_at=now, updated_at=now) for draft in drafts]
        results = await self._call(
            lambda: self.records.create_records(self.table, records),
            "create",
            message,
        )
        succeeded = self._check_write(
            results, "create", message, success_message=success_message
        )

        created = [self.normalize(result.record) for result in succeeded if result.record]
        for assessment in created:
            self._succeed("create", success_message, assessment.id)
        return created

    async def update_assessment(self, assessment_id: int, draft: Assessment) -> Assessment:
        """Overwrite an assessment's editable fields and refresh updated_at.

        The stored created_at is preserved.

        Raises:
            NotFoundError: The store has no assessment with this id
            ServiceError: The store call failed or rejected the record
        """
        message = "Failed to update assessment"
        record = to_record(draft, updated_at=utc_now())
        record["id"] = assessment_id
        results = await self._call(
            lambda: self.records.update_records(self.table, [record]),
            "update",
            message,
            assessment_id,
        )
        succeeded = self._check_write(results, "update", message, assessment_id)

        if succeeded and succeeded[0].record:
            updated = self.normalize(succeeded[0].record)
        else:
            updated = await self.get_assessment(assessment_id)
        self._succeed("update", "Assessment updated successfully", assessment_id)
        return updated

    async def delete_assessment(self, assessment_id: int) -> bool:
        """Delete an assessment.

        Returns:
            True only when the store confirms the deletion

        Raises:
            NotFoundError: The store has no assessment with this id
            ServiceError: The store call failed
        """
        message = "Failed to delete assessment"
        results = await self._call(
            lambda: self.records.delete_records(self.table, [assessment_id]),
            "delete",
            message,
            assessment_id,
        )
        succeeded = self._check_write(results, "delete", message, assessment_id)

        confirmed = any(result.record_id == assessment_id for result in succeeded)
        if confirmed:
            self._succeed("delete", "Assessment deleted successfully", assessment_id)
        return confirmed
