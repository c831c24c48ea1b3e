"""Error taxonomy shared by the record store client and the form model."""

from typing import Any


class MedAssessError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MedAssessError):
    """Requested record id is absent from the store."""

    def __init__(self, entity: str, record_id: Any) -> None:
        super().__init__(f"{entity.capitalize()} not found")
        self.entity = entity
        self.record_id = record_id


class ValidationError(MedAssessError):
    """Input rejected locally, before any store call."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class ServiceError(MedAssessError):
    """The store call failed, or the store rejected the submitted records."""

    pass


class PartialWriteFailure(ServiceError):
    """Batch write where some records were stored and at least one was rejected.

    ``saved`` holds the records the store accepted; ``failures`` holds the
    store's messages for the rejected ones. Callers that only care about
    "did it work" can treat this as a ServiceError.
    """

    def __init__(self, saved: list[Any], failures: list[str]) -> None:
        super().__init__(
            f"{len(failures)} of {len(saved) + len(failures)} records were rejected"
        )
        self.saved = saved
        self.failures = failures


class FormStateError(MedAssessError):
    """Operation not allowed in the form's current state."""

    pass
