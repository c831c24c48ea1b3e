"""Normalization of raw store records into typed schemas.

Each function enumerates the record's fields and applies the documented
default for anything missing or null.
"""

import logging
from typing import Any

from medassess.core.exceptions import ServiceError
from medassess.schemas.assessment import Assessment, AssessmentStatus
from medassess.schemas.library import Protocol, Reference
from medassess.services.codec import decode_symptoms
from medassess.utils.time import coerce_datetime, utc_now

logger = logging.getLogger(__name__)


def _record_id(raw: dict[str, Any]) -> int:
    record_id = raw.get("id")
    if record_id is None:
        raise ServiceError("Store returned a record without an id")
    return int(record_id)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _status(value: Any) -> AssessmentStatus:
    if value is None or value == "":
        return AssessmentStatus.DRAFT
    try:
        return AssessmentStatus(value)
    except ValueError:
        logger.warning(f"Unknown assessment status {value!r}, treating as Draft")
        return AssessmentStatus.DRAFT


def normalize_assessment(raw: dict[str, Any]) -> Assessment:
    """Build an Assessment from a raw record.

    Defaults: status -> Draft, timestamps -> now, symptoms -> [],
    patient_id/chief_complaint -> "".
    """
    now = utc_now()
    return Assessment(
        id=_record_id(raw),
        patient_id=_text(raw.get("patient_id")),
        chief_complaint=_text(raw.get("chief_complaint")),
        symptoms=decode_symptoms(raw.get("symptoms")),
        status=_status(raw.get("status")),
        created_at=coerce_datetime(raw.get("created_at") or now),
        updated_at=coerce_datetime(raw.get("updated_at") or now),
    )


def normalize_protocol(raw: dict[str, Any]) -> Protocol:
    """Build a Protocol from a raw record. Missing category is the "" bucket."""
    return Protocol(
        id=_record_id(raw),
        title=_text(raw.get("title")),
        category=_text(raw.get("category")),
        content=_text(raw.get("content")),
        last_updated=coerce_datetime(raw.get("last_updated")),
    )


def normalize_reference(raw: dict[str, Any]) -> Reference:
    """Build a Reference from a raw record. Missing type is the "" bucket."""
    usage = raw.get("usage")
    return Reference(
        id=_record_id(raw),
        title=_text(raw.get("title")),
        type=_text(raw.get("type")),
        description=_text(raw.get("description")),
        usage=usage if usage else None,
    )
