"""Transport encoding for an assessment's symptom sequence.

The record service stores symptoms as a JSON text blob. Encoding keeps
catalog order; decoding restores the same sequence.
"""

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from medassess.core.exceptions import ServiceError
from medassess.schemas.assessment import Symptom


def encode_symptoms(symptoms: list[Symptom]) -> str:
    """Encode symptoms as a JSON array of objects."""
    return json.dumps([symptom.model_dump(mode="json") for symptom in symptoms])


def decode_symptoms(blob: str | list[dict[str, Any]] | None) -> list[Symptom]:
    """Decode a stored symptom blob.

    Args:
        blob: JSON text, an already-decoded list, or None/"" for no symptoms

    Returns:
        Symptoms in stored order

    Raises:
        ServiceError: If the blob is not a valid symptom array
    """
    if blob is None or blob == "":
        return []

    data: Any = blob
    if isinstance(blob, str):
        try:
            data = json.loads(blob)
        except json.JSONDecodeError as exc:
            raise ServiceError("Stored symptoms are not valid JSON") from exc

    if not isinstance(data, list):
        raise ServiceError("Stored symptoms must be a list")

    try:
        return [Symptom.model_validate(item) for item in data]
    except PydanticValidationError as exc:
        raise ServiceError(f"Stored symptoms are malformed: {exc.error_count()} errors") from exc
