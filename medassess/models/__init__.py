"""ORM tables backing the SQL record service."""

from medassess.models.records import (
    AssessmentRecord,
    ProtocolRecord,
    ReferenceRecord,
    TABLE_MODELS,
)

__all__ = ["AssessmentRecord", "ProtocolRecord", "ReferenceRecord", "TABLE_MODELS"]
