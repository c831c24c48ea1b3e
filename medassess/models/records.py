"""Record tables for assessments, protocols and references."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from medassess.db.base import Base, TimestampMixin
from medassess.utils.time import utc_now


class AssessmentRecord(Base, TimestampMixin):
    """Stored patient assessment.

    Symptoms are kept as an encoded JSON text blob; the client decodes
    them into Symptom values at the boundary.
    """

    __tablename__ = "assessment"

    patient_id: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    chief_complaint: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    symptoms: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    status: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<AssessmentRecord {self.id} patient={self.patient_id}>"


class ProtocolRecord(Base):
    """Clinical protocol, read-only for the application."""

    __tablename__ = "protocol"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    category: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        index=True,
    )
    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ProtocolRecord {self.id} {self.title!r}>"


class ReferenceRecord(Base):
    """Medical reference tool, read-only for the application."""

    __tablename__ = "reference"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    type: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    usage: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ReferenceRecord {self.id} {self.title!r}>"


TABLE_MODELS: dict[str, type[Base]] = {
    "assessment": AssessmentRecord,
    "protocol": ProtocolRecord,
    "reference": ReferenceRecord,
}
