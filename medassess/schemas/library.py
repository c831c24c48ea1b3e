"""Protocol and reference schemas (read-only library content)."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ReferenceType(str, Enum):
    """Known reference tool types. Other strings are allowed on records."""

    CALCULATOR = "Calculator"
    DRUG_REFERENCE = "Drug Reference"
    GUIDELINES = "Guidelines"
    DIAGNOSTIC_TOOL = "Diagnostic Tool"


class Protocol(BaseModel):
    """A clinical protocol."""

    id: int
    title: str
    category: str = ""
    content: str = ""
    last_updated: datetime


class Reference(BaseModel):
    """A medical reference tool."""

    id: int
    title: str
    type: str = ""
    description: str = ""
    usage: str | None = None
