"""Pytest configuration and fixtures."""

import os

# Configure settings before any medassess module reads them
os.environ["MEDASSESS_ENV"] = "test"
os.environ["MEDASSESS_INIT_DB_ON_STARTUP"] = "false"
os.environ["MEDASSESS_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import StaticPool  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

import medassess.models  # noqa: E402,F401
from medassess.api.deps import get_record_service  # noqa: E402
from medassess.db.base import Base  # noqa: E402
from medassess.fixtures.symptom_catalog import blank_symptoms  # noqa: E402
from medassess.main import app  # noqa: E402
from medassess.services.assessments import AssessmentService  # noqa: E402
from medassess.services.codec import encode_symptoms  # noqa: E402
from medassess.services.library import ProtocolService, ReferenceService  # noqa: E402
from medassess.services.notifications import NotificationFeed  # noqa: E402
from medassess.store.memory import InMemoryRecordService  # noqa: E402
from medassess.store.sql import SqlRecordService  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_assessment_record(record_id: int, **overrides: Any) -> dict[str, Any]:
    """Raw assessment record as the store would return it.

    Record N is created N days after BASE_TIME.
    """
    created = BASE_TIME + timedelta(days=record_id)
    symptoms = blank_symptoms()
    record = {
        "id": record_id,
        "patient_id": f"P{record_id:03d}",
        "chief_complaint": f"Complaint {record_id}",
        "symptoms": encode_symptoms(symptoms),
        "status": "Draft",
        "created_at": created.isoformat(),
        "updated_at": created.isoformat(),
    }
    record.update(overrides)
    return record


PROTOCOL_RECORDS = [
    {
        "id": 1,
        "title": "Sepsis Screening",
        "category": "Emergency",
        "content": "Take blood cultures and measure lactate.",
        "last_updated": "2024-02-02T09:00:00Z",
    },
    {
        "id": 2,
        "title": "Asthma Exacerbation",
        "category": "Respiratory",
        "content": "Nebulised salbutamol and oral prednisolone.",
        "last_updated": "2023-11-20T09:00:00Z",
    },
    {
        "id": 3,
        "title": "Community-Acquired Pneumonia",
        "category": "Respiratory",
        "content": "Calculate CURB-65 and request a chest X-ray.",
        "last_updated": "2024-03-05T09:00:00Z",
    },
    {
        "id": 4,
        "title": "Uncategorised Protocol",
        "category": None,
        "content": "Pending review.",
        "last_updated": None,
    },
]

REFERENCE_RECORDS = [
    {
        "id": 1,
        "title": "Wells Score",
        "type": "Calculator",
        "description": "Probability of deep vein thrombosis.",
        "usage": "Score of 2 or more means DVT is likely.",
    },
    {
        "id": 2,
        "title": "Paracetamol Dosing",
        "type": "Drug Reference",
        "description": "Adult and paediatric doses.",
    },
    {
        "id": 3,
        "title": "CURB-65",
        "type": "Calculator",
        "description": "Pneumonia severity score.",
        "usage": None,
    },
    {
        "id": 4,
        "title": "Glasgow Coma Scale",
        "type": "Diagnostic Tool",
        "description": "Conscious level assessment.",
    },
]


@pytest.fixture(scope="function")
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for tests."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def sql_records(async_session: AsyncSession) -> SqlRecordService:
    return SqlRecordService(async_session)


@pytest.fixture
def records() -> InMemoryRecordService:
    """Empty in-memory record store."""
    return InMemoryRecordService()


@pytest.fixture
def seeded_records() -> InMemoryRecordService:
    """In-memory store with assessments 1..10 and the test library."""
    return InMemoryRecordService(
        seed={
            "assessment": [make_assessment_record(i) for i in range(1, 11)],
            "protocol": PROTOCOL_RECORDS,
            "reference": REFERENCE_RECORDS,
        }
    )


@pytest.fixture
def feed() -> NotificationFeed:
    return NotificationFeed()


@pytest.fixture
def assessment_service(records: InMemoryRecordService, feed: NotificationFeed) -> AssessmentService:
    return AssessmentService(records, feed)


@pytest.fixture
def seeded_assessment_service(
    seeded_records: InMemoryRecordService, feed: NotificationFeed
) -> AssessmentService:
    return AssessmentService(seeded_records, feed)


@pytest.fixture
def protocol_service(
    seeded_records: InMemoryRecordService, feed: NotificationFeed
) -> ProtocolService:
    return ProtocolService(seeded_records, feed)


@pytest.fixture
def reference_service(
    seeded_records: InMemoryRecordService, feed: NotificationFeed
) -> ReferenceService:
    return ReferenceService(seeded_records, feed)


@pytest.fixture(scope="function")
def client(seeded_records: InMemoryRecordService) -> Generator[TestClient, None, None]:
    """Create FastAPI test client backed by the seeded in-memory store."""

    async def override_get_record_service() -> InMemoryRecordService:
        return seeded_records

    app.dependency_overrides[get_record_service] = override_get_record_service
    app.state.notification_feed.clear()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
