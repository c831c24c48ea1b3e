"""Health endpoint tests."""

from fastapi.testclient import TestClient

from medassess.store.memory import InMemoryRecordService


def test_health_check(client: TestClient) -> None:
    """Test health check endpoint returns ok status."""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_check_ready(client: TestClient) -> None:
    """Test readiness check endpoint returns ok status."""
    response = client.get("/api/v1/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_readiness_fails_when_store_unavailable(
    client: TestClient, seeded_records: InMemoryRecordService
) -> None:
    """Test readiness reports 503 when the record store call fails."""
    seeded_records.fail_next()

    response = client.get("/api/v1/health/ready")

    assert response.status_code == 503
    assert response.json()["detail"] == "Record store unavailable"


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns service info."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "MedAssess API"
    assert "version" in data
