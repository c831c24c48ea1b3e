"""Assessment endpoint tests."""

from fastapi.testclient import TestClient

from medassess.store.memory import InMemoryRecordService


def write_body(patient_id: str = "P900", **overrides) -> dict:
    body = {
        "patient_id": patient_id,
        "chief_complaint": "Chest pain on exertion",
        "symptoms": [
            {"id": 5, "severity": 4, "duration": 2, "duration_unit": "hours", "onset": "sudden"},
            {"id": 6, "severity": 2},
        ],
    }
    body.update(overrides)
    return body


class TestListAssessments:
    """Tests for GET /assessments."""

    def test_list_newest_first(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 10
        assert [item["id"] for item in data["items"]] == list(range(10, 0, -1))
        assert data["options"] == ["All", "Draft"]
        assert data["counts"] == {"Draft": 10}

    def test_query_filter(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments", params={"q": "complaint 3"})

        data = response.json()
        assert [item["id"] for item in data["items"]] == [3]
        assert data["total"] == 10

    def test_status_filter(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments", params={"status": "In Progress"})

        assert response.json()["items"] == []

    def test_store_failure_maps_to_502(
        self, client: TestClient, seeded_records: InMemoryRecordService
    ) -> None:
        seeded_records.fail_next()

        response = client.get("/api/v1/assessments")

        assert response.status_code == 502


class TestGetAssessment:
    """Tests for GET /assessments/{id} and /assessments/draft."""

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments/4")

        assert response.status_code == 200
        data = response.json()
        assert data["patient_id"] == "P004"
        assert len(data["symptoms"]) == 20
        assert data["severity_summary"]["total_present"] == 0

    def test_get_missing(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Assessment not found"

    def test_blank_draft(self, client: TestClient) -> None:
        response = client.get("/api/v1/assessments/draft")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Draft"
        assert len(data["draft"]["symptoms"]) == 20
        assert data["groups"]["General"] == [1, 13, 19, 20]
        assert data["severity_labels"]["5"] == "Critical"


class TestWriteAssessment:
    """Tests for POST, PUT and DELETE."""

    def test_create(self, client: TestClient) -> None:
        response = client.post("/api/v1/assessments", json=write_body())

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 11
        assert data["status"] == "In Progress"
        assert data["created_at"] == data["updated_at"]
        assert data["symptoms"][4]["severity"] == 4
        assert data["symptoms"][4]["onset"] == "sudden"
        assert data["severity_summary"] == {
            "mild": 1,
            "moderate": 0,
            "severe": 1,
            "total_present": 2,
        }

    def test_create_without_symptoms_is_draft(self, client: TestClient) -> None:
        response = client.post("/api/v1/assessments", json=write_body(symptoms=[]))

        assert response.status_code == 201
        assert response.json()["status"] == "Draft"

    def test_create_missing_required_field(
        self, client: TestClient, seeded_records: InMemoryRecordService
    ) -> None:
        response = client.post("/api/v1/assessments", json=write_body(patient_id="  "))

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Please fill in all required fields",
            "fields": ["patient_id"],
        }
        assert seeded_records.calls_to("create") == 0

    def test_create_invalid_severity(self, client: TestClient) -> None:
        body = write_body(symptoms=[{"id": 1, "severity": 9}])

        response = client.post("/api/v1/assessments", json=body)

        assert response.status_code == 422

    def test_create_unknown_symptom(self, client: TestClient) -> None:
        body = write_body(symptoms=[{"id": 42, "severity": 1}])

        response = client.post("/api/v1/assessments", json=body)

        assert response.status_code == 422

    def test_create_rejected_by_store(
        self, client: TestClient, seeded_records: InMemoryRecordService
    ) -> None:
        seeded_records.reject_when = lambda record: True

        response = client.post("/api/v1/assessments", json=write_body())

        assert response.status_code == 502
        assert response.json()["detail"] == "Record rejected"

    def test_update(self, client: TestClient) -> None:
        before = client.get("/api/v1/assessments/2").json()

        response = client.put(
            "/api/v1/assessments/2",
            json=write_body(patient_id="P002", chief_complaint="Follow-up"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 2
        assert data["chief_complaint"] == "Follow-up"
        assert data["created_at"] == before["created_at"]
        assert data["updated_at"] != before["updated_at"]

    def test_update_keeps_unsent_symptom_fields(self, client: TestClient) -> None:
        """Test a severity-only change leaves the symptom's other fields alone."""
        first = write_body(
            patient_id="P002",
            symptoms=[
                {
                    "id": 5,
                    "severity": 3,
                    "notes": "radiates left",
                    "duration": 2,
                    "duration_unit": "hours",
                    "onset": "sudden",
                }
            ],
        )
        client.put("/api/v1/assessments/2", json=first)

        response = client.put(
            "/api/v1/assessments/2",
            json=write_body(patient_id="P002", symptoms=[{"id": 5, "severity": 4}]),
        )

        assert response.status_code == 200
        symptom = response.json()["symptoms"][4]
        assert symptom["severity"] == 4
        assert symptom["notes"] == "radiates left"
        assert symptom["duration"] == 2
        assert symptom["duration_unit"] == "hours"
        assert symptom["onset"] == "sudden"

    def test_update_missing(self, client: TestClient) -> None:
        response = client.put("/api/v1/assessments/999", json=write_body())

        assert response.status_code == 404

    def test_delete(self, client: TestClient) -> None:
        response = client.delete("/api/v1/assessments/7")

        assert response.status_code == 204
        ids = [item["id"] for item in client.get("/api/v1/assessments").json()["items"]]
        assert ids == [10, 9, 8, 6, 5, 4, 3, 2, 1]

    def test_delete_missing(self, client: TestClient) -> None:
        assert client.delete("/api/v1/assessments/999").status_code == 404


class TestBatchCreate:
    """Tests for POST /assessments/batch."""

    def test_batch_create(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/assessments/batch",
            json=[write_body("P901"), write_body("P902")],
        )

        assert response.status_code == 201
        assert [item["patient_id"] for item in response.json()] == ["P901", "P902"]

    def test_batch_partial_failure(
        self, client: TestClient, seeded_records: InMemoryRecordService
    ) -> None:
        seeded_records.reject_when = lambda record: record["patient_id"] == "P902"

        response = client.post(
            "/api/v1/assessments/batch",
            json=[write_body("P901"), write_body("P902"), write_body("P903")],
        )

        assert response.status_code == 207
        data = response.json()
        assert data["saved_ids"] == [11, 12]
        assert data["failures"] == ["Record rejected"]
        assert client.get("/api/v1/assessments").json()["total"] == 12
        notifications = client.get("/api/v1/notifications").json()
        saved = sorted(n["entity_id"] for n in notifications if n["level"] == "success")
        assert saved == [11, 12]

    def test_batch_validates_before_writing(
        self, client: TestClient, seeded_records: InMemoryRecordService
    ) -> None:
        response = client.post(
            "/api/v1/assessments/batch",
            json=[write_body("P901"), write_body("")],
        )

        assert response.status_code == 422
        assert seeded_records.calls_to("create") == 0
