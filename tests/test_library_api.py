"""Protocol and reference endpoint tests."""

from fastapi.testclient import TestClient


class TestProtocolsApi:
    """Tests for /protocols."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/protocols")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == [2, 3, 1, 4]
        assert data["options"] == ["All", "Respiratory", "Emergency", ""]
        assert data["counts"] == {"Respiratory": 2, "Emergency": 1, "": 1}

    def test_filter_by_query_and_category(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/protocols", params={"q": "salbutamol", "category": "Respiratory"}
        )

        data = response.json()
        assert [item["title"] for item in data["items"]] == ["Asthma Exacerbation"]
        assert data["total"] == 4

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/protocols/4")

        assert response.status_code == 200
        assert response.json()["category"] == ""

    def test_get_missing(self, client: TestClient) -> None:
        response = client.get("/api/v1/protocols/99")

        assert response.status_code == 404
        assert response.json()["detail"] == "Protocol not found"

    def test_read_only(self, client: TestClient) -> None:
        assert client.post("/api/v1/protocols", json={"title": "New"}).status_code == 405


class TestReferencesApi:
    """Tests for /references."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/references")

        data = response.json()
        assert [item["title"] for item in data["items"]] == [
            "CURB-65",
            "Glasgow Coma Scale",
            "Paracetamol Dosing",
            "Wells Score",
        ]
        assert data["options"] == ["All", "Calculator", "Diagnostic Tool", "Drug Reference"]

    def test_filter_by_type(self, client: TestClient) -> None:
        response = client.get("/api/v1/references", params={"type": "Calculator"})

        assert [item["id"] for item in response.json()["items"]] == [3, 1]

    def test_usage_absent(self, client: TestClient) -> None:
        assert client.get("/api/v1/references/2").json()["usage"] is None

    def test_no_match(self, client: TestClient) -> None:
        response = client.get("/api/v1/references", params={"q": "nothing like this"})

        assert response.json()["items"] == []
