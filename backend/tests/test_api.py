"""HTTP surface tests using FastAPI's TestClient."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from mortgage_checklist.deps import get_checklist_service
from mortgage_checklist.main import app
from mortgage_checklist.services.checklist_service import ChecklistService


class ExplodingService(ChecklistService):
    def generate(self, payload):
        raise RuntimeError("engine offline")


@pytest.fixture
def client(service: ChecklistService) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_checklist_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "api": "healthy"}


def test_generate_checklist(client: TestClient, purchase_payload: dict) -> None:
    response = client.post("/api/v1/checklists", json=purchase_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["recommendations"]["general"][0] == {
        "name": "Executed purchase contract",
        "status": "required",
        "reason": "Loan purpose is Purchase.",
    }
    assert body["recommendations"]["assets"] == [
        {
            "name": "Proof of funds for down payment & closing",
            "status": "required",
            "reason": "No assets listed in application.",
        }
    ]
    assert body["coverage"] == {
        "employmentCoverage": {"needed": 24, "covered": 0},
        "residenceCoverage": {"needed": 24, "covered": 0},
        "hasDeclarationFlags": False,
        "reoCount": 0,
    }


def test_generate_checklist_with_partial_payload(client: TestClient) -> None:
    response = client.post(
        "/api/v1/checklists",
        json={"borrowers": [{"firstName": "Jo", "employmentHistory": "oops"}]},
    )

    assert response.status_code == 200
    assert "[Jo ] Government-issued photo ID" in [
        item["name"] for item in response.json()["recommendations"]["general"]
    ]


def test_non_object_payload_is_bad_request(client: TestClient) -> None:
    response = client.post("/api/v1/checklists", json=["not", "an", "object"])

    assert response.status_code == 400
    assert "must be an object" in response.json()["detail"]


def test_unexpected_error_is_server_error(client: TestClient, purchase_payload: dict) -> None:
    app.dependency_overrides[get_checklist_service] = lambda: ExplodingService()

    response = client.post("/api/v1/checklists", json=purchase_payload)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate checklist"}


def test_export_checklist(client: TestClient, purchase_payload: dict) -> None:
    response = client.post("/api/v1/checklists/export", json=purchase_payload)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == (
        'attachment; filename="doc-checklist-APP-100.csv"'
    )
    lines = response.text.split("\n")
    assert lines[0] == '"Section","Item","Status","Reason"'
    assert lines[1] == '"General","Executed purchase contract","Required","Loan purpose is Purchase."'


def test_export_filename_is_header_safe(client: TestClient, purchase_payload: dict) -> None:
    purchase_payload["applicationNumber"] = 'bad"name/1'

    response = client.post("/api/v1/checklists/export", json=purchase_payload)

    assert response.status_code == 200
    assert response.headers["content-disposition"] == (
        'attachment; filename="doc-checklist-badname1.csv"'
    )


def test_export_non_object_payload_is_bad_request(client: TestClient) -> None:
    response = client.post("/api/v1/checklists/export", json="text")

    assert response.status_code == 400
