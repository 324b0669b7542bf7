"""End-to-end tests for the /api/greetings endpoints."""

from __future__ import annotations

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from greeting_api.application.interfaces import GreetingRepositoryInterface
from greeting_api.domain.exceptions import StorageError
from greeting_api.domain.models import Greeting
from greeting_api.main import app
from greeting_api.presentation.routers.greetings import get_greeting_service
from greeting_api.services import GreetingService

BASE = "/api/greetings"


def _create(client: TestClient, payload: dict) -> dict:
    response = client.post(BASE, json=payload)
    assert response.status_code == 201
    return response.json()


def test_get_greeting_without_names(client):
    response = client.get(BASE)

    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}


def test_get_greeting_with_names(client):
    both = client.get(BASE, params={"firstName": "Jane", "lastName": "Doe"})
    first = client.get(BASE, params={"firstName": "Jane", "lastName": ""})
    last = client.get(BASE, params={"lastName": "Doe"})

    assert both.json() == {"message": "Hello Jane Doe"}
    assert first.json() == {"message": "Hello Jane"}
    assert last.json() == {"message": "Hello Doe"}


def test_create_then_fetch_by_id(client):
    body = _create(client, {"name": "Sam"})

    assert body["message"] == "Greeting created and saved"
    assert body["id"] is not None
    assert body["content"] == "Hello Sam"

    fetched = client.get(f"{BASE}/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == {"id": body["id"], "message": "Hello Sam"}


def test_create_without_name_uses_default(client):
    assert _create(client, {})["content"] == "Hello World"
    assert _create(client, {"name": ""})["content"] == "Hello World"


def test_get_unknown_id_returns_empty_404(client):
    response = client.get(f"{BASE}/4242")

    assert response.status_code == 404
    assert response.content == b""


def test_largest_storable_id_is_plain_not_found(client):
    response = client.get(f"{BASE}/{2**63 - 1}")

    assert response.status_code == 404
    assert response.content == b""


@pytest.mark.parametrize("greeting_id", [2**63, -(2**63) - 1, 10**30])
def test_ids_outside_column_range_are_client_errors(client, greeting_id):
    assert client.get(f"{BASE}/{greeting_id}").status_code == 422
    assert client.put(f"{BASE}/{greeting_id}", json={}).status_code == 422
    assert client.delete(f"{BASE}/{greeting_id}").status_code == 422


def test_list_all_returns_every_record(client):
    assert client.get(f"{BASE}/all").json() == []

    created = [_create(client, {"name": name}) for name in ("Ana", "Bo", "Cy")]

    response = client.get(f"{BASE}/all")
    assert response.status_code == 200
    listed = {item["id"]: item["message"] for item in response.json()}
    assert listed == {item["id"]: item["content"] for item in created}


def test_put_is_placeholder_and_does_not_persist(client):
    created = _create(client, {"name": "Sam"})
    greeting_id = created["id"]

    response = client.put(f"{BASE}/{greeting_id}", json={"name": "Alex"})

    assert response.status_code == 200
    assert response.json() == {
        "message": f"Greeting ID {greeting_id} updated to: Hello Alex (update logic placeholder)"
    }
    assert client.get(f"{BASE}/{greeting_id}").json()["message"] == "Hello Sam"


def test_put_without_name_reports_default(client):
    response = client.put(f"{BASE}/7", json={})

    assert response.json() == {
        "message": "Greeting ID 7 updated to: Hello World (update logic placeholder)"
    }


def test_delete_is_placeholder_and_keeps_record(client):
    created = _create(client, {"name": "Sam"})

    response = client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    still_there = client.get(f"{BASE}/{created['id']}")
    assert still_there.status_code == 200
    assert still_there.json()["message"] == "Hello Sam"


def test_malformed_json_is_client_error(client):
    response = client.post(
        BASE,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert 400 <= response.status_code < 500


def test_non_integer_id_is_client_error(client):
    assert client.get(f"{BASE}/abc").status_code == 422


def test_unknown_route_returns_404(client):
    assert client.get("/api/unknown").status_code == 404


def test_storage_failure_returns_500():
    class UnavailableRepository(GreetingRepositoryInterface):
        async def save(self, message: str) -> Greeting:
            raise StorageError("save")

        async def find_by_id(self, greeting_id: int) -> Optional[Greeting]:
            raise StorageError("find_by_id")

        async def find_all(self) -> List[Greeting]:
            raise StorageError("find_all")

    app.dependency_overrides[get_greeting_service] = lambda: GreetingService(
        UnavailableRepository()
    )
    try:
        response = TestClient(app).post(BASE, json={"name": "Sam"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Storage unavailable"}
    metrics = TestClient(app).get("/metrics").text
    assert 'greeting_storage_errors_total{operation="save"}' in metrics


def test_health_and_metrics(client):
    created = _create(client, {"name": "Sam"})
    client.get(f"{BASE}/{created['id']}")
    client.get(f"{BASE}/4242")

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    text = metrics.text
    assert 'greeting_operations_total{operation="create",outcome="stored"}' in text
    assert 'greeting_operations_total{operation="lookup",outcome="found"}' in text
    assert 'greeting_operations_total{operation="lookup",outcome="missing"}' in text
    assert 'route="/api/greetings/{greeting_id}"' in text
