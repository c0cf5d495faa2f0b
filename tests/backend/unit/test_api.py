import pytest

fastapi = pytest.importorskip("fastapi")
pytest.importorskip("httpx")
from fastapi.testclient import TestClient

from rifa.backend.api import create_app
from rifa.backend.store import InMemoryParticipantStore


def test_get_participants_starts_empty() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))

    response = client.get("/participants")

    assert response.status_code == 200
    assert response.json() == []


def test_post_participant_then_list_returns_it() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))

    created = client.post("/participants", json={"name": "Ana", "numbers": [5, 12, 999]})
    listed = client.get("/participants")

    assert created.status_code == 200
    assert created.json() == {"name": "Ana", "numbers": [5, 12, 999]}
    assert listed.json() == [{"name": "Ana", "numbers": [5, 12, 999]}]


def test_post_taken_number_returns_error_payload() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))
    client.post("/participants", json={"name": "Ana", "numbers": [5]})

    response = client.post("/participants", json={"name": "Luis", "numbers": [5]})

    assert response.status_code == 400
    assert "ya fue tomado" in response.json()["error"]
    assert len(client.get("/participants").json()) == 1


def test_post_too_many_numbers_is_rejected() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))

    response = client.post("/participants", json={"name": "Ana", "numbers": [1, 2, 3, 4]})

    assert response.status_code == 400
    assert response.json()["error"]


def test_post_malformed_body_uses_error_payload() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))

    response = client.post("/participants", json={"name": "Ana", "numbers": "uno"})

    assert response.status_code == 422
    assert response.json() == {"error": "Datos de participante inválidos"}


def test_delete_reset_clears_participants_and_is_idempotent() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))
    client.post("/participants", json={"name": "Ana", "numbers": [5]})

    first = client.delete("/reset")
    second = client.delete("/reset")

    assert first.status_code == 200
    assert second.status_code == 200
    assert client.get("/participants").json() == []


def test_health() -> None:
    client = TestClient(create_app(store=InMemoryParticipantStore()))

    assert client.get("/health").json() == {"status": "healthy"}
