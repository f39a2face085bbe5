"""
HTTP tests for the reservation and chat endpoints.
"""

from __future__ import annotations

import re

from fastapi.testclient import TestClient

from app.domain.entities.conversation_state import ConversationState
from app.infrastructure.store.memory_store import MemoryConversationStore
from app.main import create_app
from app.wiring.dependencies import build_container

VALID = {"name": "Alex", "date": "2099-01-01", "time": "18:30", "guests": 4}


def _create(client, **overrides):
    return client.post("/api/reservations", json={**VALID, **overrides})


def _chat(client, message, conversation_id="conv-1"):
    response = client.post("/api/chat", json={"conversationId": conversation_id, "message": message})
    assert response.status_code == 200, response.text
    return response.json()["reply"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "message": "API is running"}


def test_create_reservation(client):
    response = _create(client)

    assert response.status_code == 201
    body = response.json()
    assert body["id"].startswith("res_")
    assert body["name"] == "Alex"
    assert body["date"] == "2099-01-01"
    assert body["time"] == "18:30"
    assert body["guests"] == 4
    assert body["status"] == "Confirmed"
    assert body["createdAt"] == body["updatedAt"]


def test_create_normalizes_time_and_guests(client):
    body = _create(client, time="7:30 pm", guests="6").json()
    assert body["time"] == "19:30"
    assert body["guests"] == 6


def test_create_rejects_guest_count_out_of_range(client):
    response = _create(client, guests=25)

    assert response.status_code == 400
    assert response.json()["detail"] == "Guests must be between 1 and 20"
    assert client.get("/api/reservations").json() == []


def test_create_missing_fields(client):
    response = client.post("/api/reservations", json={"name": "Alex", "date": "2099-01-01"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: name, date, time, guests"


def test_create_reports_first_failing_field(client):
    response = _create(client, date="2099-13-01", time="99:99", guests=0)
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid date")

    response = _create(client, date="2000-01-01")
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid date")

    response = _create(client, time="half past six", guests=0)
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid time format")


def test_list_and_get(client):
    first = _create(client).json()
    second = _create(client, name="Sam").json()

    listed = client.get("/api/reservations").json()
    assert [r["id"] for r in listed] == [first["id"], second["id"]]

    response = client.get(f"/api/reservations/{second['id']}")
    assert response.status_code == 200
    assert response.json() == second


def test_get_unknown_is_404(client):
    response = client.get("/api/reservations/res_missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Reservation not found"


def test_update_subset_of_fields(client):
    created = _create(client).json()

    response = client.put(f"/api/reservations/{created['id']}", json={"guests": 6, "name": "Sam"})

    assert response.status_code == 200
    body = response.json()
    assert body["guests"] == 6
    assert body["name"] == "Sam"
    assert body["date"] == created["date"]
    assert body["createdAt"] == created["createdAt"]
    assert body["updatedAt"] > created["updatedAt"]


def test_update_validation_and_not_found(client):
    created = _create(client).json()

    assert client.put(f"/api/reservations/{created['id']}", json={"guests": 0}).status_code == 400
    assert client.put(f"/api/reservations/{created['id']}", json={"date": "yesterday"}).status_code == 400
    assert client.put(f"/api/reservations/{created['id']}", json={"status": "pending"}).status_code == 400
    assert client.put("/api/reservations/res_missing", json={"name": "Sam"}).status_code == 404
    assert client.get(f"/api/reservations/{created['id']}").json() == created


def test_update_status_is_case_insensitive(client):
    created = _create(client).json()

    body = client.put(f"/api/reservations/{created['id']}", json={"status": "cancelled"}).json()
    assert body["status"] == "Cancelled"

    body = client.put(f"/api/reservations/{created['id']}", json={"status": "Confirmed"}).json()
    assert body["status"] == "Confirmed"


def test_delete_cancels_without_removing(client):
    created = _create(client).json()

    response = client.delete(f"/api/reservations/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Reservation cancelled"
    assert body["reservation"]["status"] == "Cancelled"
    assert client.get(f"/api/reservations/{created['id']}").json()["status"] == "Cancelled"

    again = client.delete(f"/api/reservations/{created['id']}")
    assert again.status_code == 200
    assert again.json()["reservation"]["status"] == "Cancelled"

    assert client.delete("/api/reservations/res_missing").status_code == 404


def test_malformed_body_is_400(client):
    response = client.post(
        "/api/reservations",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_chat_requires_message(client):
    assert client.post("/api/chat", json={"conversationId": "x"}).status_code == 400
    assert client.post("/api/chat", json={"conversationId": "x", "message": "   "}).status_code == 400


def test_chat_defaults_conversation_id(client):
    body = client.post("/api/chat", json={"message": "hello"}).json()
    assert body["conversationId"] == "default"
    assert "What would you like to do?" in body["reply"]


def test_chat_new_reservation_end_to_end(client):
    _chat(client, "hi")
    assert "What date would you like?" in _chat(client, "new")
    assert "What time would you like?" in _chat(client, "2099-01-01")
    assert "How many guests?" in _chat(client, "18:30")
    assert "Under what name" in _chat(client, "4")
    assert "Reply 'yes' to confirm or 'no' to cancel." in _chat(client, "Alex")

    reply = _chat(client, "yes")
    assert "Status: Confirmed" in reply
    reservation_id = re.search(r"Reservation ID: (res_\S+)", reply).group(1)

    stored = client.get(f"/api/reservations/{reservation_id}").json()
    assert (stored["name"], stored["date"], stored["time"], stored["guests"]) == ("Alex", "2099-01-01", "18:30", 4)
    assert stored["status"] == "Confirmed"


def test_chat_modify_flow_reprompts_on_invalid_date(client, container):
    reservation_id = _create(client).json()["id"]

    _chat(client, "hi")
    _chat(client, "modify")
    _chat(client, reservation_id)
    _chat(client, "date")

    assert "date is invalid" in _chat(client, "not-a-date")
    assert container.conversation_store.get_state("conv-1").step.tag == "modify_collectingValue"

    assert "has been updated" in _chat(client, "2099-03-15")
    assert container.conversation_store.get_state("conv-1").step.tag == "choosingAction"
    assert client.get(f"/api/reservations/{reservation_id}").json()["date"] == "2099-03-15"


def test_chat_modify_rejects_cancelled_reservation(client, container):
    reservation_id = _create(client).json()["id"]
    client.delete(f"/api/reservations/{reservation_id}")

    _chat(client, "hi")
    _chat(client, "modify")
    reply = _chat(client, reservation_id)

    assert "already been cancelled" in reply
    assert container.conversation_store.get_state("conv-1").step.tag == "modify_collectingId"


class ExplodingConversationStore(MemoryConversationStore):
    def get_state(self, conversation_id: str) -> ConversationState:
        raise RuntimeError("state backend offline")


def test_chat_internal_error_is_500(settings):
    container = build_container(settings, conversation_store=ExplodingConversationStore())
    with TestClient(create_app(settings=settings, container=container)) as client:
        response = client.post("/api/chat", json={"message": "hello"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
