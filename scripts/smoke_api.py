#!/usr/bin/env python3
"""Smoke run against a live server: health, REST create/get, and a full chat booking."""

import sys
import uuid

import httpx

BASE_URL = "http://127.0.0.1:3000"


def check_health(client: httpx.Client) -> None:
    response = client.get("/health")
    response.raise_for_status()
    print(f"Health: {response.json()}")


def check_rest(client: httpx.Client) -> str:
    print("=" * 60)
    print("Testing POST /api/reservations")
    print("=" * 60)
    payload = {"name": "Smoke Test", "date": "2099-01-01", "time": "19:00", "guests": 2}
    response = client.post("/api/reservations", json=payload)
    response.raise_for_status()
    reservation = response.json()
    print(f"Created: {reservation['id']} status={reservation['status']}")

    response = client.get(f"/api/reservations/{reservation['id']}")
    response.raise_for_status()
    print(f"Fetched: {response.json()}")

    response = client.post("/api/reservations", json={**payload, "guests": 25})
    print(f"guests=25 -> {response.status_code} {response.json()}")
    return reservation["id"]


def check_chat(client: httpx.Client) -> None:
    print("\n" + "=" * 60)
    print("Testing POST /api/chat")
    print("=" * 60)
    conversation_id = f"smoke_{uuid.uuid4().hex[:6]}"
    for message in ("hello", "new", "2099-01-01", "18:30", "4", "Alex", "yes"):
        response = client.post("/api/chat", json={"conversationId": conversation_id, "message": message})
        response.raise_for_status()
        print(f"> {message}\n{response.json()['reply']}\n")


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        try:
            check_health(client)
        except httpx.HTTPError:
            print("Server is not running!")
            print("   Please start it with: uvicorn app.main:create_app --factory --port 3000")
            sys.exit(1)
        check_rest(client)
        check_chat(client)
    print("Smoke run complete.")


if __name__ == "__main__":
    main()
