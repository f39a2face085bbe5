from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.infrastructure.store.memory_store import MemoryReservationStore
from app.main import create_app
from app.wiring.dependencies import build_container
from tests.support import ChatHarness, TickingClock


@pytest.fixture
def harness() -> ChatHarness:
    return ChatHarness()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, NLU_PROVIDER="mock", OPENAI_API_KEY=None, RESTAURANT_NAME="Test Bistro")


@pytest.fixture
def container(settings):
    return build_container(settings, reservation_store=MemoryReservationStore(clock=TickingClock()))


@pytest.fixture
def client(settings, container):
    app = create_app(settings=settings, container=container)
    with TestClient(app) as test_client:
        yield test_client
