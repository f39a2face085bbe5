from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from fastapi import Request

from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.nlu import NLUPort
from app.application.ports.reservation_store import ReservationStorePort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.application.use_cases.reservations import ManageReservationsUseCase
from app.core.config import Settings
from app.infrastructure.nlu.mock_nlu import MockNLU
from app.infrastructure.nlu.openai_nlu import OpenAINLU
from app.infrastructure.store.memory_store import MemoryConversationStore, MemoryReservationStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    reservation_store: ReservationStorePort
    conversation_store: ConversationStorePort
    nlu: NLUPort
    reservations: ManageReservationsUseCase
    chat: HandleChatMessageUseCase


def build_today(timezone_name: str) -> Callable[[], date]:
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz).date()

    return today


def build_nlu(settings: Settings, today: Callable[[], date]) -> NLUPort:
    provider = settings.NLU_PROVIDER.strip().lower()
    if provider == "mock":
        logger.info("Using MockNLU (NLU_PROVIDER=mock)")
        return MockNLU(today=today)
    if provider == "openai":
        if not settings.OPENAI_API_KEY or not settings.OPENAI_API_KEY.strip():
            raise ValueError("OPENAI_API_KEY is required when NLU_PROVIDER=openai.")
        logger.info("Using OpenAINLU model=%s", settings.OPENAI_MODEL_NLU)
        return OpenAINLU(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL_NLU,
            temperature=settings.OPENAI_TEMPERATURE_NLU,
            timeout_seconds=settings.OPENAI_TIMEOUT_SECONDS,
            today=today,
            restaurant_name=settings.RESTAURANT_NAME,
        )
    raise ValueError(f"Unknown NLU_PROVIDER: {settings.NLU_PROVIDER!r}")


def build_container(
    settings: Settings,
    nlu: NLUPort | None = None,
    reservation_store: ReservationStorePort | None = None,
    conversation_store: ConversationStorePort | None = None,
) -> Container:
    """Construct every store and use case once; raises if the NLU provider is misconfigured."""
    today = build_today(settings.RESTAURANT_TIMEZONE)
    nlu = nlu or build_nlu(settings, today)
    reservation_store = reservation_store or MemoryReservationStore()
    conversation_store = conversation_store or MemoryConversationStore()

    return Container(
        settings=settings,
        reservation_store=reservation_store,
        conversation_store=conversation_store,
        nlu=nlu,
        reservations=ManageReservationsUseCase(store=reservation_store, today=today),
        chat=HandleChatMessageUseCase(
            conversations=conversation_store,
            reservations=reservation_store,
            classify_intent=ClassifyIntentUseCase(nlu=nlu),
            today=today,
            restaurant_name=settings.RESTAURANT_NAME,
        ),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_reservations_use_case(request: Request) -> ManageReservationsUseCase:
    return get_container(request).reservations


def get_chat_use_case(request: Request) -> HandleChatMessageUseCase:
    return get_container(request).chat


def get_settings(request: Request) -> Settings:
    return get_container(request).settings
