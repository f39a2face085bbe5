from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from app.application.ports.nlu import NLUPort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.domain.entities.conversation_state import ConversationState
from app.domain.entities.intent import NLUGuess
from app.infrastructure.store.memory_store import MemoryConversationStore, MemoryReservationStore

# A Monday
TODAY = date(2026, 10, 19)


class TickingClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class FakeNLU(NLUPort):
    """Returns a preset guess and records what it was asked."""

    def __init__(self, guess: NLUGuess | None = None) -> None:
        self.guess = guess or NLUGuess.unknown(notes="fake")
        self.calls: list[str] = []

    def analyze(self, text: str) -> NLUGuess:
        self.calls.append(text)
        return self.guess


class ChatHarness:
    def __init__(self, nlu: NLUPort | None = None) -> None:
        self.nlu = nlu or FakeNLU()
        self.conversations = MemoryConversationStore()
        self.reservations = MemoryReservationStore(clock=TickingClock())
        self.use_case = HandleChatMessageUseCase(
            conversations=self.conversations,
            reservations=self.reservations,
            classify_intent=ClassifyIntentUseCase(nlu=self.nlu),
            today=lambda: TODAY,
            restaurant_name="Test Bistro",
        )

    def send(self, text: str, conversation_id: str = "c1") -> str:
        return self.use_case.handle(conversation_id, text)

    def state(self, conversation_id: str = "c1") -> ConversationState:
        return self.conversations.get_state(conversation_id)

    def step(self, conversation_id: str = "c1") -> str:
        return self.state(conversation_id).step.tag

    def start(self, conversation_id: str = "c1") -> None:
        """Move the conversation past the greeting so the next message picks an action."""
        self.send("hi", conversation_id)
