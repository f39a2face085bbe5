from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.reservation_store import ReservationStorePort
from app.domain.entities.conversation_state import ConversationState
from app.domain.entities.reservation import Reservation, ReservationStatus


class MemoryConversationStore(ConversationStorePort):
    def __init__(self) -> None:
        self._states: dict[str, ConversationState] = {}

    def get_state(self, conversation_id: str) -> ConversationState:
        return self._states.get(conversation_id, ConversationState())

    def set_state(self, conversation_id: str, state: ConversationState) -> None:
        self._states[conversation_id] = state

    def has_conversation(self, conversation_id: str) -> bool:
        return conversation_id in self._states


class MemoryReservationStore(ReservationStorePort):
    """
    Reservations kept in a dict for the lifetime of the process.

    Records are frozen dataclasses; every mutation stores a new snapshot,
    so callers never hold a reference they could change behind the store's back.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._reservations: dict[str, Reservation] = {}
        self._clock = clock or _utc_now
        self._logger = logging.getLogger(__name__)

    def create(self, name: str, date: str, time: str, guests: int) -> Reservation:
        now = self._clock()
        reservation_id = self._generate_id(now)
        reservation = Reservation(
            id=reservation_id,
            name=name,
            date=date,
            time=time,
            guests=guests,
            status=ReservationStatus.CONFIRMED,
            created_at=now,
            updated_at=now,
        )
        self._reservations[reservation_id] = reservation
        self._logger.info("Reservation created", extra={"reservation_id": reservation_id})
        return reservation

    def get(self, reservation_id: str) -> Reservation | None:
        return self._reservations.get(reservation_id)

    def update(
        self,
        reservation_id: str,
        *,
        name: str | None = None,
        date: str | None = None,
        time: str | None = None,
        guests: int | None = None,
        status: ReservationStatus | None = None,
    ) -> Reservation | None:
        existing = self._reservations.get(reservation_id)
        if existing is None:
            return None

        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("date", date),
                ("time", time),
                ("guests", guests),
                ("status", status),
            )
            if value is not None
        }
        updated = replace(existing, **changes, updated_at=self._clock())
        self._reservations[reservation_id] = updated
        self._logger.info(
            "Reservation updated",
            extra={"reservation_id": reservation_id, "reason": ",".join(sorted(changes)) or "touch"},
        )
        return updated

    def cancel(self, reservation_id: str) -> Reservation | None:
        existing = self._reservations.get(reservation_id)
        if existing is None:
            return None

        cancelled = replace(existing, status=ReservationStatus.CANCELLED, updated_at=self._clock())
        self._reservations[reservation_id] = cancelled
        self._logger.info("Reservation cancelled", extra={"reservation_id": reservation_id})
        return cancelled

    def list(self) -> list[Reservation]:
        return list(self._reservations.values())

    def _generate_id(self, now: datetime) -> str:
        while True:
            candidate = f"res_{now.year}_{uuid.uuid4().hex[:8]}"
            if candidate not in self._reservations:
                return candidate


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
