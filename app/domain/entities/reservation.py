from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReservationStatus(str, Enum):
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> "ReservationStatus | None":
        normalized = (value or "").strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return None


@dataclass(frozen=True)
class Reservation:
    id: str
    name: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24h
    guests: int
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED


@dataclass(frozen=True)
class ReservationDraft:
    """Fields collected so far for a reservation that does not exist yet."""

    date: str | None = None
    time: str | None = None
    guests: int | None = None
    name: str | None = None

    def missing_field(self) -> str | None:
        """First field still needed, in the order the chat asks for them."""
        for field in ("date", "time", "guests", "name"):
            if getattr(self, field) is None:
                return field
        return None

    @property
    def is_complete(self) -> bool:
        return self.missing_field() is None
