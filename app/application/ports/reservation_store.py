from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.reservation import Reservation, ReservationStatus


class ReservationStorePort(ABC):
    @abstractmethod
    def create(self, name: str, date: str, time: str, guests: int) -> Reservation:
        """Store a new Confirmed reservation under a freshly generated id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, reservation_id: str) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
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
        """
        Merge the given (non-None) fields into the reservation and refresh updated_at.
        Returns None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def cancel(self, reservation_id: str) -> Reservation | None:
        """Flip status to Cancelled and refresh updated_at. Returns None if the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Reservation]:
        """All reservations in creation order, cancelled ones included."""
        raise NotImplementedError
