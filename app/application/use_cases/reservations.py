from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable

from app.application.exceptions import ReservationNotFoundError, ReservationValidationError
from app.application.ports.reservation_store import ReservationStorePort
from app.application.utils.validation import (
    is_valid_date,
    is_valid_name,
    normalize_time,
    parse_guests,
)
from app.domain.entities.reservation import Reservation, ReservationStatus

MISSING_FIELDS_MESSAGE = "Missing required fields: name, date, time, guests"
INVALID_NAME_MESSAGE = "Name must be a non-empty string of at most 100 characters"
INVALID_DATE_MESSAGE = "Invalid date. Use YYYY-MM-DD for today or a later day"
INVALID_TIME_MESSAGE = "Invalid time format. Use HH:MM 24h (or H:MM am/pm)"
INVALID_GUESTS_MESSAGE = "Guests must be between 1 and 20"
INVALID_STATUS_MESSAGE = "Invalid status. Use Confirmed or Cancelled"


class ManageReservationsUseCase:
    """Validated CRUD over the reservation store, used by the REST routes."""

    def __init__(self, store: ReservationStorePort, today: Callable[[], date]) -> None:
        self._store = store
        self._today = today
        self._logger = logging.getLogger(__name__)

    def create(self, name: Any, date_value: Any, time_value: Any, guests: Any) -> Reservation:
        if not name or not date_value or not time_value or guests is None:
            raise ReservationValidationError(MISSING_FIELDS_MESSAGE)

        clean_date = self._check_date(date_value)
        clean_time = self._check_time(time_value)
        clean_guests = self._check_guests(guests)
        clean_name = self._check_name(name)

        return self._store.create(name=clean_name, date=clean_date, time=clean_time, guests=clean_guests)

    def get(self, reservation_id: str) -> Reservation:
        reservation = self._store.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def list(self) -> list[Reservation]:
        return self._store.list()

    def update(self, reservation_id: str, changes: dict[str, Any]) -> Reservation:
        """Apply a partial update. Only keys present in `changes` are validated and written."""
        updates: dict[str, Any] = {}

        if changes.get("name") is not None:
            updates["name"] = self._check_name(changes["name"])
        if changes.get("date") is not None:
            updates["date"] = self._check_date(changes["date"])
        if changes.get("time") is not None:
            updates["time"] = self._check_time(changes["time"])
        if changes.get("guests") is not None:
            updates["guests"] = self._check_guests(changes["guests"])
        if changes.get("status") is not None:
            status = ReservationStatus.parse(str(changes["status"]))
            if status is None:
                raise ReservationValidationError(INVALID_STATUS_MESSAGE, field="status")
            updates["status"] = status

        updated = self._store.update(reservation_id, **updates)
        if updated is None:
            raise ReservationNotFoundError(reservation_id)
        return updated

    def cancel(self, reservation_id: str) -> Reservation:
        cancelled = self._store.cancel(reservation_id)
        if cancelled is None:
            raise ReservationNotFoundError(reservation_id)
        return cancelled

    def _check_name(self, value: Any) -> str:
        if not is_valid_name(value):
            raise ReservationValidationError(INVALID_NAME_MESSAGE, field="name")
        return value.strip()

    def _check_date(self, value: Any) -> str:
        if not isinstance(value, str) or not is_valid_date(value.strip(), today=self._today()):
            raise ReservationValidationError(INVALID_DATE_MESSAGE, field="date")
        return value.strip()

    def _check_time(self, value: Any) -> str:
        normalized = normalize_time(value) if isinstance(value, str) else None
        if normalized is None:
            raise ReservationValidationError(INVALID_TIME_MESSAGE, field="time")
        return normalized

    def _check_guests(self, value: Any) -> int:
        guests = parse_guests(value)
        if guests is None:
            raise ReservationValidationError(INVALID_GUESTS_MESSAGE, field="guests")
        return guests
