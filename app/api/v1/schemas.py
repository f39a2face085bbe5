from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.reservation import Reservation, ReservationStatus


class ReservationCreateSchema(BaseModel):
    # Loosely typed on purpose: the use case reports the first failing field with a 400
    name: Any = None
    date: Any = None
    time: Any = None
    guests: Any = None


class ReservationUpdateSchema(BaseModel):
    name: Any = None
    date: Any = None
    time: Any = None
    guests: Any = None
    status: Any = None


class ReservationSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    date: str
    time: str
    guests: int
    status: ReservationStatus
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_entity(cls, reservation: Reservation) -> "ReservationSchema":
        return cls(
            id=reservation.id,
            name=reservation.name,
            date=reservation.date,
            time=reservation.time,
            guests=reservation.guests,
            status=reservation.status,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )


class CancelResponseSchema(BaseModel):
    message: str
    reservation: ReservationSchema


class ChatRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str | None = Field(default=None, alias="conversationId")
    message: str | None = None


class ChatResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str = Field(alias="conversationId")
    reply: str


class HealthSchema(BaseModel):
    ok: bool
    message: str
