from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from app.domain.entities.reservation import ReservationDraft


class LastAction(str, Enum):
    NEW = "new"
    MODIFY = "modify"
    CANCEL = "cancel"
    CONFIRM = "confirm"


class ModifiableField(str, Enum):
    DATE = "date"
    TIME = "time"
    GUESTS = "guests"
    NAME = "name"

    @classmethod
    def parse(cls, value: str) -> "ModifiableField | None":
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


@dataclass(frozen=True)
class Idle:
    tag: str = field(default="idle", init=False)


@dataclass(frozen=True)
class ChoosingAction:
    tag: str = field(default="choosingAction", init=False)


@dataclass(frozen=True)
class NewCollecting:
    draft: ReservationDraft = ReservationDraft()
    tag: str = field(default="new_collecting", init=False)


@dataclass(frozen=True)
class NewConfirming:
    draft: ReservationDraft
    tag: str = field(default="new_confirming", init=False)


@dataclass(frozen=True)
class ModifyCollectingId:
    tag: str = field(default="modify_collectingId", init=False)


@dataclass(frozen=True)
class ModifyCollectingField:
    reservation_id: str
    tag: str = field(default="modify_collectingField", init=False)


@dataclass(frozen=True)
class ModifyCollectingValue:
    reservation_id: str | None
    field_to_modify: ModifiableField | None
    tag: str = field(default="modify_collectingValue", init=False)


@dataclass(frozen=True)
class CancelCollectingId:
    tag: str = field(default="cancel_collectingId", init=False)


@dataclass(frozen=True)
class ConfirmCollectingId:
    tag: str = field(default="confirm_collectingId", init=False)


ConversationStep = (
    Idle
    | ChoosingAction
    | NewCollecting
    | NewConfirming
    | ModifyCollectingId
    | ModifyCollectingField
    | ModifyCollectingValue
    | CancelCollectingId
    | ConfirmCollectingId
)


@dataclass(frozen=True)
class ConversationState:
    step: ConversationStep = Idle()
    last_action: LastAction | None = None
    last_reservation_id: str | None = None

    @property
    def draft(self) -> ReservationDraft:
        """Draft carried by the current step, empty when the step has none."""
        if isinstance(self.step, (NewCollecting, NewConfirming)):
            return self.step.draft
        return ReservationDraft()
