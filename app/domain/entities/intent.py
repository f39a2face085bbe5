from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NLUIntent(str, Enum):
    NEW_RESERVATION = "new_reservation"
    MODIFY_RESERVATION = "modify_reservation"
    CANCEL_RESERVATION = "cancel_reservation"
    CONFIRM_RESERVATION = "confirm_reservation"
    SMALL_TALK = "small_talk"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: object) -> "NLUIntent":
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


class ChatAction(str, Enum):
    NEW = "new"
    MODIFY = "modify"
    CANCEL = "cancel"
    CONFIRM = "confirm"
    SMALL_TALK = "small_talk"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NLUGuess:
    """Best-effort reading of a user message. Every field may be missing."""

    intent: NLUIntent = NLUIntent.UNKNOWN
    date: str | None = None
    time: str | None = None
    guests: int | None = None
    name: str | None = None
    notes: str = ""

    @staticmethod
    def unknown(notes: str = "") -> "NLUGuess":
        return NLUGuess(intent=NLUIntent.UNKNOWN, notes=notes)


@dataclass(frozen=True)
class IntentClassification:
    action: ChatAction
    source: str  # "keyword", "nlu" or "none"
    guess: NLUGuess
