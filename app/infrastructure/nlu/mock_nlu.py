from __future__ import annotations

import re
from datetime import date
from typing import Callable

from app.application.ports.nlu import NLUPort
from app.application.utils.date_parser import parse_date_preference, parse_time_preference
from app.application.utils.message_rules import normalize_text
from app.domain.entities.intent import NLUGuess, NLUIntent

_GUEST_PATTERNS = (
    r"\b(?:table|party|reservation|booking)\s+(?:for|of)\s+(\d{1,2})\b",
    r"\bfor\s+(\d{1,2})\b(?!\s*(?:am|pm|:))",
    r"\b(\d{1,2})\s+(?:people|persons|guests|pax|of us)\b",
)

_NAME_PATTERNS = (
    r"\bunder\s+(?:the\s+name\s+(?:of\s+)?)?([A-Z][\w'-]*(?:\s+[A-Z][\w'-]*)?)",
    r"\bmy\s+name\s+is\s+([A-Z][\w'-]*(?:\s+[A-Z][\w'-]*)?)",
    r"\bname\s*:\s*([A-Z][\w'-]*(?:\s+[A-Z][\w'-]*)?)",
)


class MockNLU(NLUPort):
    """Offline stand-in for the hosted model: keyword intents and regex extraction."""

    def __init__(self, today: Callable[[], date] | None = None) -> None:
        self._today = today or date.today

    def analyze(self, text: str) -> NLUGuess:
        normalized = normalize_text(text)

        if any(word in normalized for word in ("cancel", "call off")):
            intent = NLUIntent.CANCEL_RESERVATION
        elif any(word in normalized for word in ("change", "modify", "move", "reschedule")):
            intent = NLUIntent.MODIFY_RESERVATION
        elif any(word in normalized for word in ("book", "table", "reserv")):
            intent = NLUIntent.NEW_RESERVATION
        elif any(word in normalized for word in ("confirm", "status", "details")):
            intent = NLUIntent.CONFIRM_RESERVATION
        elif any(word in normalized.split() for word in ("hi", "hello", "hey", "thanks")):
            intent = NLUIntent.SMALL_TALK
        else:
            intent = NLUIntent.UNKNOWN

        parsed_date = parse_date_preference(text, self._today())
        parsed_time = parse_time_preference(text)

        return NLUGuess(
            intent=intent,
            date=parsed_date.isoformat() if parsed_date else None,
            time=f"{parsed_time[0]:02d}:{parsed_time[1]:02d}" if parsed_time else None,
            guests=_extract_guests(text),
            name=_extract_name(text),
            notes="keyword match",
        )


def _extract_guests(text: str) -> int | None:
    lowered = text.lower()
    for pattern in _GUEST_PATTERNS:
        match = re.search(pattern, lowered)
        if match:
            return int(match.group(1))
    return None


def _extract_name(text: str) -> str | None:
    for pattern in _NAME_PATTERNS:
        match = re.search(pattern, text)
        if match:
            return match.group(1).strip()
    return None
