from __future__ import annotations

import re

from app.domain.entities.intent import ChatAction

# Checked in this order; the first action with a matching token wins.
ACTION_KEYWORDS: tuple[tuple[ChatAction, frozenset[str]], ...] = (
    (ChatAction.NEW, frozenset({"new", "book", "reserve", "1"})),
    (ChatAction.MODIFY, frozenset({"modify", "change", "update", "edit", "2"})),
    (ChatAction.CANCEL, frozenset({"cancel", "3"})),
    (ChatAction.CONFIRM, frozenset({"confirm", "details", "check", "4"})),
)

SMALL_TALK_WORDS = frozenset({"hi", "hello", "hey", "thanks", "thank", "thx", "bye", "goodbye"})

AFFIRMATIVE = ("yes", "y")
NEGATIVE = ("no", "n")


def normalize_text(text: str) -> str:
    normalized = text.lower()
    normalized = re.sub(r"[^a-z0-9\s]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized).strip()
    return normalized


def tokens(text: str) -> set[str]:
    return set(normalize_text(text).split())


def detect_action_keyword(text: str) -> ChatAction | None:
    words = tokens(text)
    # Menu numbers only count when they are the whole message
    is_bare_number = len(words) == 1 and next(iter(words), "").isdigit()
    for action, keywords in ACTION_KEYWORDS:
        for keyword in keywords:
            if keyword.isdigit() and not is_bare_number:
                continue
            if keyword in words:
                return action
    if words & SMALL_TALK_WORDS:
        return ChatAction.SMALL_TALK
    return None


def is_affirmative(text: str) -> bool:
    return text.strip().lower() in AFFIRMATIVE


def is_negative(text: str) -> bool:
    return text.strip().lower() in NEGATIVE
