from __future__ import annotations

import re
from datetime import date, datetime

MIN_GUESTS = 1
MAX_GUESTS = 20
MAX_NAME_LENGTH = 100

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_24H_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_TIME_12H_RE = re.compile(r"^(0?[1-9]|1[0-2])(?::([0-5]\d))?\s?(am|pm)$", re.IGNORECASE)


def is_valid_date(value: str, today: date | None = None) -> bool:
    """True for a real YYYY-MM-DD calendar date that is not in the past."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return False
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return False
    return parsed >= (today or date.today())


def normalize_time(value: str) -> str | None:
    """Return the time as zero-padded 24h HH:MM, or None if it is not a time."""
    if not isinstance(value, str):
        return None
    text = value.strip()

    match = _TIME_24H_RE.match(text)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    match = _TIME_12H_RE.match(text)
    if match:
        hour = int(match.group(1))
        minute = match.group(2) or "00"
        am_pm = match.group(3).lower()
        if am_pm == "pm" and hour != 12:
            hour += 12
        elif am_pm == "am" and hour == 12:
            hour = 0
        return f"{hour:02d}:{minute}"

    return None


def is_valid_time(value: str) -> bool:
    return normalize_time(value) is not None


def is_valid_guests(value: object) -> bool:
    # bool is an int subclass; True must not count as one guest
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_GUESTS <= value <= MAX_GUESTS


def parse_guests(value: object) -> int | None:
    """Coerce request or chat input to a guest count, None if out of policy."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r"[+-]?\d+", text):
            return None
        value = int(text)
    return value if is_valid_guests(value) else None


def is_valid_name(value: object) -> bool:
    return isinstance(value, str) and 0 < len(value.strip()) <= MAX_NAME_LENGTH
