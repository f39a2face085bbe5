from __future__ import annotations

import re
from datetime import date, timedelta

DAY_NAMES = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

_WORD_NUMBERS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}


def parse_date_preference(text: str, reference_date: date) -> date | None:
    """Parse a date mentioned in free text relative to reference_date."""
    normalized = text.lower().strip()

    if "day after tomorrow" in normalized:
        return reference_date + timedelta(days=2)

    if "tomorrow" in normalized:
        return reference_date + timedelta(days=1)

    if "today" in normalized or "tonight" in normalized:
        return reference_date

    in_days = re.search(r"\bin\s+(\d{1,2}|" + "|".join(_WORD_NUMBERS) + r")\s+days?\b", normalized)
    if in_days:
        raw = in_days.group(1)
        days = int(raw) if raw.isdigit() else _WORD_NUMBERS[raw]
        return reference_date + timedelta(days=days)

    for day_name, day_num in DAY_NAMES.items():
        if re.search(rf"\b{day_name}\b", normalized):
            days_ahead = (day_num - reference_date.weekday()) % 7
            if days_ahead == 0:
                days_ahead = 7
            return reference_date + timedelta(days=days_ahead)

    iso = re.search(r"\b(\d{4})-(\d{2})-(\d{2})\b", normalized)
    if iso:
        try:
            return date(int(iso.group(1)), int(iso.group(2)), int(iso.group(3)))
        except ValueError:
            return None

    for month_name, month_num in MONTH_NAMES.items():
        day_match = re.search(
            rf"\b{month_name}\s+(\d{{1,2}})(?:st|nd|rd|th)?\b"
            rf"|\b(\d{{1,2}})(?:st|nd|rd|th)?\s+(?:of\s+)?{month_name}\b",
            normalized,
        )
        if day_match:
            day = int(day_match.group(1) or day_match.group(2))
            return _next_occurrence(reference_date, month_num, day)

    slash = re.search(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?\b", normalized)
    if slash:
        month = int(slash.group(1))
        day = int(slash.group(2))
        if slash.group(3):
            year = int(slash.group(3))
            if year < 100:
                year += 2000
            try:
                return date(year, month, day)
            except ValueError:
                return None
        return _next_occurrence(reference_date, month, day)

    return None


def parse_time_preference(text: str) -> tuple[int, int] | None:
    """Parse a time mentioned in free text. Returns (hour, minute) or None."""
    normalized = text.lower().strip()

    if "noon" in normalized:
        return (12, 0)
    if "midnight" in normalized:
        return (0, 0)

    time_patterns = [
        r"\b(\d{1,2}):(\d{2})\s*(am|pm)?\b",
        r"\b(\d{1,2})\s*(am|pm)\b",
    ]

    for pattern in time_patterns:
        match = re.search(pattern, normalized)
        if match:
            groups = match.groups()
            hour = int(groups[0])
            minute = int(groups[1]) if len(groups) == 3 else 0
            am_pm = groups[-1]

            if am_pm and not 1 <= hour <= 12:
                continue
            if am_pm == "pm" and hour != 12:
                hour += 12
            elif am_pm == "am" and hour == 12:
                hour = 0

            if 0 <= hour <= 23 and 0 <= minute <= 59:
                return (hour, minute)

    return None


def _next_occurrence(reference_date: date, month: int, day: int) -> date | None:
    year = reference_date.year
    if month < reference_date.month or (month == reference_date.month and day < reference_date.day):
        year += 1
    try:
        return date(year, month, day)
    except ValueError:
        return None
