from __future__ import annotations

import re

DAY_VALUES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
DAY_ORDER: dict[str, int] = {day: index for index, day in enumerate(DAY_VALUES, start=1)}
UNKNOWN_DAY_ORDER = len(DAY_VALUES) + 1

TIME_PATTERN: re.Pattern[str] = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def canonical_day(value: str) -> str:
    """Map "mon", "MONDAY", " Monday " and friends to "Monday"."""
    normalized = value.strip().lower()
    for day in DAY_VALUES:
        if normalized in (day.lower(), day[:3].lower()):
            return day
    raise ValueError("Invalid day value")


def validate_time(value: str) -> str:
    value = value.strip()
    if not TIME_PATTERN.match(value):
        raise ValueError("Time must be in HH:MM 24-hour format")
    return value
