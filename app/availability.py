# app/availability.py
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional, Sequence, Union

from .errors import InvalidInput
from .store import Store

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_FULL_DAY = ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00")

DEFAULT_AVAILABILITY: Dict[str, Sequence[str]] = {
    "monday": _FULL_DAY,
    "tuesday": _FULL_DAY,
    "wednesday": _FULL_DAY,
    "thursday": _FULL_DAY,
    "friday": ("09:00", "10:00", "11:00", "14:00", "15:00"),
    "saturday": (),
    "sunday": (),
}

DateLike = Union[date, datetime, str, None]


def parse_date(value: DateLike) -> date:
    """Day-granularity date from a date, datetime or ISO string; time-of-day is dropped."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise InvalidInput("Date parameter required")
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidInput(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def normalize_time(value: str) -> str:
    """Zero-padded ``HH:MM`` slot label; "9:00" and "09:00" are the same slot."""
    try:
        hours, minutes = value.strip().split(":")
        h, m = int(hours), int(minutes)
    except (AttributeError, ValueError):
        raise InvalidInput(f"Invalid time: {value!r} (expected HH:MM)") from None
    if not (hours.isdigit() and minutes.isdigit()) or len(minutes) != 2 or not (0 <= h < 24 and 0 <= m < 60):
        raise InvalidInput(f"Invalid time: {value!r} (expected HH:MM)")
    return f"{h:02d}:{m:02d}"


def template_slots(day: date, template: Optional[Dict[str, Sequence[str]]] = None) -> Sequence[str]:
    return (template or DEFAULT_AVAILABILITY).get(weekday_name(day), ())


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def active_bookings(store: Store, day: str, time: Optional[str] = None) -> List[dict]:
    """Non-cancelled bookings on ``day`` (ISO string), optionally for one slot."""
    equals = {"date": day}
    if time is not None:
        equals["time"] = time
    return store.list_filtered(
        "bookings", predicate=lambda b: b.get("status") != "cancelled", **equals
    )


def get_available_slots(
    store: Store,
    value: DateLike,
    template: Optional[Dict[str, Sequence[str]]] = None,
) -> List[str]:
    day = parse_date(value)
    slots = template_slots(day, template)
    taken = {b["time"] for b in active_bookings(store, day.isoformat())}
    return [s for s in slots if s not in taken]
