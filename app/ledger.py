# app/ledger.py
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence

from .availability import active_bookings, normalize_time, parse_date, template_slots
from .errors import InvalidInput, NotFound, SlotConflict, ValidationError
from .store import Store, new_id, utcnow

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "date", "time")
OPTIONAL_FIELDS = ("phone", "company", "projectType", "budget", "message")

BookingHook = Callable[[Dict[str, Any]], None]


class BookingLedger:
    """Consultation bookings. Records are only ever appended or status-transitioned."""

    collection = "bookings"

    def __init__(
        self,
        store: Store,
        on_created: Optional[BookingHook] = None,
        template: Optional[Dict[str, Sequence[str]]] = None,
    ):
        self.store = store
        self.on_created = on_created
        self.template = template
        self._lock = threading.Lock()

    def create_booking(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        values = {k: _clean(fields.get(k)) for k in REQUIRED_FIELDS}
        if not all(values.values()):
            raise ValidationError("Name, email, date, and time are required")
        try:
            parsed = parse_date(values["date"])
            time = normalize_time(values["time"])
        except InvalidInput as e:
            raise ValidationError(e.message) from None
        day = parsed.isoformat()
        if time not in template_slots(parsed, self.template):
            raise ValidationError(f"{time} is not a consultation slot on {day}")

        booking = {
            "id": new_id(),
            "name": values["name"],
            "email": values["email"],
            "date": day,
            "time": time,
            **{k: fields.get(k) for k in OPTIONAL_FIELDS},
            "status": "confirmed",
            "createdAt": utcnow(),
        }

        # check and append must not interleave with another create
        with self._lock:
            if active_bookings(self.store, day, booking["time"]):
                raise SlotConflict(f"The {booking['time']} slot on {day} is already booked")
            booking = self.store.append(self.collection, booking)

        log.info("New booking %s for %s on %s at %s", booking["id"], booking["email"], day, booking["time"])
        if self.on_created is not None:
            # the booking is already stored; a failing follow-up must not hide it
            try:
                self.on_created(booking)
            except Exception:
                log.exception("Follow-up for booking %s failed", booking["id"])
        return booking

    def list_bookings(self) -> List[Dict[str, Any]]:
        # sorted() is stable, so equal (date, time) keep insertion order
        return sorted(self.store.list_filtered(self.collection), key=lambda b: (b["date"], b["time"]))

    def get_booking(self, booking_id: str) -> Dict[str, Any]:
        booking = self.store.get(self.collection, booking_id)
        if booking is None:
            raise NotFound("Booking not found")
        return booking

    def cancel_booking(self, booking_id: str) -> Dict[str, Any]:
        with self._lock:
            booking = self.get_booking(booking_id)
            if booking["status"] == "cancelled":
                return booking
            booking = self.store.update_by_key(self.collection, booking_id, {"status": "cancelled"})
        log.info("Booking %s cancelled", booking_id)
        return booking


def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value
