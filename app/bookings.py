# app/bookings.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from .availability import get_available_slots, parse_date
from .deps import get_ledger, get_store
from .ledger import BookingLedger
from .models import BookingIn
from .store import Store

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("/availability")
async def availability(date: Optional[str] = Query(default=None), store: Store = Depends(get_store)):
    slots = get_available_slots(store, date)
    return {"success": True, "date": parse_date(date).isoformat(), "availableSlots": slots}


@router.post("/book")
async def book(payload: BookingIn, ledger: BookingLedger = Depends(get_ledger)):
    booking = ledger.create_booking(payload.model_dump())
    project = booking.get("projectType") or "video"
    return {
        "success": True,
        "message": (
            f"Hi {booking['name']}! Your consultation is confirmed for {booking['date']} at "
            f"{booking['time']}. We'll discuss your {project} project."
        ),
        "booking": booking,
    }


@router.get("")
async def list_bookings(ledger: BookingLedger = Depends(get_ledger)):
    return {"success": True, "bookings": ledger.list_bookings()}


@router.post("/{booking_id}/cancel")
async def cancel(booking_id: str, ledger: BookingLedger = Depends(get_ledger)):
    booking = ledger.cancel_booking(booking_id)
    return {"success": True, "message": "Booking cancelled", "booking": booking}
