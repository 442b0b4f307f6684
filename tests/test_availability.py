"""Tests for open-slot computation against the weekly template."""

from datetime import date, datetime

import pytest

from app.availability import DEFAULT_AVAILABILITY, get_available_slots, normalize_time, parse_date, weekday_name
from app.errors import InvalidInput

MONDAY = "2025-06-02"
FRIDAY = "2025-06-06"
SATURDAY = "2025-11-29"


def _book(ledger, day, time, email="a@x.com"):
    return ledger.create_booking({"name": "A", "email": email, "date": day, "time": time})


class TestTemplate:
    def test_weekday_names_are_locale_independent(self):
        assert weekday_name(date(2025, 6, 2)) == "monday"
        assert weekday_name(date(2025, 6, 8)) == "sunday"

    def test_empty_ledger_returns_full_monday_template(self, store):
        assert get_available_slots(store, MONDAY) == ["09:00", "10:00", "11:00", "14:00", "15:00", "16:00"]

    def test_friday_has_no_four_pm_slot(self, store):
        assert get_available_slots(store, FRIDAY) == ["09:00", "10:00", "11:00", "14:00", "15:00"]

    def test_weekend_is_closed(self, store):
        assert get_available_slots(store, SATURDAY) == []
        assert get_available_slots(store, "2025-11-30") == []

    def test_every_weekday_matches_template_when_empty(self, store):
        for offset in range(7):
            day = date(2025, 6, 2 + offset)
            expected = list(DEFAULT_AVAILABILITY[weekday_name(day)])
            assert get_available_slots(store, day) == expected

    def test_custom_template(self, store):
        template = {"monday": ["08:00", "12:00"]}
        assert get_available_slots(store, MONDAY, template) == ["08:00", "12:00"]
        assert get_available_slots(store, FRIDAY, template) == []


class TestBookedSlots:
    def test_booked_slot_is_removed(self, store, ledger):
        _book(ledger, MONDAY, "09:00")
        slots = get_available_slots(store, MONDAY)
        assert "09:00" not in slots
        assert slots == ["10:00", "11:00", "14:00", "15:00", "16:00"]

    def test_cancelled_slot_reappears(self, store, ledger):
        booking = _book(ledger, MONDAY, "14:00")
        ledger.cancel_booking(booking["id"])
        assert "14:00" in get_available_slots(store, MONDAY)

    def test_other_dates_are_unaffected(self, store, ledger):
        _book(ledger, MONDAY, "10:00")
        assert "10:00" in get_available_slots(store, "2025-06-09")

    def test_template_order_is_preserved(self, store, ledger):
        _book(ledger, MONDAY, "16:00", "b@x.com")
        _book(ledger, MONDAY, "09:00", "c@x.com")
        assert get_available_slots(store, MONDAY) == ["10:00", "11:00", "14:00", "15:00"]

    def test_lookup_does_not_write(self, store):
        get_available_slots(store, MONDAY)
        assert store.list_filtered("bookings") == []


class TestParseDate:
    def test_time_of_day_is_ignored(self, store):
        assert parse_date(datetime(2025, 6, 2, 23, 59)) == date(2025, 6, 2)
        assert parse_date("2025-06-02T18:30:00") == date(2025, 6, 2)

    @pytest.mark.parametrize("value", [None, "", "not-a-date", "2025-13-40", "2025-06-02garbage", "2025-06-0"])
    def test_missing_or_unparseable_date_fails(self, store, value):
        with pytest.raises(InvalidInput):
            get_available_slots(store, value)


class TestNormalizeTime:
    @pytest.mark.parametrize("value,expected", [("9:00", "09:00"), ("09:00", "09:00"), (" 14:00 ", "14:00")])
    def test_zero_pads_hours(self, value, expected):
        assert normalize_time(value) == expected

    @pytest.mark.parametrize("value", ["nine", "9", "9:0", "24:00", "09:60", "09:00:00", "-1:00"])
    def test_rejects_malformed_times(self, value):
        with pytest.raises(InvalidInput):
            normalize_time(value)
