"""Tests for the storage backends."""

import pytest

from app.store import MemoryStore, SupabaseStore, create_store


class TestMemoryStore:
    def test_append_and_get_return_copies(self):
        store = MemoryStore()
        stored = store.append("bookings", {"id": "b1", "time": "09:00"})
        stored["time"] = "10:00"
        assert store.get("bookings", "b1")["time"] == "09:00"

    def test_requires_id(self):
        with pytest.raises(ValueError):
            MemoryStore().append("bookings", {"time": "09:00"})

    def test_list_filtered(self):
        store = MemoryStore()
        store.append("bookings", {"id": "1", "date": "2025-06-02", "status": "confirmed"})
        store.append("bookings", {"id": "2", "date": "2025-06-02", "status": "cancelled"})
        store.append("bookings", {"id": "3", "date": "2025-06-03", "status": "confirmed"})
        rows = store.list_filtered("bookings", predicate=lambda r: r["status"] != "cancelled", date="2025-06-02")
        assert [r["id"] for r in rows] == ["1"]
        assert [r["id"] for r in store.list_filtered("bookings")] == ["1", "2", "3"]
        assert store.list_filtered("nothing") == []

    def test_update_by_key(self):
        store = MemoryStore()
        store.append("clients", {"id": "c1", "status": "lead"})
        assert store.update_by_key("clients", "c1", {"status": "active"})["status"] == "active"
        assert store.update_by_key("clients", "missing", {"status": "active"}) is None


class FakeQuery:
    """Mimics the chained supabase-py table query builder.

    Like a real table without an ORDER BY, it hands rows back newest first.
    """

    def __init__(self, table):
        self.table = table
        self.filters = {}
        self.op = ("select", None)
        self.order_by = None

    def select(self, cols):
        return self

    def insert(self, record):
        self.op = ("insert", record)
        return self

    def update(self, changes):
        self.op = ("update", changes)
        return self

    def eq(self, key, value):
        self.filters[key] = value
        return self

    def limit(self, n):
        return self

    def order(self, column):
        self.order_by = column
        return self

    def execute(self):
        kind, payload = self.op
        if kind == "insert":
            self.table.insert(0, dict(payload))
            return type("Resp", (), {"data": [dict(payload)]})
        matched = [r for r in self.table if all(r.get(k) == v for k, v in self.filters.items())]
        if kind == "update":
            for r in matched:
                r.update(payload)
        if self.order_by is not None:
            matched.sort(key=lambda r: r.get(self.order_by) or "")
        return type("Resp", (), {"data": [dict(r) for r in matched]})


class FakeSupabase:
    def __init__(self):
        self.tables = {}

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, []))


class TestSupabaseStore:
    def test_round_trip(self):
        store = SupabaseStore(FakeSupabase())
        store.append("bookings", {"id": "1", "date": "2025-06-02", "status": "confirmed", "createdAt": "t1"})
        store.append("bookings", {"id": "2", "date": "2025-06-03", "status": "confirmed", "createdAt": "t2"})
        assert store.get("bookings", "2")["date"] == "2025-06-03"
        assert store.get("bookings", "3") is None
        assert [r["id"] for r in store.list_filtered("bookings", date="2025-06-02")] == ["1"]
        assert store.update_by_key("bookings", "1", {"status": "cancelled"})["status"] == "cancelled"
        assert store.list_filtered("bookings", predicate=lambda r: r["status"] == "cancelled")[0]["id"] == "1"

    def test_ledger_runs_on_supabase_store(self):
        from app.ledger import BookingLedger

        ledger = BookingLedger(SupabaseStore(FakeSupabase()))
        booking = ledger.create_booking({"name": "A", "email": "a@x.com", "date": "2025-06-02", "time": "09:00"})
        assert ledger.cancel_booking(booking["id"])["status"] == "cancelled"

    def test_list_filtered_returns_creation_order(self):
        store = SupabaseStore(FakeSupabase())
        for i, stamp in enumerate(["2025-06-01T10:00:00", "2025-06-01T11:00:00", "2025-06-01T12:00:00"]):
            store.append("billing", {"id": str(i), "provider": "pika", "createdAt": stamp})
        assert [r["id"] for r in store.list_filtered("billing")] == ["0", "1", "2"]
        assert [r["id"] for r in store.list_filtered("billing", provider="pika")] == ["0", "1", "2"]

    def test_ledger_ties_keep_creation_order(self, monkeypatch):
        from app import ledger as ledger_module

        stamps = iter(["2025-06-01T10:00:00", "2025-06-01T11:00:00"])
        monkeypatch.setattr(ledger_module, "utcnow", lambda: next(stamps))
        ledger = ledger_module.BookingLedger(SupabaseStore(FakeSupabase()))
        first = ledger.create_booking({"name": "A", "email": "a@x.com", "date": "2025-06-02", "time": "09:00"})
        ledger.cancel_booking(first["id"])
        second = ledger.create_booking({"name": "B", "email": "b@x.com", "date": "2025-06-02", "time": "09:00"})
        assert [b["id"] for b in ledger.list_bookings()] == [first["id"], second["id"]]


class TestCreateStore:
    def test_memory(self):
        assert isinstance(create_store("memory"), MemoryStore)

    def test_supabase_needs_credentials(self):
        with pytest.raises(RuntimeError):
            create_store("supabase")

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store("redis")
