# app/store.py
"""
Record storage behind a small interface so the in-memory default can be
swapped for a durable backend without touching the booking/client logic.

Records are plain dicts keyed by ``id``. Every read hands back copies.
"""
from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

log = logging.getLogger(__name__)

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class Store(ABC):
    @abstractmethod
    def append(self, collection: str, record: Record) -> Record:
        """Persist ``record`` (must carry an ``id``) and return the stored copy."""

    @abstractmethod
    def get(self, collection: str, record_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    def list_filtered(
        self,
        collection: str,
        predicate: Optional[Predicate] = None,
        **equals: Any,
    ) -> List[Record]:
        """Records in insertion order whose fields equal ``equals`` and pass ``predicate``."""

    @abstractmethod
    def update_by_key(self, collection: str, record_id: str, changes: Record) -> Optional[Record]:
        """Shallow-merge ``changes`` into the record; ``None`` when it doesn't exist."""


class MemoryStore(Store):
    def __init__(self):
        self._collections: Dict[str, List[Record]] = {}

    def append(self, collection: str, record: Record) -> Record:
        if "id" not in record:
            raise ValueError("record must have an id")
        self._collections.setdefault(collection, []).append(dict(record))
        return dict(record)

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        for row in self._collections.get(collection, []):
            if row["id"] == record_id:
                return dict(row)
        return None

    def list_filtered(self, collection, predicate=None, **equals):
        out = []
        for row in self._collections.get(collection, []):
            if any(row.get(k) != v for k, v in equals.items()):
                continue
            if predicate is not None and not predicate(row):
                continue
            out.append(dict(row))
        return out

    def update_by_key(self, collection, record_id, changes):
        for row in self._collections.get(collection, []):
            if row["id"] == record_id:
                row.update(changes)
                return dict(row)
        return None


class SupabaseStore(Store):
    """
    One Supabase table per collection; columns named like the record keys.
    Every table carries a ``createdAt`` column, which stands in for insertion order.
    """

    def __init__(self, client):
        self.client = client

    def append(self, collection, record):
        resp = self.client.table(collection).insert(record).execute()
        rows = resp.data or []
        return rows[0] if rows else dict(record)

    def get(self, collection, record_id):
        resp = self.client.table(collection).select("*").eq("id", record_id).limit(1).execute()
        rows = resp.data or []
        return rows[0] if rows else None

    def list_filtered(self, collection, predicate=None, **equals):
        q = self.client.table(collection).select("*")
        for key, value in equals.items():
            q = q.eq(key, value)
        rows = q.order("createdAt").execute().data or []
        if predicate is not None:
            rows = [r for r in rows if predicate(r)]
        return rows

    def update_by_key(self, collection, record_id, changes):
        resp = self.client.table(collection).update(changes).eq("id", record_id).execute()
        rows = resp.data or []
        return rows[0] if rows else None


def create_store(backend: str, url: Optional[str] = None, key: Optional[str] = None) -> Store:
    if backend == "memory":
        return MemoryStore()
    if backend == "supabase":
        if not url or not key:
            raise RuntimeError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE")
        from supabase import create_client

        log.info("Using Supabase storage at %s", url)
        return SupabaseStore(create_client(url, key))
    raise ValueError(f"Unknown storage backend: {backend}")
