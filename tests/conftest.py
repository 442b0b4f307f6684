"""Shared test fixtures: fresh in-memory storage and a stubbed provider HTTP layer per test."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import deps
from app.crm import ClientService
from app.ledger import BookingLedger
from app.main import app
from app.store import MemoryStore
from app.video.base import ProviderConfig
from app.video.dispatcher import VideoGenerator, build_registry

TEST_PROVIDERS = [
    ProviderConfig("stabilityai", "https://stability.test", 0.50, 4, "sk-stability"),
    ProviderConfig("pika", "https://pika.test", 1.00, 10, "sk-pika"),
    ProviderConfig("runway", "https://runway.test", 5.00, 16, "sk-runway"),
]


def default_vendor_reply(request: httpx.Request) -> httpx.Response:
    host = request.url.host
    if host == "stability.test":
        return httpx.Response(200, json={"artifacts": [{"base64": "AAAAGGZ0eXBpc29t"}]})
    if host == "pika.test":
        return httpx.Response(200, json={"id": "pika-task-1"})
    if host == "runway.test":
        return httpx.Response(200, json={"task": {"id": "runway-task-1"}})
    return httpx.Response(404, json={"error": "unknown host"})


class VendorStub:
    """Records outgoing provider requests; ``reply`` can be swapped per test."""

    def __init__(self):
        self.requests = []
        self.reply = default_vendor_reply

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def vendor():
    return VendorStub()


@pytest.fixture
def generator(store, vendor):
    return VideoGenerator(
        build_registry(TEST_PROVIDERS),
        store=store,
        default_provider="stabilityai",
        timeout=5,
        transport=httpx.MockTransport(vendor),
    )


@pytest.fixture
def client_service(store, generator):
    return ClientService(store, generator)


@pytest.fixture
def ledger(store, client_service):
    return BookingLedger(store, on_created=client_service.create_from_booking)


@pytest.fixture
def api(store, ledger, generator, client_service):
    app.dependency_overrides[deps.get_store] = lambda: store
    app.dependency_overrides[deps.get_ledger] = lambda: ledger
    app.dependency_overrides[deps.get_generator] = lambda: generator
    app.dependency_overrides[deps.get_client_service] = lambda: client_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
