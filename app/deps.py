# app/deps.py
from . import config
from .crm import ClientService
from .ledger import BookingLedger
from .store import Store, create_store
from .video.dispatcher import VideoGenerator, build_registry, default_provider_configs

store: Store = create_store(config.STORAGE_BACKEND, config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE)

generator = VideoGenerator(
    build_registry(default_provider_configs()),
    store=store,
    default_provider=config.VIDEO_DEFAULT_PROVIDER,
    timeout=config.VIDEO_REQUEST_TIMEOUT,
)
client_service = ClientService(store, generator)
# every website booking also opens a lead in the CRM
ledger = BookingLedger(store, on_created=client_service.create_from_booking)


def get_store() -> Store:
    return store


def get_ledger() -> BookingLedger:
    return ledger


def get_generator() -> VideoGenerator:
    return generator


def get_client_service() -> ClientService:
    return client_service
