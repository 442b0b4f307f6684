# app/video/dispatcher.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Type

import httpx

from .. import config
from ..errors import UnsupportedProvider, ValidationError
from ..store import Store, new_id, utcnow
from .base import GenerationRequest, ProviderConfig, VideoProvider
from .providers import PikaProvider, RunwayProvider, StabilityProvider

log = logging.getLogger(__name__)

PROVIDER_CLASSES: Dict[str, Type[VideoProvider]] = {
    "stabilityai": StabilityProvider,
    "pika": PikaProvider,
    "runway": RunwayProvider,
}

DEFAULT_DURATION = 4
DEFAULT_STYLE = "cinematic"


def default_provider_configs() -> List[ProviderConfig]:
    return [
        # Stable Video Diffusion, cheapest
        ProviderConfig("stabilityai", config.STABILITY_BASE_URL, 0.50, 4, config.STABILITY_API_KEY),
        ProviderConfig("pika", config.PIKA_BASE_URL, 1.00, 10, config.PIKA_API_KEY),
        # premium but highest quality
        ProviderConfig("runway", config.RUNWAY_BASE_URL, 5.00, 16, config.RUNWAY_API_KEY),
    ]


def build_registry(configs: Iterable[ProviderConfig]) -> Dict[str, VideoProvider]:
    registry: Dict[str, VideoProvider] = {}
    for cfg in configs:
        cls = PROVIDER_CLASSES.get(cfg.name)
        if cls is None:
            raise UnsupportedProvider(cfg.name)
        registry[cfg.name] = cls(cfg)
    return registry


class VideoGenerator:
    """Routes generation requests to the named provider and records a billing entry per call."""

    def __init__(
        self,
        providers: Dict[str, VideoProvider],
        store: Optional[Store] = None,
        default_provider: str = "stabilityai",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.providers = providers
        self.store = store
        self.default_provider = default_provider
        self.timeout = timeout
        self.transport = transport

    def get_provider(self, name: str) -> VideoProvider:
        try:
            return self.providers[name]
        except KeyError:
            raise UnsupportedProvider(name) from None

    async def generate(
        self,
        prompt: str,
        provider: Optional[str] = None,
        duration: Optional[int] = None,
        style: Optional[str] = None,
        client_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        adapter = self.get_provider(provider or self.default_provider)
        if not prompt or not prompt.strip():
            raise ValidationError("A prompt is required to generate a video")

        request = GenerationRequest(
            prompt=prompt.strip(),
            duration=min(int(duration or DEFAULT_DURATION), adapter.config.max_duration),
            style=style or DEFAULT_STYLE,
            client_id=client_id,
            project_id=project_id,
        )
        log.info("Generating video with %s for client %s (project %s)", adapter.name, client_id, project_id)
        self.log_video_request(client_id, adapter.name, adapter.config.cost_per_video)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await adapter.submit(request, client)

    def log_video_request(self, client_id: Optional[str], provider: str, cost: float) -> Dict[str, Any]:
        now = utcnow()
        entry = {
            "id": new_id(),
            "clientId": client_id,
            "provider": provider,
            "cost": cost,
            "timestamp": now,
            "createdAt": now,
            "status": "initiated",
        }
        log.info("Video generation logged: %s", entry)
        if self.store is not None:
            self.store.append("billing", entry)
        return entry

    def list_provider_costs(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": name,
                "costPerVideo": p.config.cost_per_video,
                "maxDuration": p.config.max_duration,
            }
            for name, p in self.providers.items()
        ]
