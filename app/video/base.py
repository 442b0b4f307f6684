# app/video/base.py
"""
Provider adapter interface.

Each adapter turns the common (prompt, duration, style) request into its
vendor's request body, makes exactly one HTTP call, and maps the reply into
one of two result shapes:

    {"videoUrl", "provider", "cost", "duration"}      finished artifact
    {"taskId", "provider", "cost", "status"}          async task handle
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..errors import GenerationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    base_url: str
    cost_per_video: float
    max_duration: int
    api_key: str = ""


@dataclass
class GenerationRequest:
    prompt: str
    duration: int
    style: str
    client_id: Optional[str] = None
    project_id: Optional[str] = None


class VideoProvider(ABC):
    path: str = ""

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @abstractmethod
    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        ...

    @abstractmethod
    def parse_response(self, data: Any, request: GenerationRequest) -> Dict[str, Any]:
        """Map the vendor JSON to a result dict. KeyError/IndexError/TypeError mean a malformed body."""

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    async def submit(self, request: GenerationRequest, client: httpx.AsyncClient) -> Dict[str, Any]:
        url = f"{self.config.base_url.rstrip('/')}{self.path}"
        try:
            resp = await client.post(url, json=self.build_body(request), headers=self.headers())
            resp.raise_for_status()
            return self.parse_response(resp.json(), request)
        except httpx.HTTPStatusError as e:
            log.error("%s returned %s: %s", self.name, e.response.status_code, e.response.text[:500])
            raise GenerationError(self.name, e) from e
        except httpx.HTTPError as e:
            log.error("%s request failed: %s", self.name, e)
            raise GenerationError(self.name, e) from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            log.error("%s sent an unusable response: %r", self.name, e)
            raise GenerationError(self.name, e) from e
