# app/video/providers.py
from __future__ import annotations

from typing import Any, Dict

from .base import GenerationRequest, VideoProvider


class StabilityProvider(VideoProvider):
    """Stable Video Diffusion. Returns the finished clip inline (base64)."""

    path = "/v1/generation/stable-video-diffusion-xl/text-to-video"

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "text_prompts": [{"text": request.prompt}],
            "cfg_scale": 7,
            "motion_bucket_id": 127,
            "seed": 0,
            "steps": 25,
        }

    def parse_response(self, data: Any, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "videoUrl": data["artifacts"][0]["base64"],
            "provider": self.name,
            "cost": self.config.cost_per_video,
            "duration": request.duration,
        }


class PikaProvider(VideoProvider):
    path = "/v1/generate"

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "promptText": request.prompt,
            "duration": request.duration,
            "style": request.style,
            "guidanceScale": 12,
            "seed": 0,
        }

    def parse_response(self, data: Any, request: GenerationRequest) -> Dict[str, Any]:
        task_id = data["id"] if "id" in data else data["task"]["id"]
        return {
            "taskId": task_id,
            "provider": self.name,
            "cost": self.config.cost_per_video,
            "status": "processing",
        }


class RunwayProvider(VideoProvider):
    path = "/v1/tasks"

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "taskType": "gen3a_turbo",
            "internal": False,
            "options": {
                "text_prompt": request.prompt,
                "duration": request.duration,
                "exploreMode": False,
                "watermark": False,
            },
        }

    def parse_response(self, data: Any, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "taskId": data["task"]["id"],
            "provider": self.name,
            "cost": self.config.cost_per_video,
            "status": "processing",
        }
