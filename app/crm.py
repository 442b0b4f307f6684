# app/crm.py
"""Clients, their projects and the communication log."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .errors import NotFound, ValidationError
from .store import Store, new_id, utcnow
from .video.dispatcher import VideoGenerator

log = logging.getLogger(__name__)

CLIENT_STATUSES = ("lead", "active", "completed", "inactive")
PROJECT_STATUSES = ("pending", "in-progress", "review", "completed", "cancelled")


class ClientService:
    def __init__(self, store: Store, generator: VideoGenerator):
        self.store = store
        self.generator = generator

    # ---- clients -------------------------------------------------------------
    def list_clients(self) -> List[Dict[str, Any]]:
        out = []
        for client in self.store.list_filtered("clients"):
            projects = self.store.list_filtered("projects", clientId=client["id"])
            bookings = (
                self.store.list_filtered("bookings", email=client["email"]) if client.get("email") else []
            )
            out.append({
                **client,
                "totalProjects": len(projects),
                "totalSpent": _total_cost(projects),
                "totalBookings": len(bookings),
            })
        return out

    def get_client(self, client_id: str) -> Dict[str, Any]:
        client = self.store.get("clients", client_id)
        if client is None:
            raise NotFound("Client not found")
        return client

    def create_client(self, data: Dict[str, Any], **extra: Any) -> Dict[str, Any]:
        now = utcnow()
        client = {
            "id": new_id(),
            "name": data.get("name"),
            "email": data.get("email"),
            "phone": data.get("phone"),
            "company": data.get("company"),
            "notes": data.get("notes"),
            "status": "lead",
            "createdAt": now,
            "lastContact": now,
            **extra,
        }
        return self.store.append("clients", client)

    def create_from_booking(self, booking: Dict[str, Any]) -> Dict[str, Any]:
        client = self.create_client(booking, source="website_booking", bookingId=booking["id"])
        log.info("New client %s created from booking %s", client["id"], booking["id"])
        return client

    def update_client(self, client_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        self.get_client(client_id)
        status = updates.get("status")
        if status is not None and status not in CLIENT_STATUSES:
            raise ValidationError(f"Unknown client status: {status}")
        changes = {k: v for k, v in updates.items() if k != "id"}
        changes["updatedAt"] = utcnow()
        return self.store.update_by_key("clients", client_id, changes)

    def get_client_details(self, client_id: str) -> Dict[str, Any]:
        client = self.get_client(client_id)
        projects = self.store.list_filtered("projects", clientId=client_id)
        return {
            **client,
            "projects": projects,
            "communications": self.store.list_filtered("communications", clientId=client_id),
            "totalSpent": _total_cost(projects),
        }

    def _touch(self, client_id: str, **changes: Any) -> None:
        self.store.update_by_key("clients", client_id, {"lastContact": utcnow(), **changes})

    # ---- projects ------------------------------------------------------------
    def create_project(self, client_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self.get_client(client_id)
        specs = data.get("videoSpecs") or {}
        project = {
            "id": new_id(),
            "clientId": client_id,
            "title": data.get("title"),
            "description": data.get("description"),
            "requirements": data.get("requirements"),
            "budget": data.get("budget"),
            "deadline": data.get("deadline"),
            "videoSpecs": {
                "duration": specs.get("duration") or 30,
                "style": specs.get("style") or "cinematic",
                "provider": specs.get("provider") or self.generator.default_provider,
                "prompt": specs.get("prompt") or "",
            },
            "status": "pending",
            "totalCost": 0,
            "createdAt": utcnow(),
            "payments": [],
            "videos": [],
        }
        project = self.store.append("projects", project)
        self._touch(client_id, status="active")
        return project

    def get_project(self, client_id: str, project_id: str) -> Dict[str, Any]:
        project = self.store.get("projects", project_id)
        if project is None or project["clientId"] != client_id:
            raise NotFound("Project not found")
        return project

    async def generate_project_video(
        self,
        client_id: str,
        project_id: str,
        prompt: Optional[str] = None,
        override_specs: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        project = self.get_project(client_id, project_id)
        specs = {**project["videoSpecs"], **(override_specs or {})}
        prompt = prompt or specs.get("prompt") or ""

        result = await self.generator.generate(
            prompt,
            provider=specs.get("provider"),
            duration=specs.get("duration"),
            style=specs.get("style"),
            client_id=client_id,
            project_id=project_id,
        )

        video = {
            "id": new_id(),
            "prompt": prompt,
            "result": result,
            "createdAt": utcnow(),
            "status": result.get("status") or "completed",
        }
        # other generations may have finished while we awaited; merge into the current record
        current = self.get_project(client_id, project_id)
        self.store.update_by_key("projects", project_id, {
            "videos": current["videos"] + [video],
            "status": "in-progress",
            "totalCost": (current.get("totalCost") or 0) + result["cost"],
        })
        return video

    # ---- communications ------------------------------------------------------
    def log_communication(self, client_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self.get_client(client_id)
        communication = {
            "id": new_id(),
            "clientId": client_id,
            "type": data.get("type"),
            "subject": data.get("subject"),
            "notes": data.get("notes"),
            "followUpDate": data.get("followUpDate"),
            "createdAt": utcnow(),
        }
        communication = self.store.append("communications", communication)
        self._touch(client_id)
        return communication


def _total_cost(projects: List[Dict[str, Any]]) -> float:
    return sum(p.get("totalCost") or 0 for p in projects)
