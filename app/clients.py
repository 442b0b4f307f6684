# app/clients.py
from fastapi import APIRouter, Depends

from .crm import ClientService
from .deps import get_client_service
from .models import ClientIn, ClientUpdate, CommunicationIn, GenerateVideoIn, ProjectIn

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("")
async def list_clients(service: ClientService = Depends(get_client_service)):
    return {"success": True, "clients": service.list_clients()}


@router.post("")
async def create_client(payload: ClientIn, service: ClientService = Depends(get_client_service)):
    client = service.create_client(payload.model_dump())
    return {"success": True, "message": "Client added successfully", "client": client}


@router.put("/{client_id}")
async def update_client(
    client_id: str, payload: ClientUpdate, service: ClientService = Depends(get_client_service)
):
    client = service.update_client(client_id, payload.model_dump(exclude_unset=True))
    return {"success": True, "message": "Client updated successfully", "client": client}


@router.get("/{client_id}")
async def get_client(client_id: str, service: ClientService = Depends(get_client_service)):
    return {"success": True, "client": service.get_client_details(client_id)}


@router.post("/{client_id}/projects")
async def create_project(
    client_id: str, payload: ProjectIn, service: ClientService = Depends(get_client_service)
):
    project = service.create_project(client_id, payload.model_dump(exclude_none=True))
    return {"success": True, "message": "Project created successfully", "project": project}


@router.post("/{client_id}/projects/{project_id}/generate-video")
async def generate_video(
    client_id: str,
    project_id: str,
    payload: GenerateVideoIn,
    service: ClientService = Depends(get_client_service),
):
    overrides = payload.overrideSpecs.model_dump(exclude_none=True) if payload.overrideSpecs else None
    video = await service.generate_project_video(client_id, project_id, payload.prompt, overrides)
    return {
        "success": True,
        "message": "Video generation started",
        "video": video,
        "estimatedCost": video["result"]["cost"],
    }


@router.post("/{client_id}/communications")
async def log_communication(
    client_id: str, payload: CommunicationIn, service: ClientService = Depends(get_client_service)
):
    communication = service.log_communication(client_id, payload.model_dump())
    return {"success": True, "message": "Communication logged", "communication": communication}
