# app/videos.py
from fastapi import APIRouter, Depends

from .catalog import quote
from .deps import get_generator
from .models import QuoteIn, VideoGenerateIn
from .video.dispatcher import VideoGenerator

router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.get("/providers")
async def providers(generator: VideoGenerator = Depends(get_generator)):
    return {
        "success": True,
        "defaultProvider": generator.default_provider,
        "providers": generator.list_provider_costs(),
    }


@router.post("/generate")
async def generate(payload: VideoGenerateIn, generator: VideoGenerator = Depends(get_generator)):
    result = await generator.generate(
        payload.prompt,
        provider=payload.provider,
        duration=payload.duration,
        style=payload.style,
        client_id=payload.clientId,
        project_id=payload.projectId,
    )
    return {
        "success": True,
        "message": "Video generation started",
        "result": result,
        "estimatedCost": result["cost"],
    }


@router.post("/quote")
async def video_quote(payload: QuoteIn):
    return {
        "success": True,
        "quote": quote(**payload.model_dump()),
        "nextStep": "Book consultation to discuss your project",
    }
