# app/catalog.py
from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["pricing"])

PRODUCTION_TIERS = {
    "basic": {
        "name": "Basic Video",
        "price": 297,
        "duration": 30,
        "features": ["AI-generated video", "Professional editing", "1 revision", "HD export"],
    },
    "standard": {
        "name": "Standard Video",
        "price": 597,
        "duration": 60,
        "features": ["Premium AI generation", "Custom styles", "2 revisions", "Music integration", "Priority support"],
    },
    "premium": {
        "name": "Premium Video",
        "price": 1297,
        "duration": 120,
        "features": ["High-end AI generation", "Unlimited revisions", "Voice-over", "24/7 support", "Rush delivery"],
    },
}

CAMPAIGNS = {
    "email": {"name": "Email Sequence", "price": 497, "description": "5-email series with your video"},
    "landing": {"name": "Landing Page", "price": 797, "description": "High-converting page with video"},
    "social": {"name": "Social Media Ads", "price": 997, "description": "Facebook & Instagram campaigns"},
    "complete": {"name": "Complete Package", "price": 2497, "description": "Email + Landing Page + Social Ads"},
}


def quote(prompt=None, duration=None, style=None, tier=None) -> dict:
    tier = tier or "standard"
    price = PRODUCTION_TIERS[tier]["price"] if tier in PRODUCTION_TIERS else PRODUCTION_TIERS["standard"]["price"]
    return {
        "prompt": prompt or "Custom video",
        "duration": duration or 30,
        "style": style or "cinematic",
        "tier": tier,
        "price": price,
        "deliveryTime": "2-3 business days" if tier == "premium" else "3-5 business days",
    }


@router.get("/pricing")
async def pricing():
    return {"success": True, "tiers": PRODUCTION_TIERS}


@router.get("/campaigns/pricing")
async def campaign_pricing():
    return {"success": True, "campaigns": CAMPAIGNS}
