# app/config.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "production")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SERVICE_NAME = "Reelhouse Video Services"

# comma separated; "*" for anything
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

# ──────────────────────────────────────────────────────────────────────────────
# Storage ("memory" keeps everything for the process lifetime only)
# ──────────────────────────────────────────────────────────────────────────────
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE = os.getenv("SUPABASE_SERVICE_ROLE")

# ──────────────────────────────────────────────────────────────────────────────
# Video generation providers
# ──────────────────────────────────────────────────────────────────────────────
VIDEO_DEFAULT_PROVIDER = os.getenv("VIDEO_DEFAULT_PROVIDER", "stabilityai")
VIDEO_REQUEST_TIMEOUT = float(os.getenv("VIDEO_REQUEST_TIMEOUT", "60"))

STABILITY_API_KEY = os.getenv("STABILITY_API_KEY", "")
STABILITY_BASE_URL = os.getenv("STABILITY_BASE_URL", "https://api.stability.ai")
PIKA_API_KEY = os.getenv("PIKA_API_KEY", "")
PIKA_BASE_URL = os.getenv("PIKA_BASE_URL", "https://api.pika.art")
RUNWAY_API_KEY = os.getenv("RUNWAY_API_KEY", "")
RUNWAY_BASE_URL = os.getenv("RUNWAY_BASE_URL", "https://api.runwayml.com")

# ──────────────────────────────────────────────────────────────────────────────
# Stripe (checked when a payment endpoint is hit, not at import)
# ──────────────────────────────────────────────────────────────────────────────
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
STRIPE_WEBHOOK_SECRET = os.getenv("STRIPE_WEBHOOK_SECRET")
STRIPE_CURRENCY = os.getenv("STRIPE_CURRENCY", "usd")
SUCCESS_URL = os.getenv("SUCCESS_URL", f"{FRONTEND_URL}/payment/success")
CANCEL_URL = os.getenv("CANCEL_URL", f"{FRONTEND_URL}/payment/cancel")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # third-party clients are chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
