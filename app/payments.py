# app/payments.py
import logging

import stripe
from fastapi import APIRouter, Depends, HTTPException, Request

from . import config
from .deps import get_store
from .models import CheckoutIn, CheckoutOut
from .store import Store, new_id, utcnow

router = APIRouter(prefix="/api/payments", tags=["payments"])
logger = logging.getLogger(__name__)

stripe.api_key = config.STRIPE_SECRET_KEY

PRICING_TIERS = {
    "basic": {
        "name": "Basic Video",
        "price": 50,
        "features": ["Up to 30 seconds", "AI-generated video", "Basic style options", "1 revision included"],
    },
    "standard": {
        "name": "Standard Video",
        "price": 100,
        "features": [
            "Up to 60 seconds",
            "Premium AI generation",
            "Custom style options",
            "2 revisions included",
            "Music integration",
        ],
    },
    "premium": {
        "name": "Premium Video",
        "price": 200,
        "features": [
            "Up to 2 minutes",
            "High-end AI generation",
            "Fully custom prompts",
            "Unlimited revisions",
            "Music and voice-over",
            "Priority support",
        ],
    },
}


@router.get("/pricing")
async def pricing():
    return {"success": True, "tiers": PRICING_TIERS}


# ---- Create Checkout Session -------------------------------------------------
@router.post("/checkout", response_model=CheckoutOut)
async def create_checkout(body: CheckoutIn, store: Store = Depends(get_store)):
    if not stripe.api_key:
        raise HTTPException(status_code=500, detail="Stripe secret key missing")

    currency = (body.currency or config.STRIPE_CURRENCY).lower()
    try:
        session = stripe.checkout.Session.create(
            mode="payment",
            payment_method_types=["card"],
            customer_email=body.customerEmail,
            line_items=[{
                "price_data": {
                    "currency": currency,
                    "product_data": {"name": body.description or "Video Production"},
                    "unit_amount": int(round(body.amount * 100)),
                },
                "quantity": 1,
            }],
            success_url=config.SUCCESS_URL,
            cancel_url=config.CANCEL_URL,
            metadata={
                "client_id": body.clientId or "",
                "project_id": body.projectId or "",
            },
        )
    except Exception as e:
        logger.error(f"Stripe Checkout create failed: {e}")
        raise HTTPException(status_code=500, detail="Payment creation failed")

    payment = store.append("payments", {
        "id": new_id(),
        "sessionId": session.id,
        "clientId": body.clientId,
        "projectId": body.projectId,
        "amount": body.amount,
        "currency": currency,
        "status": "pending",
        "createdAt": utcnow(),
    })
    logger.info(f"Created checkout session {session.id} for client {body.clientId} project {body.projectId}")
    return {"success": True, "sessionId": session.id, "checkoutUrl": session.url, "payment": payment}


@router.get("/status/{session_id}")
async def payment_status(session_id: str):
    if not stripe.api_key:
        raise HTTPException(status_code=500, detail="Stripe secret key missing")
    try:
        session = stripe.checkout.Session.retrieve(session_id)
    except Exception as e:
        logger.error(f"Stripe session lookup failed for {session_id}: {e}")
        raise HTTPException(status_code=500, detail="Status check failed")

    return {
        "success": True,
        "status": session.payment_status,
        "amount": (session.amount_total or 0) / 100,
        "currency": session.currency,
    }


# ---- Webhook (no auth) -------------------------------------------------------
# Events are only logged; nothing here updates bookings, projects or payments.
@router.post("/webhook")
async def stripe_webhook(request: Request):
    if not config.STRIPE_WEBHOOK_SECRET:
        logger.error("Stripe webhook secret missing (STRIPE_WEBHOOK_SECRET)")
        raise HTTPException(status_code=500, detail="Webhook secret not configured")

    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")
    try:
        event = stripe.Webhook.construct_event(
            payload=payload,
            sig_header=sig_header,
            secret=config.STRIPE_WEBHOOK_SECRET,
        )
    except Exception as e:
        logger.error(f"Stripe webhook verify FAILED: {e}; sig_header_present={bool(sig_header)}")
        raise HTTPException(status_code=400, detail="signature verification failed")

    etype = event.type
    logger.info(f"Stripe webhook received: {etype}")
    if etype == "checkout.session.completed":
        logger.info(f"Payment completed for session {event.data.object.id}")
    elif etype == "payment_intent.payment_failed":
        logger.info(f"Payment failed: {event.data.object.id}")

    return {"success": True}
