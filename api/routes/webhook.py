"""
Webhook endpoint.

Inbound notifications are only logged for now.
"""
import json
import logging

from fastapi import APIRouter, Request


logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/webhook")
async def receive_webhook(request: Request):
    """Log the body and acknowledge. Never fails on malformed input."""
    raw = await request.body()
    text = raw.decode("utf-8", errors="replace")
    try:
        body = json.loads(text) if text else {}
    except ValueError:
        body = text

    logger.info(f"🔔 Webhook received: {body}")
    return {"status": "ok"}
