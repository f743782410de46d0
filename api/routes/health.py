"""
Health check endpoint.

Hit by the hosting platform to wake the service and by load balancers.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Return a plain-text OK without touching upstream."""
    return "OK"
