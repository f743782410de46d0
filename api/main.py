"""
SP-API Order Relay - Main FastAPI Application.

HTTP relay between the order spreadsheet automation and Amazon's
Selling Partner API: order lookups, flattened order lists, webhook
logging and shipment confirmation.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import time

from api.routes import health, orders, shipments, webhook
from core.domain.errors import RelayError
from core.infrastructure.logging import configure_logging
from core.settings import get_server_settings


# Setup logging
configure_logging(get_server_settings().log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="SP-API Order Relay",
    description="""
    Relay between the order spreadsheet automation and Amazon SP-API.

    Features:
    - Single order passthrough
    - Flattened unshipped-order list with line items
    - Webhook logging
    - Shipment confirmation
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    # Unhandled exceptions re-raise through here and become a 500 outside it
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
    finally:
        duration = time.time() - start_time
        logger.info(
            f"← {request.method} {request.url.path} "
            f"[{status_code}] ({duration:.3f}s)"
        )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Map relay errors onto their status code and JSON body."""
    logger.error(f"❌ Error in {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request input is a 400, like a missing field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "detail": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception in {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or exc.__class__.__name__},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(orders.router, tags=["Orders"])
app.include_router(shipments.router, tags=["Shipments"])
app.include_router(webhook.router, tags=["Webhook"])


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    server = get_server_settings()
    logger.info(f"🚀 Server running on port {server.port}")
    uvicorn.run(app, host=server.host, port=server.port)


if __name__ == "__main__":
    run()
