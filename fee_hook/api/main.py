"""FastAPI application for the fee hook service."""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fee_hook import __version__
from fee_hook.api.endpoints import router
from fee_hook.errors import FeeArithmeticError, InvalidArgument, OutOfRange

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("FEE_HOOK_HOST", "0.0.0.0")
PORT = int(os.environ.get("FEE_HOOK_PORT", "8000"))
DEBUG = os.environ.get("FEE_HOOK_DEBUG", "false").lower() in ("true", "1", "yes")
LOG_LEVEL = os.environ.get("FEE_HOOK_LOG_LEVEL", "INFO").upper()

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

# Check web3 availability at startup
try:
    import web3  # noqa: F401

    WEB3_AVAILABLE = True
except ImportError:
    WEB3_AVAILABLE = False

logger = structlog.get_logger()

app = FastAPI(
    title="Oracle Fee Hook",
    description="Dynamic LP fee computation against a reference price",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(InvalidArgument)
@app.exception_handler(OutOfRange)
async def invalid_input_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.warning("fee_request_rejected", error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(FeeArithmeticError)
async def fee_arithmetic_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.warning("fee_computation_failed", error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "web3_available": WEB3_AVAILABLE}


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Console logging for the service process."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
    )


def run() -> None:
    """Run the fee hook API server.

    Configuration via environment variables:
    - FEE_HOOK_HOST: Host to bind to (default: 0.0.0.0)
    - FEE_HOOK_PORT: Port to bind to (default: 8000)
    - FEE_HOOK_DEBUG: Enable debug/reload mode (default: false)
    - FEE_HOOK_LOG_LEVEL: Minimum log level (default: INFO)
    """
    configure_logging()
    uvicorn.run(
        "fee_hook.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
