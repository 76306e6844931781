"""FastAPI application for the Hydra curve quote service.

Every curve error is returned as HTTP 400 with an ErrorResponse body; the
error kind is never swallowed into a zero quote.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hydra_curve import __version__
from hydra_curve.api.endpoints import router
from hydra_curve.errors import HydraCurveError
from hydra_curve.models.quote import ErrorResponse

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("HYDRA_HOST", "0.0.0.0")
PORT = int(os.environ.get("HYDRA_PORT", "8000"))
DEBUG = os.environ.get("HYDRA_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (64 KB); quote requests are a handful of numbers
MAX_REQUEST_SIZE = 64 * 1024

app = FastAPI(
    title="Hydra Curve",
    description="Composite liquidity curve pricing service",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(HydraCurveError)
async def curve_error_handler(request: Request, exc: HydraCurveError) -> JSONResponse:
    """Report curve errors with their kind."""
    logger.warning(
        "curve_request_rejected",
        path=request.url.path,
        error=exc.kind,
        detail=str(exc),
    )
    body = ErrorResponse(error=exc.kind, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - HYDRA_HOST: Host to bind to (default: 0.0.0.0)
    - HYDRA_PORT: Port to bind to (default: 8000)
    - HYDRA_DEBUG: Enable debug/reload mode (default: false)
    - HYDRA_FEE_BPS: Swap fee in basis points (default: 30)
    """
    uvicorn.run(
        "hydra_curve.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
