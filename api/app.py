"""
FastAPI application factory.

Usage:
    python main.py                                  # Dev server on port 8000
    TAXMAP_PROBE_PROFILE=local-only python main.py

OpenAPI docs available at http://localhost:8000/docs after starting.

Logging format follows APP_LOG_FORMAT (text | json); every request is
logged with a short request id that is also returned as X-Request-ID.
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from api import dependencies
from api.routes import distribution
from api.routes import frontend as frontend_routes
from charts.surfaces import TEMPLATES_DIR
from sources import NoDataAvailable, ProbeChain
from utils.config import AppConfig, UNAVAILABLE_MESSAGE
from utils.logging import configure_logging

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

_logger = logging.getLogger("taxmap_api")
configure_logging(_cfg.log_format)


def create_app(chain: ProbeChain | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        chain: Override the probe chain (useful for testing).

    Returns:
        Configured FastAPI application instance.
    """
    dependencies.set_chain(chain)

    app = FastAPI(
        title="TaxMap Spain",
        summary="Where Spanish taxes go, drawn as a pie chart.",
        description=(
            "Fetches a category → share budget distribution from public "
            "Spanish sources (Datos.gob.es, BOE), placeholder figures for "
            "Ministerio de Hacienda and Gobierto, or a bundled local file, "
            "in that order, and renders it with Chart.js."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "distribution",
                "description": "The acquired distribution and the chart built from it.",
            },
            {
                "name": "meta",
                "description": "Health check.",
            },
        ],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request with a short request id."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, request.url.path, response.status_code,
                duration_ms, request_id,
            )
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(NoDataAvailable)
    async def no_data_handler(request: Request, exc: NoDataAvailable):
        return JSONResponse(
            status_code=503,
            content={
                "error": UNAVAILABLE_MESSAGE,
                "detail": str(exc),
                "status_code": 503,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health():
        """Return 200 OK with the source chain in use."""
        chain = dependencies.get_chain()
        return {
            "status": "ok",
            "profile": chain.profile,
            "sources": chain.names(),
        }

    # ── Routers and templates ─────────────────────────────────────────────────

    app.include_router(distribution.router)
    frontend_routes.set_templates(Jinja2Templates(directory=str(TEMPLATES_DIR)))
    app.include_router(frontend_routes.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.app:app", host=_cfg.api_host, port=_cfg.api_port, reload=False)
