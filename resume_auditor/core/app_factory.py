"""Application factory for the FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers) so
tests can build isolated instances.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_auditor.api.routes import health_router, resume_router
from resume_auditor.core.config import Settings, settings as default_settings
from resume_auditor.core.exception_handlers import setup_exception_handlers
from resume_auditor.core.logging import configure_logging
from resume_auditor.core.middleware import request_id_middleware

OPENAPI_TAGS = [
    {"name": "Resume", "description": "ATS audit and rewrite of raw resume text."},
    {"name": "Health", "description": "Liveness checks."},
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        settings: Optional settings; defaults to the process-wide instance.

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """
    cfg = settings or default_settings

    # Logging first so subsequent init logs are formatted as desired
    configure_logging(cfg.log)

    app = FastAPI(
        title="Resume ATS Auditor API",
        description=(
            "Audits raw resume text with a hosted LLM and returns a structured "
            "JSON result: audit findings, before/after ATS scores, an ATS-safe "
            "plain-text rewrite and a credibility verdict."
        ),
        version="0.1.0",
        debug=cfg.app.debug,
        openapi_tags=OPENAPI_TAGS,
    )

    app.middleware("http")(request_id_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.app.cors_origin_list,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[cfg.log.request_id_header],
    )

    setup_exception_handlers(app)

    app.include_router(resume_router, prefix="/api")
    app.include_router(health_router)

    return app
