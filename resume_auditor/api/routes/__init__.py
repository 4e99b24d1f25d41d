from __future__ import annotations

from resume_auditor.api.routes.health import router as health_router
from resume_auditor.api.routes.resume import router as resume_router

__all__ = ["health_router", "resume_router"]
