from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict:
    """Liveness probe.

    Does not touch the LLM provider, so it stays green even when the
    credential is missing.
    """

    return {"status": "ok"}
