"""Kubernetes probe endpoints.

These endpoints are internal-only and unauthenticated. They are mounted
at the root, outside /api/v1.
"""

from fastapi import APIRouter

from common.core.config import settings
from common.providers.rate_limiter.limiter import limiter

router = APIRouter(tags=["internal"])


@router.get("/healthz", include_in_schema=False)
@limiter.exempt
async def healthz():
    """Liveness probe - is the process alive?"""
    return {"status": "ok"}


@router.get("/readyz", include_in_schema=False)
@limiter.exempt
async def readyz():
    """Readiness probe - is the service configured to accept compile requests?"""
    if not settings.api_key:
        return {"status": "degraded", "reason": "api key not configured"}
    return {"status": "ok"}
