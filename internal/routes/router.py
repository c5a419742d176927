"""Internal routes aggregator.

Routes in this module are mounted at root level (not under /api/v1) and
carry no API key check, so orchestrators can probe the pod directly.
"""

from fastapi import APIRouter

from internal.routes import probes

internal_router = APIRouter()

# Liveness/readiness probes
internal_router.include_router(probes.router)
