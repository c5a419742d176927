from fastapi import APIRouter

from common.core.config import settings
from common.providers.rate_limiter.limiter import limiter

router = APIRouter()


@router.get("/")
@limiter.exempt
async def health_check():
    # No rate limiting or logging - probes hit this every few seconds
    return {
        "status": "healthy",
        "service": settings.app_name,
        "sandbox": settings.sandbox_provider.value,
    }
