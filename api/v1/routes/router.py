from fastapi import APIRouter

from api.v1.routes import (
    health,
)
from packages.compilation.routes import compile

api_router = APIRouter()

# Health check (no auth required)
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Compile endpoint (API key enforced per route so 405 can precede auth)
api_router.include_router(compile.router, tags=["compile"])
