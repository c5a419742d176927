"""Global rate limiter instance for SlowAPI."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from common.core.config import settings

# Applied to every route through SlowAPIMiddleware.
# Point rate_limit_storage_uri at Redis when running more than one replica.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=settings.default_rate_limits,
    storage_uri=settings.rate_limit_storage_uri,
)
