from typing import Annotated, Optional
from fastapi import Header, Query

from common.core.config import settings
from common.core.exceptions import UnauthorizedError
from common.core.otel_axiom_exporter import trace_span, get_logger
from common.core.security import select_api_key, verify_api_key

logger = get_logger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized: invalid API key"


@trace_span
async def require_api_key(
    api_key: Annotated[Optional[str], Query()] = None,
    x_api_key: Annotated[Optional[str], Header()] = None,
) -> None:
    """Require the shared API key via `api_key` query param or `x-api-key` header."""
    provided_key = select_api_key(api_key, x_api_key)
    if not verify_api_key(provided_key, settings.api_key):
        reason = "missing" if not provided_key else "invalid"
        logger.warning(f"Rejected request with {reason} API key")
        raise UnauthorizedError(UNAUTHORIZED_MESSAGE)
