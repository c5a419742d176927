from typing import Optional
import hmac


def select_api_key(
    query_key: Optional[str], header_key: Optional[str]
) -> Optional[str]:
    """Pick the caller's credential, preferring the `api_key` query param."""
    return query_key or header_key or None


def verify_api_key(provided_key: Optional[str], expected_key: str) -> bool:
    """Exact match of the provided key against the configured secret."""
    if not provided_key or not expected_key:
        return False
    return hmac.compare_digest(
        provided_key.encode("utf-8"), expected_key.encode("utf-8")
    )
