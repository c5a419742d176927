"""
Centralized object key construction for published artifacts.

All keys follow the pattern: {prefix}/{YYYY-MM-DD}/{random_id}.pdf
The date is the UTC calendar day of publication. The random id is minted
fresh per artifact and is unrelated to the sandbox job id, so storage keys
never reveal transient sandbox filenames.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from common.core.config import settings


def get_document_date_prefix(now: Optional[datetime] = None) -> str:
    """
    Get the day-granular prefix for documents published at ``now``.

    Pattern: {prefix}/{YYYY-MM-DD}

    Args:
        now: Publication time (defaults to the current UTC time)

    Returns:
        Key prefix shared by every document published that day
    """
    now = now or datetime.now(timezone.utc)
    day = now.astimezone(timezone.utc).strftime("%Y-%m-%d")
    return f"{settings.object_key_prefix}/{day}"


def get_document_object_key(now: Optional[datetime] = None) -> str:
    """
    Get a fresh object key for a compiled PDF.

    Pattern: {prefix}/{YYYY-MM-DD}/{uuid4}.pdf

    Args:
        now: Publication time (defaults to the current UTC time)

    Returns:
        Object key under which the PDF is uploaded
    """
    return f"{get_document_date_prefix(now)}/{uuid.uuid4()}.pdf"
