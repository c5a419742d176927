from typing import Optional

from .interface import StorageInterface
from .s3 import S3Storage

# Global instance
_storage: Optional[StorageInterface] = None


def get_storage() -> StorageInterface:
    """Get the shared storage signer instance."""
    global _storage

    if _storage is None:
        _storage = S3Storage()
    return _storage
