from abc import ABC, abstractmethod
from typing import Optional


class StorageInterface(ABC):
    @abstractmethod
    async def generate_presigned_upload_url(
        self, key: str, expiration: int = 3600
    ) -> Optional[str]:
        """
        Generate presigned URL for uploading to a specific key.

        The signature travels in the query string, so any HTTP client can
        PUT to the URL without handling credentials.

        Args:
            key: The storage key to upload to
            expiration: Expiration time in seconds

        Returns:
            Presigned URL for PUT operation
        """
        pass

    @abstractmethod
    async def get_storage_uri(self, key: str) -> str:
        """
        Get the storage URI for a given key in the provider's native format.

        Args:
            key: The storage key

        Returns:
            The storage URI (e.g., 's3://bucket/key' for S3)
        """
        pass
