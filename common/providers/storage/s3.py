from typing import Optional
import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from common.core.config import settings
from .interface import StorageInterface
from common.core.otel_axiom_exporter import trace_span, get_logger

logger = get_logger(__name__)


class S3Storage(StorageInterface):
    """S3-compatible storage (Cloudflare R2 by default).

    Only signs requests; the artifact bytes are PUT by whoever holds the URL.
    """

    def __init__(self, bucket_name: Optional[str] = None):
        self.bucket_name = bucket_name or settings.r2_bucket_name

        client_config = {
            "service_name": "s3",
            "aws_access_key_id": settings.r2_access_key_id,
            "aws_secret_access_key": settings.r2_secret_access_key,
            "region_name": settings.aws_region,
            "endpoint_url": settings.r2_endpoint_url,
            "config": Config(
                signature_version="s3v4",
                s3={"addressing_style": "virtual"},
            ),
        }

        self.client = boto3.client(**client_config)

    @trace_span
    async def generate_presigned_upload_url(
        self, key: str, expiration: int = 3600
    ) -> Optional[str]:
        try:
            url = self.client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self.bucket_name, "Key": key},
                ExpiresIn=expiration,
                HttpMethod="PUT",
            )
            return url
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to generate presigned upload URL for {key}: {e}")
            return None

    async def get_storage_uri(self, key: str) -> str:
        """Get the S3 URI for a given key."""
        return f"s3://{self.bucket_name}/{key}"
