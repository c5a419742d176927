from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import (
    DEFAULT_SANDBOX_POOL_KEY,
    Environment,
    SandboxProvider,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # API Settings
    app_name: str = "latex-compile-service"
    api_version: str = "v1"
    debug: bool = False

    # Shared secret callers present as `api_key` query param or `x-api-key` header
    api_key: str = ""

    # Cloudflare R2 (S3-compatible)
    r2_account_id: str = ""
    r2_access_key_id: str = ""
    r2_secret_access_key: str = ""
    r2_bucket_name: str = "latex-box"
    aws_region: str = "auto"
    s3_endpoint_url: Optional[str] = None  # Overrides the R2 endpoint (LocalStack, MinIO)
    upload_url_expiration_seconds: int = 3600
    object_key_prefix: str = "documents"

    @property
    def r2_endpoint_url(self) -> str:
        """Construct the R2 endpoint from the account id."""
        if self.s3_endpoint_url:
            return self.s3_endpoint_url
        return f"https://{self.r2_account_id}.r2.cloudflarestorage.com"

    # Sandbox
    sandbox_provider: SandboxProvider = SandboxProvider.DOCKER
    sandbox_pool_key: str = DEFAULT_SANDBOX_POOL_KEY
    sandbox_workspace_dir: str = "/workspace"
    docker_binary: str = "docker"

    # Rate limiting
    rate_limit_storage_uri: str = "memory://"
    default_rate_limits: List[str] = ["5/second", "120/minute"]

    # OpenTelemetry
    otel_service_name: str = "latex-compile-service"
    otel_service_version: str = "0.1.0"

    # Axiom (exporters are only configured when a token is present)
    axiom_token: Optional[str] = None
    axiom_dataset: Optional[str] = None

    @property
    def cors_allowed_origins(self) -> List[str]:
        """Auto-select CORS origins based on environment."""
        if self.environment == Environment.LOCAL:
            return [
                "http://localhost:3000",
                "http://localhost:3001",
            ]
        return ["*"]


settings = Settings()
