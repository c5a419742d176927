from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class SandboxProvider(str, Enum):
    """Sandbox provider types."""

    DOCKER = "docker"
    LOCAL = "local"


# Pool key shared by every request against this deployment
DEFAULT_SANDBOX_POOL_KEY = "latex-compiler-main"

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_DOWNLOAD_FILENAME = "document.pdf"
OBJECT_KEY_HEADER = "X-R2-Object-Key"

API_V1_PREFIX = "/api/v1"
