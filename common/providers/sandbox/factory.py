from typing import Dict

from common.core.config import settings
from common.core.constants import SandboxProvider
from common.core.otel_axiom_exporter import get_logger
from .interface import SandboxInterface
from .docker_sandbox import DockerSandbox
from .local_sandbox import LocalSandbox

logger = get_logger(__name__)

# Handles by pool key; kept warm for the life of the process
_sandboxes: Dict[str, SandboxInterface] = {}


def get_sandbox(pool_key: str) -> SandboxInterface:
    """Look up the sandbox handle for ``pool_key``.

    The handle is created on first lookup and reused afterwards. It is
    never destroyed by callers.
    """
    sandbox = _sandboxes.get(pool_key)
    if sandbox is not None:
        return sandbox

    if settings.sandbox_provider == SandboxProvider.DOCKER:
        sandbox = DockerSandbox(container_name=pool_key)
    elif settings.sandbox_provider == SandboxProvider.LOCAL:
        sandbox = LocalSandbox(workdir=settings.sandbox_workspace_dir)
    else:
        raise ValueError(f"Unknown sandbox provider: {settings.sandbox_provider}")

    _sandboxes[pool_key] = sandbox
    logger.info(f"Initialized {settings.sandbox_provider.value} sandbox for {pool_key}")
    return sandbox
