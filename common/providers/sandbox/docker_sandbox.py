"""
Docker sandbox for running the compiler in a long-lived container.

The pool key names the container. The container is started out of band
(with tectonic and curl installed) and stays warm between requests; this
provider only issues ``docker exec`` calls against it.
"""

from typing import List, Optional

from common.core.config import settings
from common.core.exceptions import SandboxError
from common.core.otel_axiom_exporter import trace_span, get_logger
from .interface import SandboxInterface
from .models import ExecResult
from .process import decode_output, run_process

logger = get_logger(__name__)


class DockerSandbox(SandboxInterface):
    """Sandbox backed by ``docker exec`` into a named container."""

    def __init__(self, container_name: str, workdir: Optional[str] = None):
        self.container_name = container_name
        self.workdir = workdir or settings.sandbox_workspace_dir
        self.docker = settings.docker_binary

    def _exec_prefix(self, interactive: bool = False) -> List[str]:
        cmd = [self.docker, "exec"]
        if interactive:
            cmd.append("-i")
        cmd.extend(["-w", self.workdir, self.container_name])
        return cmd

    @trace_span
    async def write_file(self, path: str, content: str) -> None:
        cmd = self._exec_prefix(interactive=True) + ["tee", path]
        # tee echoes stdin back; only stderr is of interest
        exit_code, _, stderr = await run_process(
            cmd, stdin=content.encode("utf-8"), discard_stdout=True
        )
        if exit_code != 0:
            raise SandboxError(
                f"Failed to write {path} in {self.container_name}: "
                f"{decode_output(stderr).strip()}"
            )

    @trace_span
    async def exec(self, args: List[str]) -> ExecResult:
        logger.debug(f"Executing {args[0]} in container {self.container_name}")
        cmd = self._exec_prefix() + list(args)
        exit_code, stdout, stderr = await run_process(cmd)
        return ExecResult(
            success=exit_code == 0,
            exit_code=exit_code,
            stdout=decode_output(stdout),
            stderr=decode_output(stderr),
        )

    @trace_span
    async def read_file(self, path: str) -> bytes:
        cmd = self._exec_prefix() + ["cat", path]
        exit_code, stdout, stderr = await run_process(cmd)
        if exit_code != 0:
            raise SandboxError(
                f"Failed to read {path} in {self.container_name}: "
                f"{decode_output(stderr).strip()}"
            )
        return stdout
