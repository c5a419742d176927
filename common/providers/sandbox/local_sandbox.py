"""
Local sandbox for development.

Runs commands directly on the host with the workspace directory as the
working directory. Requires tectonic and curl on the host PATH.
"""

import asyncio
from pathlib import Path
from typing import List

from common.core.exceptions import SandboxError
from common.core.otel_axiom_exporter import trace_span, get_logger
from .interface import SandboxInterface
from .models import ExecResult
from .process import decode_output, run_process

logger = get_logger(__name__)


class LocalSandbox(SandboxInterface):
    """Sandbox that uses the host filesystem and process table."""

    def __init__(self, workdir: str):
        self.workdir = Path(workdir)
        self.workdir.mkdir(parents=True, exist_ok=True)

    @trace_span
    async def write_file(self, path: str, content: str) -> None:
        try:
            await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")
        except OSError as e:
            raise SandboxError(f"Failed to write {path}: {e}") from e

    @trace_span
    async def exec(self, args: List[str]) -> ExecResult:
        logger.debug(f"Executing {args[0]} in {self.workdir}")
        exit_code, stdout, stderr = await run_process(
            list(args), cwd=str(self.workdir)
        )
        return ExecResult(
            success=exit_code == 0,
            exit_code=exit_code,
            stdout=decode_output(stdout),
            stderr=decode_output(stderr),
        )

    @trace_span
    async def read_file(self, path: str) -> bytes:
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            raise SandboxError(f"Failed to read {path}: {e}") from e
