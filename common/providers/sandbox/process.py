"""
Async subprocess helper shared by the sandbox providers.
"""

import asyncio
from typing import List, Optional, Tuple

from common.core.exceptions import SandboxError


async def run_process(
    args: List[str],
    stdin: Optional[bytes] = None,
    cwd: Optional[str] = None,
    discard_stdout: bool = False,
) -> Tuple[int, bytes, bytes]:
    """Run ``args`` without a shell and return (exit_code, stdout, stderr).

    With ``discard_stdout`` the child's stdout goes to /dev/null and ``b""``
    is returned in its place.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.PIPE if stdin is not None else None,
            stdout=asyncio.subprocess.DEVNULL if discard_stdout else asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
    except OSError as e:
        raise SandboxError(f"Failed to launch {args[0]}: {e}") from e

    stdout, stderr = await process.communicate(input=stdin)
    return process.returncode, stdout or b"", stderr


def decode_output(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
