from abc import ABC, abstractmethod
from typing import List

from .models import ExecResult


class SandboxInterface(ABC):
    """A long-lived execution environment exposing file and process primitives.

    Handles are shared across requests; callers never tear them down.
    """

    @abstractmethod
    async def write_file(self, path: str, content: str) -> None:
        """
        Write text to a file inside the sandbox, replacing any existing file.

        Raises:
            SandboxError: If the file could not be written
        """
        pass

    @abstractmethod
    async def exec(self, args: List[str]) -> ExecResult:
        """
        Run a command inside the sandbox.

        Args:
            args: Argument vector; never interpreted by a shell

        Returns:
            ExecResult with exit status and captured output

        Raises:
            SandboxError: If the command could not be launched at all
        """
        pass

    @abstractmethod
    async def read_file(self, path: str) -> bytes:
        """
        Read a file from the sandbox.

        Raises:
            SandboxError: If the file does not exist or cannot be read
        """
        pass
