from typing import Optional
from pydantic import BaseModel

from common.core.constants import DEFAULT_DOWNLOAD_FILENAME, PDF_CONTENT_TYPE

LOG_NOT_AVAILABLE = "Log file not available"


class CompilationResult(BaseModel):
    """Outcome of one compiler invocation."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    log_content: Optional[str] = None

    def diagnostic(self) -> str:
        """Human-readable failure report combining stderr and the compiler log."""
        log_content = (
            self.log_content if self.log_content is not None else LOG_NOT_AVAILABLE
        )
        return (
            "LaTeX Compilation Failed:\n\n"
            f"--- STDERR ---\n{self.stderr}\n\n"
            f"--- LOG FILE ---\n{log_content}"
        )


class PublishedArtifact(BaseModel):
    """A compiled PDF after it has been stored."""

    object_key: str
    content: bytes
    filename: str = DEFAULT_DOWNLOAD_FILENAME
    content_type: str = PDF_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


class CompileOutcome(BaseModel):
    """Result of the compile-and-publish pipeline.

    ``artifact`` is set only when compilation succeeded and the PDF was
    published.
    """

    job_id: str
    result: CompilationResult
    artifact: Optional[PublishedArtifact] = None

    @property
    def succeeded(self) -> bool:
        return self.result.success and self.artifact is not None
