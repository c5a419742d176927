from pydantic import BaseModel, Field


class ExecResult(BaseModel):
    """Outcome of a command run inside a sandbox."""

    success: bool = Field(..., description="True when the command exited with 0")
    exit_code: int = Field(..., description="Process exit status")
    stdout: str = Field("", description="Captured standard output")
    stderr: str = Field("", description="Captured standard error")
