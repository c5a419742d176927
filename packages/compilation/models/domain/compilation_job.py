import uuid
from pathlib import PurePosixPath
from pydantic import BaseModel


class CompilationJob(BaseModel):
    """Transient files for one compile request inside the shared sandbox.

    Every path derives from ``job_id``. Concurrent jobs share the workspace
    directory, so the uniqueness of ``job_id`` is what keeps them apart.
    """

    job_id: str
    workspace_dir: str

    @classmethod
    def create(cls, workspace_dir: str) -> "CompilationJob":
        return cls(job_id=str(uuid.uuid4()), workspace_dir=workspace_dir)

    @property
    def file_stem(self) -> str:
        return f"document-{self.job_id}"

    def _path(self, suffix: str) -> str:
        return str(PurePosixPath(self.workspace_dir) / f"{self.file_stem}{suffix}")

    @property
    def input_path(self) -> str:
        return self._path(".tex")

    @property
    def output_path(self) -> str:
        return self._path(".pdf")

    @property
    def log_path(self) -> str:
        return self._path(".log")

    @property
    def cleanup_pattern(self) -> str:
        """Glob matching every file this job may leave in the workspace."""
        return f"{self.file_stem}.*"
