"""
LaTeX compile-and-publish pipeline.

Stages one request's source into the shared sandbox, runs tectonic,
pushes the PDF from the sandbox straight to object storage through a
presigned PUT URL and reads it back for the HTTP response. Every exit
path removes the job's transient files exactly once.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from common.core.config import settings
from common.core.constants import PDF_CONTENT_TYPE
from common.core.exceptions import PublishError
from common.core.otel_axiom_exporter import trace_span, get_logger, log_span_event
from common.providers.sandbox.interface import SandboxInterface
from common.providers.storage.interface import StorageInterface
from common.providers.storage.paths import get_document_object_key
from packages.compilation.models.domain.compilation_job import CompilationJob
from packages.compilation.models.domain.compilation_result import (
    CompilationResult,
    CompileOutcome,
    PublishedArtifact,
)


class LatexCompileService:
    """Drives one compile request against a borrowed sandbox handle."""

    def __init__(
        self,
        sandbox: SandboxInterface,
        storage: StorageInterface,
        logger: Optional[logging.Logger] = None,
        workspace_dir: Optional[str] = None,
        upload_url_expiration: Optional[int] = None,
    ):
        self.sandbox = sandbox
        self.storage = storage
        self.logger = logger or get_logger(__name__)
        self.workspace_dir = workspace_dir or settings.sandbox_workspace_dir
        self.upload_url_expiration = (
            upload_url_expiration or settings.upload_url_expiration_seconds
        )

    def _compile_command(self, job: CompilationJob) -> List[str]:
        return [
            "tectonic",
            "-o",
            self.workspace_dir,
            "--keep-logs",
            "--synctex=0",
            job.input_path,
        ]

    def _upload_command(self, job: CompilationJob, upload_url: str) -> List[str]:
        # --fail turns an HTTP error from the store into a non-zero exit
        return [
            "curl",
            "--silent",
            "--show-error",
            "--fail",
            "-X",
            "PUT",
            "-T",
            job.output_path,
            "-H",
            f"Content-Type: {PDF_CONTENT_TYPE}",
            upload_url,
        ]

    def _cleanup_command(self, job: CompilationJob) -> List[str]:
        return [
            "find",
            self.workspace_dir,
            "-maxdepth",
            "1",
            "-name",
            job.cleanup_pattern,
            "-delete",
        ]

    @trace_span
    async def compile_and_publish(self, latex: str) -> CompileOutcome:
        """
        Compile ``latex`` and publish the resulting PDF.

        Args:
            latex: LaTeX document source

        Returns:
            CompileOutcome; ``artifact`` is None when compilation failed

        Raises:
            PublishError: If the upload URL could not be signed or the upload failed
            SandboxError: If a sandbox file operation failed
        """
        job = CompilationJob.create(self.workspace_dir)

        async with self.job_files(job):
            self.logger.info(f"Writing file: {job.input_path}")
            await self.sandbox.write_file(job.input_path, latex)

            result = await self.compile(job)
            if not result.success:
                return CompileOutcome(job_id=job.job_id, result=result)

            artifact = await self.publish(job)
            return CompileOutcome(job_id=job.job_id, result=result, artifact=artifact)

    @asynccontextmanager
    async def job_files(self, job: CompilationJob) -> AsyncIterator[CompilationJob]:
        """Scope the job's transient files; they are removed on every exit path."""
        try:
            yield job
        finally:
            await self.cleanup(job)

    @trace_span
    async def compile(self, job: CompilationJob) -> CompilationResult:
        """Run tectonic on the staged input and collect diagnostics on failure."""
        command = self._compile_command(job)
        self.logger.info(f"Executing: {' '.join(command)}")
        exec_result = await self.sandbox.exec(command)

        if exec_result.success:
            self.logger.info(f"Compilation successful for {job.file_stem}")
            return CompilationResult(
                success=True, stdout=exec_result.stdout, stderr=exec_result.stderr
            )

        self.logger.error(f"Compilation failed for {job.file_stem}")
        return CompilationResult(
            success=False,
            stdout=exec_result.stdout,
            stderr=exec_result.stderr,
            log_content=await self._read_log(job),
        )

    async def _read_log(self, job: CompilationJob) -> Optional[str]:
        try:
            content = await self.sandbox.read_file(job.log_path)
        except Exception as e:
            self.logger.warning(f"Could not read log file {job.log_path}: {e}")
            return None
        return content.decode("utf-8", errors="replace")

    @trace_span
    async def publish(self, job: CompilationJob) -> PublishedArtifact:
        """Upload the compiled PDF from the sandbox and read it back."""
        object_key = get_document_object_key()

        self.logger.info(f"Generating presigned URL for {object_key}")
        upload_url = await self.storage.generate_presigned_upload_url(
            object_key, expiration=self.upload_url_expiration
        )
        if not upload_url:
            raise PublishError(f"Failed to generate upload URL for {object_key}")

        self.logger.info(f"Uploading {job.output_path} from sandbox")
        upload_result = await self.sandbox.exec(self._upload_command(job, upload_url))
        if not upload_result.success:
            self.logger.error(
                f"Direct upload failed for {object_key}: {upload_result.stderr}"
            )
            raise PublishError(
                f"Failed to upload PDF to storage: {upload_result.stderr.strip()}"
            )

        storage_uri = await self.storage.get_storage_uri(object_key)
        self.logger.info(f"Successfully uploaded to {storage_uri}")
        log_span_event("artifact_published", {"object_key": object_key})

        content = await self.sandbox.read_file(job.output_path)
        artifact = PublishedArtifact(object_key=object_key, content=content)
        self.logger.info(f"PDF size: {artifact.size} bytes")
        return artifact

    async def cleanup(self, job: CompilationJob) -> None:
        """Best-effort removal of the job's files; never raises."""
        try:
            result = await self.sandbox.exec(self._cleanup_command(job))
        except Exception as e:
            self.logger.error(f"Cleanup error (non-fatal) for {job.file_stem}: {e}")
            return

        if result.success:
            self.logger.info(f"Cleaned up temporary files for {job.file_stem}")
        else:
            self.logger.error(
                f"Cleanup error (non-fatal) for {job.file_stem}: {result.stderr}"
            )
