from typing import Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnauthorizedError(AppException):
    """Missing or mismatched API key."""

    status_code = 401


class MethodNotAllowedError(AppException):
    """Request used a method other than POST."""

    status_code = 405


class BadRequestError(AppException):
    """Request body could not be parsed or failed validation."""

    status_code = 400


class CompilationFailedError(AppException):
    """The compiler exited unsuccessfully."""

    status_code = 400


class SandboxError(AppException):
    """Sandbox file or process operation error."""

    pass


class PublishError(AppException):
    """The compiled artifact could not be pushed to object storage."""

    pass
