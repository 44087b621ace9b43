"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class RegistryWorkerError(AppException):
    """A registry operation failed on its worker thread."""

    status_code = 500

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(
            f"Registry operation {operation!r} failed: {cause}",
            error_code="REGISTRY_WORKER_ERROR",
            details={"operation": operation, "cause": type(cause).__name__},
        )
        self.operation = operation
