"""Core utilities."""
from bookshelf.core.exceptions import AppException, RegistryWorkerError
from bookshelf.core.logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "AppException",
    "RegistryWorkerError",
    # Logging
    "get_logger",
    "setup_logging",
]
