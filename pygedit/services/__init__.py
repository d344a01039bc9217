"""Concrete service implementations."""

from .file_service import FileService
from .logging_setup import configure_logging

__all__ = ["FileService", "configure_logging"]
