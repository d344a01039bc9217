"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import DocumentReadError, DocumentWriteError, EditorIOError
from .interfaces import IAppConfig, IConfigService, IFileService
from .models import Command, CursorPosition, Document

__all__ = [
    "IFileService",
    "IConfigService",
    "IAppConfig",
    "EditorIOError",
    "DocumentReadError",
    "DocumentWriteError",
    "Command",
    "CursorPosition",
    "Document",
]
