from __future__ import annotations
from pathlib import Path


class EditorIOError(OSError):
    """Base for file failures surfaced to the user; never fatal to the app."""

    verb = "access"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot {self.verb} file {path}: {reason}")
        self.path = path
        self.reason = reason

    def user_message(self) -> str:
        return f"Cannot {self.verb} file {self.path}:\n{self.reason}."


class DocumentReadError(EditorIOError):
    verb = "read"


class DocumentWriteError(EditorIOError):
    verb = "write"
