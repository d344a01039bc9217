from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

UNSAVED_NAME = "Unsaved Document"


@dataclass
class Document:
    """
    In-memory text buffer plus its save-state metadata.

    `baseline` is the content as last loaded from or saved to `path`;
    `modified` is derived from it so it can never drift from the buffer.
    """

    path: Path | None = None
    text: str = ""
    baseline: str = ""

    @property
    def modified(self) -> bool:
        return self.text != self.baseline

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else UNSAVED_NAME

    def edit(self, text: str) -> None:
        self.text = text

    def load(self, path: Path | None, text: str) -> None:
        """Replace the whole document, e.g. after Open or New."""
        self.path = path
        self.text = text
        self.baseline = text

    def mark_saved(self, path: Path) -> None:
        self.path = path
        self.baseline = self.text


@dataclass(frozen=True)
class CursorPosition:
    """1-based line/column shown in the status bar."""

    line: int = 1
    column: int = 1

    @classmethod
    def from_block(cls, block_number: int, column_number: int) -> CursorPosition:
        # Qt reports both as 0-based
        return cls(line=block_number + 1, column=column_number + 1)

    def label(self) -> str:
        return f"Ln {self.line}, Col {self.column}"


class Command(Enum):
    """User-invocable editor commands, used as keys of the dispatch table."""

    NEW = "new"
    OPEN = "open"
    SAVE = "save"
    SAVE_AS = "save_as"
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"
    QUIT = "quit"
    ABOUT = "about"
