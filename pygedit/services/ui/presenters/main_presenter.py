from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pygedit.domain.errors import DocumentReadError, DocumentWriteError
from pygedit.domain.interfaces import IFileService
from pygedit.domain.models import Command, CursorPosition, Document
from pygedit.services.ui.ports.dialogs import IFileDialogService
from pygedit.services.ui.ports.messages import Answer, IMessageService
from pygedit.utils.constants import (
    ABOUT_TEXT,
    APP_NAME,
    DEFAULT_STATUS_TIMEOUT_MS,
    MODIFIED_PROMPT,
    STATUS_LOADED,
    STATUS_READY,
    STATUS_SAVED,
    TEXT_FILE_FILTER,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def cut(self) -> None: ...
    def copy(self) -> None: ...
    def paste(self) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_modified(self, modified: bool) -> None: ...
    def request_close(self) -> None: ...
    def busy(self) -> AbstractContextManager[Any]: ...

    # status bar
    def show_status(self, text: str, msec: int = 0) -> None: ...
    def set_cursor_label(self, text: str) -> None: ...


class MainPresenter:
    """
    Coordinates the main window: owns the Document and implements every
    command, including the save/discard/cancel guard.
    """

    def __init__(
        self,
        view: IMainView,
        files: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        app_title: str = APP_NAME,
        version: str = "0.0.0",
        status_timeout_ms: int = DEFAULT_STATUS_TIMEOUT_MS,
    ) -> None:
        self.view = view
        self.files = files
        self.messages = messages
        self.dialogs = dialogs
        self.app_title = app_title
        self.version = version
        self.status_timeout_ms = status_timeout_ms

        self.doc = Document()
        self.cursor = CursorPosition()
        self._handlers: dict[Command, Callable[[], object]] = {
            Command.NEW: self.new_document,
            Command.OPEN: self.open_document,
            Command.SAVE: self.save,
            Command.SAVE_AS: self.save_as,
            Command.CUT: self.view.cut,
            Command.COPY: self.view.copy,
            Command.PASTE: self.view.paste,
            Command.QUIT: self.view.request_close,
            Command.ABOUT: self.about,
        }

    def start(self, start_path: Path | None = None) -> None:
        """Put the view into its initial state and optionally load a file."""
        self._refresh_chrome()
        self.view.set_cursor_label(self.cursor.label())
        self.view.show_status(STATUS_READY)
        if start_path is not None:
            self.open_path(start_path)

    # ---------- Dispatch ----------
    def dispatch(self, command: Command) -> object:
        logger.debug("Dispatching %s", command.name)
        return self._handlers[command]()

    # ---------- View events ----------
    def on_text_changed(self, text: str) -> None:
        was_modified = self.doc.modified
        self.doc.edit(text)
        if self.doc.modified != was_modified:
            self.view.set_modified(self.doc.modified)

    def on_cursor_moved(self, block_number: int, column_number: int) -> None:
        self.cursor = CursorPosition.from_block(block_number, column_number)
        self.view.set_cursor_label(self.cursor.label())

    def request_close(self) -> bool:
        """True if the window may close."""
        return self.maybe_save()

    # ---------- Commands ----------
    def new_document(self) -> bool:
        if not self.maybe_save():
            return False
        self._replace_document(None, "")
        return True

    def open_document(self) -> bool:
        if not self.maybe_save():
            return False
        start_dir = str(self.doc.path.parent) if self.doc.path else None
        path = self.dialogs.get_open_file(self.view, "Open File", start_dir, TEXT_FILE_FILTER)
        if path is None:
            return False
        return self.open_path(path)

    def open_path(self, path: Path) -> bool:
        """Load `path` into the editor; on failure the current document is kept."""
        try:
            with self.view.busy():
                text = self.files.read_text(path)
        except DocumentReadError as e:
            logger.warning("Open failed: %s", e)
            self.messages.warning(self.view, self.app_title, e.user_message())
            return False
        self._replace_document(path, text)
        self.view.show_status(STATUS_LOADED, self.status_timeout_ms)
        return True

    def save(self) -> bool:
        if self.doc.path is None:
            return self.save_as()
        return self.save_to(self.doc.path)

    def save_as(self) -> bool:
        start = str(self.doc.path) if self.doc.path else None
        path = self.dialogs.get_save_file(self.view, "Save File As", start, TEXT_FILE_FILTER)
        if path is None:
            return False
        return self.save_to(path)

    def save_to(self, path: Path) -> bool:
        self.doc.edit(self.view.get_editor_text())
        try:
            with self.view.busy():
                self.files.write_text_atomic(path, self.doc.text)
        except DocumentWriteError as e:
            logger.warning("Save failed: %s", e)
            self.messages.warning(self.view, self.app_title, e.user_message())
            return False
        self.doc.mark_saved(path)
        self._refresh_chrome()
        self.view.show_status(STATUS_SAVED, self.status_timeout_ms)
        return True

    def about(self) -> None:
        self.messages.about(
            self.view,
            f"About {self.app_title}",
            ABOUT_TEXT.format(app=self.app_title, version=self.version),
        )

    # ---------- Guard ----------
    def maybe_save(self) -> bool:
        """
        Resolve pending changes before they would be discarded.
        Returns True to proceed, False to abort the calling operation.
        """
        if not self.doc.modified:
            return True
        answer = self.messages.ask(self.view, self.app_title, MODIFIED_PROMPT)
        logger.debug("Unsaved changes prompt answered with %s", answer.name)
        if answer is Answer.SAVE:
            return self.save()
        return answer is Answer.DISCARD

    # ---------- Helpers ----------
    def window_title(self) -> str:
        # [*] is where Qt draws the unsaved-changes marker
        return f"{self.app_title} - {self.doc.display_name}[*]"

    def _replace_document(self, path: Path | None, text: str) -> None:
        self.doc.load(path, text)
        self.view.set_editor_text(text)
        # The widget may normalise characters (U+00A0 becomes a space); its text is the baseline.
        self.doc.load(path, self.view.get_editor_text())
        self._refresh_chrome()

    def _refresh_chrome(self) -> None:
        self.view.set_title(self.window_title())
        self.view.set_modified(self.doc.modified)
