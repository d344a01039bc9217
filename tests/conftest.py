from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path

# Use offscreen platform for headless testing; must be set before Qt loads.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pygedit.services.file_service import FileService
from pygedit.services.ui.ports.messages import Answer


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeView:
    """In-memory IMainView; records everything the presenter pushes to it."""

    def __init__(self) -> None:
        self.text = ""
        self.title = ""
        self.modified = False
        self.cursor_label = ""
        self.statuses: list[tuple[str, int]] = []
        self.clipboard_calls: list[str] = []
        self.close_requests = 0
        self.busy_calls = 0
        self.presenter = None  # set by tests that want textChanged echo

    def get_editor_text(self) -> str:
        return self.text

    def set_editor_text(self, text: str) -> None:
        self.text = text
        if self.presenter is not None:
            self.presenter.on_text_changed(text)

    def type(self, more: str) -> None:
        """Simulate the user typing at the end of the buffer."""
        self.set_editor_text(self.text + more)

    def cut(self) -> None:
        self.clipboard_calls.append("cut")

    def copy(self) -> None:
        self.clipboard_calls.append("copy")

    def paste(self) -> None:
        self.clipboard_calls.append("paste")

    def set_title(self, title: str) -> None:
        self.title = title

    def set_modified(self, modified: bool) -> None:
        self.modified = modified

    def request_close(self) -> None:
        self.close_requests += 1

    @contextmanager
    def busy(self):
        self.busy_calls += 1
        yield

    def show_status(self, text: str, msec: int = 0) -> None:
        self.statuses.append((text, msec))

    def set_cursor_label(self, text: str) -> None:
        self.cursor_label = text


class FakeMessages:
    """Scripted IMessageService: `answers` are popped for each ask()."""

    def __init__(self, answers: list[Answer] | None = None) -> None:
        self.answers = list(answers or [])
        self.asked: list[str] = []
        self.warnings: list[tuple[str, str]] = []
        self.abouts: list[tuple[str, str]] = []

    def warning(self, parent, title: str, text: str) -> None:
        self.warnings.append((title, text))

    def about(self, parent, title: str, text: str) -> None:
        self.abouts.append((title, text))

    def ask(self, parent, title: str, text: str) -> Answer:
        self.asked.append(text)
        return self.answers.pop(0) if self.answers else Answer.CANCEL


class FakeDialogs:
    """Scripted IFileDialogService: returns queued paths (None = cancelled)."""

    def __init__(self, open_paths=None, save_paths=None) -> None:
        self.open_paths: list[Path | None] = list(open_paths or [])
        self.save_paths: list[Path | None] = list(save_paths or [])
        self.open_calls: list[tuple[str | None, str]] = []
        self.save_calls: list[tuple[str | None, str]] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.open_calls.append((start_dir, filter_str))
        return self.open_paths.pop(0) if self.open_paths else None

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.save_calls.append((start_path, filter_str))
        return self.save_paths.pop(0) if self.save_paths else None


# --- Other common fixtures ---


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()
