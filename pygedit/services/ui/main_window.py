from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent, QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from pygedit.domain.models import Command, CursorPosition
from pygedit.services.ui.presenters.main_presenter import MainPresenter
from pygedit.utils.constants import APP_ICON, APP_NAME, DEFAULT_TAB_WIDTH

_Key = QKeySequence.StandardKey


@dataclass(frozen=True)
class ActionSpec:
    command: Command
    text: str
    shortcut: QKeySequence.StandardKey | None = None
    icon: str | None = None  # freedesktop icon theme name


ACTION_SPECS: tuple[ActionSpec, ...] = (
    ActionSpec(Command.NEW, "&New", _Key.New, "document-new"),
    ActionSpec(Command.OPEN, "&Open…", _Key.Open, "document-open"),
    ActionSpec(Command.SAVE, "&Save", _Key.Save, "document-save"),
    ActionSpec(Command.SAVE_AS, "Save &As…", _Key.SaveAs, "document-save-as"),
    ActionSpec(Command.QUIT, "&Quit", _Key.Quit, "application-exit"),
    ActionSpec(Command.CUT, "Cu&t", _Key.Cut, "edit-cut"),
    ActionSpec(Command.COPY, "&Copy", _Key.Copy, "edit-copy"),
    ActionSpec(Command.PASTE, "&Paste", _Key.Paste, "edit-paste"),
    ActionSpec(Command.ABOUT, "&About", None, "help-about"),
)

MENUS: tuple[tuple[str, tuple[Command | None, ...]], ...] = (
    ("&File", (Command.NEW, Command.OPEN, Command.SAVE, Command.SAVE_AS, None, Command.QUIT)),
    ("&Edit", (Command.CUT, Command.COPY, Command.PASTE)),
    ("&Help", (Command.ABOUT,)),
)

TOOLBAR: tuple[Command | None, ...] = (
    Command.NEW,
    Command.OPEN,
    Command.SAVE,
    None,
    Command.CUT,
    Command.COPY,
    Command.PASTE,
)


class MainWindow(QMainWindow):
    """Thin PyQt window; every command is forwarded to the attached presenter."""

    def __init__(self, *, app_title: str = APP_NAME, tab_width: int = DEFAULT_TAB_WIDTH) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.setWindowIcon(QIcon.fromTheme(APP_ICON))
        self.resize(900, 650)
        self._presenter: MainPresenter | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setTabStopDistance(
            tab_width * self.editor.fontMetrics().horizontalAdvance(" ")
        )
        self.setCentralWidget(self.editor)

        self.status_label = QLabel(CursorPosition().label(), self)

        # UI
        self._build_actions()
        self._build_menu()
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        self.statusBar().addPermanentWidget(self.status_label)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.editor.cursorPositionChanged.connect(self._on_cursor_moved)

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter

    @property
    def presenter(self) -> MainPresenter | None:
        return self._presenter

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.actions_by_command: dict[Command, QAction] = {}
        for spec in ACTION_SPECS:
            act = QAction(spec.text, self)
            if spec.icon:
                act.setIcon(QIcon.fromTheme(spec.icon))
            if spec.shortcut is not None:
                act.setShortcut(QKeySequence(spec.shortcut))
            act.triggered.connect(lambda chk=False, c=spec.command: self._dispatch(c))
            self.actions_by_command[spec.command] = act

    def _build_menu(self) -> None:
        m = self.menuBar()
        for title, commands in MENUS:
            menu = m.addMenu(title)
            for cmd in commands:
                if cmd is None:
                    menu.addSeparator()
                else:
                    menu.addAction(self.actions_by_command[cmd])

    def _build_toolbar(self) -> None:
        tb = QToolBar("File", self)
        tb.setObjectName("mainToolbar")
        tb.setMovable(False)
        for cmd in TOOLBAR:
            if cmd is None:
                tb.addSeparator()
            else:
                tb.addAction(self.actions_by_command[cmd])
        self.addToolBar(tb)
        self.toolbar = tb

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def cut(self) -> None:
        self.editor.cut()

    def copy(self) -> None:
        self.editor.copy()

    def paste(self) -> None:
        self.editor.paste()

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_modified(self, modified: bool) -> None:
        self.setWindowModified(modified)

    def request_close(self) -> None:
        self.close()

    @contextmanager
    def busy(self) -> Iterator[None]:
        QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
        try:
            yield
        finally:
            QApplication.restoreOverrideCursor()

    def show_status(self, text: str, msec: int = 0) -> None:
        self.statusBar().showMessage(text, msec)

    def set_cursor_label(self, text: str) -> None:
        self.status_label.setText(text)

    # ---------- Signals ----------
    def _dispatch(self, command: Command) -> None:
        if self._presenter is not None:
            self._presenter.dispatch(command)

    def _on_text_changed(self) -> None:
        if self._presenter is not None:
            self._presenter.on_text_changed(self.editor.toPlainText())

    def _on_cursor_moved(self) -> None:
        if self._presenter is None:
            return
        c = self.editor.textCursor()
        self._presenter.on_cursor_moved(c.blockNumber(), c.columnNumber())

    # ---------- Close ----------
    def closeEvent(self, event: QCloseEvent) -> None:
        if self._presenter is None or self._presenter.request_close():
            event.accept()
        else:
            event.ignore()
