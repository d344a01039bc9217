from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pygedit.services.ui.ports.messages import Answer, IMessageService

_Button = QMessageBox.StandardButton

_ANSWERS = {
    _Button.Save: Answer.SAVE,
    _Button.Discard: Answer.DISCARD,
    _Button.Cancel: Answer.CANCEL,
}


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.warning(parent, title, text)

    def about(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.about(parent, title, text)

    def ask(self, parent: Any | None, title: str, text: str) -> Answer:
        resp = QMessageBox.warning(
            parent,
            title,
            text,
            _Button.Save | _Button.Discard | _Button.Cancel,
            _Button.Save,
        )
        # Escape / window close yields NoButton or Cancel
        return _ANSWERS.get(resp, Answer.CANCEL)
