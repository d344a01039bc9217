from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class Answer(Enum):
    """Outcome of the save-changes prompt (maps onto QMessageBox buttons)."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def warning(self, parent: Any | None, title: str, text: str) -> None: ...
    def about(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask(self, parent: Any | None, title: str, text: str) -> Answer:
        """
        Ask whether to save pending changes. Closing the dialog without
        choosing counts as Answer.CANCEL.
        """
        ...
