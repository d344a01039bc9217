from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pygedit.domain.errors import DocumentReadError, DocumentWriteError
from pygedit.domain.interfaces import IFileService
from pygedit.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Whole-file text reads and atomic writes."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        try:
            text = path.read_text(encoding=self.encoding)
        except OSError as e:
            raise DocumentReadError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise DocumentReadError(path, f"not valid {self.encoding} text ({e.reason})") from e
        logger.info("Read %d characters from %s", len(text), path)
        return text

    def write_text_atomic(self, path: Path, text: str) -> None:
        # Encode first so a bad character never truncates the target.
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise DocumentWriteError(path, f"cannot encode as {self.encoding} ({e.reason})") from e

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise DocumentWriteError(path, sf.errorString())
        sf.write(data)
        if not sf.commit():
            raise DocumentWriteError(path, sf.errorString() or "commit failed")
        logger.info("Wrote %d bytes to %s", len(data), path)
