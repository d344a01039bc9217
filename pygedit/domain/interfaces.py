from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write whole text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to sectioned key/value configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Configuration plus the resolved application version."""

    def get_version(self) -> str: ...
