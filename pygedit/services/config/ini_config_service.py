# pygedit/services/config/ini_config_service.py
from __future__ import annotations

import codecs
import configparser
from pathlib import Path
from typing import Optional, Mapping, Dict

from platformdirs import user_config_dir

from pygedit.domain.interfaces import IConfigService
from pygedit.utils.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STATUS_TIMEOUT_MS,
    DEFAULT_TAB_WIDTH,
)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PyGedit/config.ini or %APPDATA%\PyGedit\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = "PyGedit"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error):
                # A malformed file must not keep the editor from starting.
                continue
            self._parser = parser
            self._loaded_from = path
            break

        for section, values in {
            "app": {"version": "0.0.0"},
            "editor": {
                "status_timeout_ms": str(DEFAULT_STATUS_TIMEOUT_MS),
                "tab_width": str(DEFAULT_TAB_WIDTH),
            },
            "files": {"encoding": DEFAULT_ENCODING},
            "logging": {"level": DEFAULT_LOG_LEVEL},
        }.items():
            if section not in self._parser:
                self._parser[section] = {}
            for key, value in values.items():
                self._parser[section].setdefault(key, value)

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        snap: Dict[str, Dict[str, str]] = {}
        for sect in self._parser.sections():
            snap[sect] = dict(self._parser[sect])
        return snap

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Typed editor settings -----

    def status_timeout_ms(self) -> int:
        v = self.get_int("editor", "status_timeout_ms", DEFAULT_STATUS_TIMEOUT_MS)
        return v if v is not None and v >= 0 else DEFAULT_STATUS_TIMEOUT_MS

    def tab_width(self) -> int:
        v = self.get_int("editor", "tab_width", DEFAULT_TAB_WIDTH)
        return v if v is not None and v > 0 else DEFAULT_TAB_WIDTH

    def encoding(self) -> str:
        name = (self.get("files", "encoding", DEFAULT_ENCODING) or DEFAULT_ENCODING).strip()
        try:
            return codecs.lookup(name).name
        except LookupError:
            return DEFAULT_ENCODING

    def log_level(self) -> str:
        return (self.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics/About dialog."""
        return self._loaded_from
