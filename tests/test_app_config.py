# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

import pytest

import pygedit.services.config.app_config as app_config_mod
from pygedit.services.config.app_config import AppConfig, build_app_config


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """
    Minimal IniConfigService-like fake with controllable behaviour.
    We only implement what AppConfig calls.
    """

    def __init__(self, *, version: str = "0.0.0", loaded_from: Path | None = None) -> None:
        self._version = version
        self._loaded_from = loaded_from

    def app_version(self) -> str:
        return self._version

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return default

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return default

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {"app": {"version": self._version}}

    def status_timeout_ms(self) -> int:
        return 1234

    def tab_width(self) -> int:
        return 2

    def encoding(self) -> str:
        return "latin-1"

    def log_level(self) -> str:
        return "INFO"

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from


@pytest.fixture()
def not_installed(monkeypatch):
    monkeypatch.setattr(app_config_mod, "_installed_version", lambda: None)


# ------------------------------
# get_version()
# ------------------------------
def test_get_version_prefers_version_file_and_strips_v(tmp_path: Path, not_installed):
    root = tmp_path / "proj"
    _write(root / "version", "v1.0.5\n")
    cfg = AppConfig(ini=FakeIni(version="9.9.9"), project_root=root)

    assert cfg.get_version() == "1.0.5"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1.2.3", "1.2.3"),
        ("v1.2.3", "1.2.3"),
        ("V1.2.3", "1.2.3"),
        ("v1.2.3+build.7", "1.2.3"),
        ("1.2.3-alpha.1", "1.2.3"),
    ],
)
def test_get_version_parses_semver_with_suffixes(tmp_path: Path, raw: str, expected: str, not_installed):
    root = tmp_path / "proj"
    _write(root / "version", raw)
    cfg = AppConfig(ini=FakeIni(version="0.0.0"), project_root=root)

    assert cfg.get_version() == expected


def test_get_version_uses_installed_metadata_before_ini(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(app_config_mod, "_installed_version", lambda: "2.0.0")
    cfg = AppConfig(ini=FakeIni(version="9.9.9"), project_root=tmp_path / "none")
    assert cfg.get_version() == "2.0.0"


def test_get_version_falls_back_to_ini_when_version_file_missing(tmp_path: Path, not_installed):
    cfg = AppConfig(ini=FakeIni(version="v3.4.5"), project_root=tmp_path / "proj")
    assert cfg.get_version() == "3.4.5"


def test_get_version_garbage_file_falls_through(tmp_path: Path, not_installed):
    root = tmp_path / "proj"
    _write(root / "version", "not a version")
    cfg = AppConfig(ini=FakeIni(version=""), project_root=root)
    assert cfg.get_version() == "0.0.0"


# ------------------------------
# delegation
# ------------------------------
def test_typed_settings_delegate_to_ini(tmp_path: Path):
    loaded = tmp_path / "c.ini"
    cfg = AppConfig(ini=FakeIni(loaded_from=loaded), project_root=tmp_path)
    assert cfg.status_timeout_ms() == 1234
    assert cfg.tab_width() == 2
    assert cfg.encoding() == "latin-1"
    assert cfg.log_level() == "INFO"
    assert cfg.loaded_from == loaded
    assert cfg.as_dict() == {"app": {"version": "0.0.0"}}
    assert cfg.get("x", "y", "d") == "d"


def test_build_app_config_reads_explicit_ini(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(
        "pygedit.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg"),
    )
    ini = tmp_path / "explicit.ini"
    _write(ini, "[editor]\ntab_width = 6\n")

    cfg = build_app_config(explicit_ini=ini, project_root=tmp_path / "root")
    assert isinstance(cfg, AppConfig)
    assert cfg.project_root == tmp_path / "root"
    assert cfg.loaded_from == ini
    assert cfg.tab_width() == 6
