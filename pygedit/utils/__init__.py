"""App constants and utilities."""

from .constants import (
    ABOUT_TEXT,
    APP_ICON,
    APP_NAME,
    APP_ORG,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STATUS_TIMEOUT_MS,
    DEFAULT_TAB_WIDTH,
    DIST_NAME,
    LOG_FORMAT,
    MODIFIED_PROMPT,
    STATUS_LOADED,
    STATUS_READY,
    STATUS_SAVED,
    TEXT_FILE_FILTER,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "APP_ICON",
    "DIST_NAME",
    "TEXT_FILE_FILTER",
    "MODIFIED_PROMPT",
    "ABOUT_TEXT",
    "STATUS_READY",
    "STATUS_LOADED",
    "STATUS_SAVED",
    "DEFAULT_STATUS_TIMEOUT_MS",
    "DEFAULT_TAB_WIDTH",
    "DEFAULT_ENCODING",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
]
