"""Application settings via QSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PySide6.QtCore import QSettings

from tonekit.errors import ErrorCode, TonekitError, format_error_for_user
from tonekit.palettes.constants import DEFAULT_DARK_PALETTE_ID, DEFAULT_LIGHT_PALETTE_ID

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(__name__)


def _normalize_level(value: object) -> str:
    name = str(value or "").strip().upper()
    if name in _LOG_LEVELS:
        return name
    error = TonekitError(ErrorCode.CONFIG_INVALID, details={"logging/level": value})
    logger.warning(format_error_for_user(error))
    return "INFO"


class AppSettings:
    """Wraps QSettings for persistent tonekit configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("Tonekit", "Tonekit")

    # -- palettes --

    @property
    def palettes_dir(self) -> Path:
        raw = self._qs.value("palettes/user_dir", "", type=str)
        path = Path(raw) if (raw or "").strip() else self.app_data_dir / "palettes"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @palettes_dir.setter
    def palettes_dir(self, value: Path | str) -> None:
        self._qs.setValue("palettes/user_dir", str(value))

    @property
    def light_palette_id(self) -> str:
        return self._palette_id("palettes/light_id", DEFAULT_LIGHT_PALETTE_ID)

    @light_palette_id.setter
    def light_palette_id(self, value: str) -> None:
        self._qs.setValue("palettes/light_id", (value or "").strip() or DEFAULT_LIGHT_PALETTE_ID)

    @property
    def dark_palette_id(self) -> str:
        return self._palette_id("palettes/dark_id", DEFAULT_DARK_PALETTE_ID)

    @dark_palette_id.setter
    def dark_palette_id(self, value: str) -> None:
        self._qs.setValue("palettes/dark_id", (value or "").strip() or DEFAULT_DARK_PALETTE_ID)

    # -- logging --

    @property
    def log_level(self) -> int:
        raw = self._qs.value("logging/level", "INFO", type=str)
        return logging.getLevelName(_normalize_level(raw))

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._qs.setValue("logging/level", _normalize_level(value))

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _palette_id(self, key: str, default: str) -> str:
        raw = self._qs.value(key, default, type=str)
        return (raw or "").strip() or default

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "tonekit"
