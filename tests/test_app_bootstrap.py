"""Tests for settings, error helpers and the service bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from tonekit.app import configure_logger, create_palette_service
from tonekit.config.settings import AppSettings
from tonekit.errors import ErrorCode, TonekitError, format_error_for_user


@pytest.fixture
def settings(tmp_path: Path, monkeypatch) -> AppSettings:
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    qsettings = QSettings(str(tmp_path / "tonekit.ini"), QSettings.Format.IniFormat)
    return AppSettings(qsettings)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("tonekit")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_settings_defaults(settings: AppSettings, tmp_path: Path) -> None:
    assert settings.light_palette_id == "slate-light"
    assert settings.dark_palette_id == "slate-dark"
    assert settings.log_level == logging.INFO
    assert settings.palettes_dir == tmp_path / "appdata" / "tonekit" / "palettes"
    assert settings.palettes_dir.is_dir()


def test_settings_sanitize_values(settings: AppSettings, tmp_path: Path) -> None:
    settings.log_level = "verbose"
    assert settings.log_level == logging.INFO
    settings.log_level = "debug"
    assert settings.log_level == logging.DEBUG

    settings.dark_palette_id = "   "
    assert settings.dark_palette_id == "slate-dark"
    settings.light_palette_id = "paper"
    assert settings.light_palette_id == "paper"

    settings.palettes_dir = tmp_path / "mine"
    assert settings.palettes_dir == tmp_path / "mine"


def test_configure_logger_is_installed_once(settings: AppSettings, clean_logger) -> None:
    first = configure_logger(settings)
    second = configure_logger(settings)

    assert first is second is clean_logger
    assert len(clean_logger.handlers) == 1
    assert (settings.app_data_dir / "logs").is_dir()


def test_create_palette_service_activates_requested_mode(settings: AppSettings, clean_logger) -> None:
    service = create_palette_service(settings, dark=True)

    assert service.active_palette_id == "slate-dark"
    assert service.is_dark is True


def test_create_palette_service_falls_back_when_configured_id_missing(
    settings: AppSettings, clean_logger
) -> None:
    settings.light_palette_id = "missing-palette"
    service = create_palette_service(settings)

    assert service.active_palette_id == "slate-light"


def test_tonekit_error_defaults_and_dict() -> None:
    error = TonekitError(ErrorCode.PALETTE_INVALID, path=Path("p/tokens.json"))

    assert error.message == "The palette package failed validation."
    assert error.suggestion
    assert "File: p" in str(error)
    assert error.to_dict()["code"] == "PALETTE_INVALID"


def test_format_error_for_user_wraps_plain_exceptions() -> None:
    text = format_error_for_user(ValueError("boom"))
    assert text.startswith("ValueError: boom")


def test_invalid_stored_log_level_warns_and_falls_back(tmp_path: Path, caplog) -> None:
    raw = QSettings(str(tmp_path / "tonekit.ini"), QSettings.Format.IniFormat)
    raw.setValue("logging/level", "chatty")
    raw.sync()
    settings = AppSettings(QSettings(str(tmp_path / "tonekit.ini"), QSettings.Format.IniFormat))

    with caplog.at_level(logging.WARNING, logger="tonekit.config.settings"):
        level = settings.log_level

    assert level == logging.INFO
    expected = format_error_for_user(
        TonekitError(ErrorCode.CONFIG_INVALID, details={"logging/level": "chatty"})
    )
    assert expected in caplog.messages
