"""Palette service bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from tonekit.config.settings import AppSettings
from tonekit.palettes.registry import PaletteRegistry
from tonekit.palettes.service import PaletteService
from tonekit.runtime_paths import builtin_palettes_root, is_frozen, package_root


def configure_logger(settings: AppSettings) -> logging.Logger:
    """Attach a rotating file handler to the package logger once."""
    logger = logging.getLogger("tonekit")
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "tonekit.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_palette_service(settings: AppSettings | None = None, *, dark: bool = False) -> PaletteService:
    """Build a registry from the built-in and user palette roots and activate a palette."""
    settings = settings or AppSettings()
    logger = configure_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    builtin_root = builtin_palettes_root()
    if not builtin_root.exists():
        logger.warning("builtin palette root missing at %s", builtin_root)

    registry = PaletteRegistry(builtin_root=builtin_root, user_root=settings.palettes_dir)
    service = PaletteService(
        registry,
        light_palette_id=settings.light_palette_id,
        dark_palette_id=settings.dark_palette_id,
    )
    errors = service.reload_palettes()
    if errors:
        logger.warning("palette load warnings: %s", " | ".join(errors[:6]))
    ok, message = service.apply_startup_palette(dark=dark)
    if not ok:
        logger.warning(message)
    return service
