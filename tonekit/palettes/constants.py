"""Palette framework constants."""

from __future__ import annotations

DEFAULT_LIGHT_PALETTE_ID = "slate-light"
DEFAULT_DARK_PALETTE_ID = "slate-dark"
PALETTE_SCHEMA_VERSION = "1"

REQUIRED_TOKEN_KEYS: tuple[str, ...] = (
    "background",
    "card",
    "border",
    "text_primary",
    "text_secondary",
    "tint_primary",
    "tint_soft_bg",
    "positive",
    "negative",
    "warning",
)

OPTIONAL_TOKEN_KEYS: tuple[str, ...] = (
    "error_bg",
    "success_bg",
    "warning_bg",
)

APPEARANCES: tuple[str, ...] = (
    "light",
    "dark",
)
