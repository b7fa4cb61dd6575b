"""Derive button, chip and badge styles from a semantic color palette."""

from tonekit.palettes.models import ThemeColors
from tonekit.styles import (
    BadgeOptions,
    BadgeVisuals,
    ButtonOptions,
    ButtonSize,
    ChipOptions,
    ChipSize,
    StyleDescriptor,
    Tone,
    Variant,
    choose_readable_text,
    get_badge_visuals,
    resolve_button_style,
    resolve_chip_style,
    with_alpha,
)

__version__ = "0.1.0"

__all__ = [
    "BadgeOptions",
    "BadgeVisuals",
    "ButtonOptions",
    "ButtonSize",
    "ChipOptions",
    "ChipSize",
    "StyleDescriptor",
    "ThemeColors",
    "Tone",
    "Variant",
    "choose_readable_text",
    "get_badge_visuals",
    "resolve_button_style",
    "resolve_chip_style",
    "with_alpha",
]
