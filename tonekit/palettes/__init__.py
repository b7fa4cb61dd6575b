"""Palette framework exports."""

from tonekit.palettes.constants import DEFAULT_DARK_PALETTE_ID, DEFAULT_LIGHT_PALETTE_ID
from tonekit.palettes.models import (
    PalettePackage,
    PaletteSummary,
    PaletteValidationError,
    ThemeColors,
)
from tonekit.palettes.registry import PaletteRegistry
from tonekit.palettes.service import PaletteService

__all__ = [
    "DEFAULT_DARK_PALETTE_ID",
    "DEFAULT_LIGHT_PALETTE_ID",
    "PalettePackage",
    "PaletteSummary",
    "PaletteValidationError",
    "ThemeColors",
    "PaletteRegistry",
    "PaletteService",
]
