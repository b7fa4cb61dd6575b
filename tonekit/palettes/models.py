"""Palette framework models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping

from tonekit.styles.colors import with_alpha

STATUS_WASH_ALPHA = 0.12


class PaletteValidationError(ValueError):
    """Raised when a palette package fails validation."""


@dataclass(frozen=True, slots=True)
class ThemeColors:
    """Semantic color tokens of one resolved palette.

    Instances are swapped wholesale when the theme changes; they are never
    mutated in place.
    """

    background: str
    card: str
    border: str
    text_primary: str
    text_secondary: str
    tint_primary: str
    tint_soft_bg: str
    positive: str
    negative: str
    warning: str
    error_bg: str | None = None
    success_bg: str | None = None
    warning_bg: str | None = None

    def __post_init__(self) -> None:
        washes = (
            ("error_bg", self.negative),
            ("success_bg", self.positive),
            ("warning_bg", self.warning),
        )
        for name, source in washes:
            if getattr(self, name) is None:
                object.__setattr__(self, name, with_alpha(source, STATUS_WASH_ALPHA))

    @classmethod
    def from_mapping(cls, tokens: Mapping[str, str]) -> ThemeColors:
        """Build from a token mapping, ignoring keys that are not tokens."""
        names = cls.__dataclass_fields__.keys()
        return cls(**{key: value for key, value in tokens.items() if key in names})

    def as_dict(self) -> dict[str, str]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True, slots=True)
class PaletteManifest:
    """Palette metadata parsed from manifest.json."""

    schema_version: str
    palette_id: str
    name: str
    version: str
    author: str
    description: str
    appearance: str


@dataclass(frozen=True, slots=True)
class PalettePackage:
    """A fully loaded palette package."""

    manifest: PaletteManifest
    colors: ThemeColors
    source_dir: Path
    is_builtin: bool


@dataclass(frozen=True, slots=True)
class PaletteSummary:
    """Display-ready palette metadata."""

    palette_id: str
    name: str
    version: str
    author: str
    description: str
    appearance: str
    is_builtin: bool
    source_dir: Path
