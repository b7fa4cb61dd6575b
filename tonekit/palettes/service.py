"""Active palette holder for the UI layer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Hashable, TypeVar

from PySide6.QtCore import QObject, Signal

from tonekit.errors import ErrorCode, TonekitError, format_error_for_user
from tonekit.palettes.constants import DEFAULT_DARK_PALETTE_ID, DEFAULT_LIGHT_PALETTE_ID
from tonekit.palettes.defaults import FALLBACK_DARK, FALLBACK_LIGHT
from tonekit.palettes.models import PalettePackage, PaletteSummary, ThemeColors
from tonekit.palettes.registry import PaletteRegistry
from tonekit.styles.badges import BadgeOptions, get_badge_visuals
from tonekit.styles.models import BadgeVisuals, StyleDescriptor
from tonekit.styles.roles import Tone
from tonekit.styles.variants import (
    ButtonOptions,
    ChipOptions,
    resolve_button_style,
    resolve_chip_style,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class PaletteService(QObject):
    """Hold the active palette, switch it, and memoize resolved styles.

    Resolved styles are cached per palette; the cache is dropped whenever a
    different palette becomes active.
    """

    palette_changed = Signal(str)

    def __init__(
        self,
        registry: PaletteRegistry,
        *,
        light_palette_id: str = DEFAULT_LIGHT_PALETTE_ID,
        dark_palette_id: str = DEFAULT_DARK_PALETTE_ID,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._light_palette_id = light_palette_id
        self._dark_palette_id = dark_palette_id
        self._active_palette_id = ""
        self._colors: ThemeColors = FALLBACK_LIGHT
        self._is_dark = False
        self._style_cache: dict[tuple[str, Hashable], object] = {}

    @property
    def active_palette_id(self) -> str:
        return self._active_palette_id

    @property
    def colors(self) -> ThemeColors:
        return self._colors

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def user_palettes_dir(self) -> Path | None:
        return self._registry.user_root

    def set_user_palettes_dir(self, path: Path | None) -> list[str]:
        """Point the registry at a new user palette directory and rescan."""
        self._registry.set_user_root(path)
        return self.reload_palettes()

    def reload_palettes(self) -> list[str]:
        self._registry.reload()
        return self._registry.load_errors()

    def available_palettes(self) -> list[PaletteSummary]:
        return self._registry.list_palettes()

    def require_palette(self, palette_id: str) -> PalettePackage:
        package = self._registry.get_palette(palette_id)
        if package is None:
            raise TonekitError(ErrorCode.PALETTE_NOT_FOUND, details={"palette_id": palette_id})
        return package

    def apply_palette(self, palette_id: str) -> tuple[bool, str]:
        try:
            package = self.require_palette(palette_id)
        except TonekitError as exc:
            logger.warning("cannot apply palette %r: %s", palette_id, exc)
            return False, format_error_for_user(exc)

        self._activate(palette_id, package.colors, package.manifest.appearance == "dark")
        return True, f"Applied palette: {package.manifest.name}"

    def set_dark_mode(self, value: bool) -> tuple[bool, str]:
        """Switch to the configured dark or light palette."""
        target = self._dark_palette_id if value else self._light_palette_id
        return self.apply_palette(target)

    def apply_startup_palette(self, *, dark: bool = False) -> tuple[bool, str]:
        preferred = self._dark_palette_id if dark else self._light_palette_id
        fallback = DEFAULT_DARK_PALETTE_ID if dark else DEFAULT_LIGHT_PALETTE_ID
        for candidate in dict.fromkeys((preferred, fallback)):
            ok, message = self.apply_palette(candidate)
            if ok:
                return True, message

        fallback_colors = FALLBACK_DARK if dark else FALLBACK_LIGHT
        self._activate(fallback, fallback_colors, dark)
        return False, "No valid palette package found; using the compiled-in palette."

    def button_style(self, options: ButtonOptions | None = None) -> StyleDescriptor:
        options = options or ButtonOptions()
        return self._memo("button", options, lambda: resolve_button_style(self._colors, options))

    def chip_style(self, options: ChipOptions | None = None) -> StyleDescriptor:
        options = options or ChipOptions()
        return self._memo("chip", options, lambda: resolve_chip_style(self._colors, options))

    def badge_visuals(self, options: BadgeOptions | None = None) -> BadgeVisuals:
        options = options or BadgeOptions(tone=Tone.NEUTRAL)
        return self._memo("badge", options, lambda: get_badge_visuals(self._colors, options))

    def _memo(self, kind: str, options: Hashable, build: Callable[[], _T]) -> _T:
        key = (kind, options)
        cached = self._style_cache.get(key)
        if cached is None:
            cached = self._style_cache[key] = build()
        return cached  # type: ignore[return-value]

    def _activate(self, palette_id: str, colors: ThemeColors, is_dark: bool) -> None:
        changed = palette_id != self._active_palette_id or colors != self._colors
        self._active_palette_id = palette_id
        self._colors = colors
        self._is_dark = is_dark
        if changed:
            self._style_cache.clear()
            logger.info("active palette is now %s (dark=%s)", palette_id, is_dark)
            self.palette_changed.emit(palette_id)
