"""Palette package discovery and registry."""

from __future__ import annotations

import logging
from pathlib import Path

from tonekit.palettes.loader import load_palette_package
from tonekit.palettes.models import PalettePackage, PaletteSummary, PaletteValidationError

logger = logging.getLogger(__name__)

_MAX_PALETTE_DIR_CANDIDATES = 512


class PaletteRegistry:
    """Loads palette packages from built-in and user directories.

    User palettes are scanned after built-ins and may replace a built-in
    palette with the same id.
    """

    def __init__(self, builtin_root: Path, user_root: Path | None = None) -> None:
        self._builtin_root = builtin_root
        self._user_root = user_root
        self._palettes: dict[str, PalettePackage] = {}
        self._load_errors: list[str] = []

    @property
    def user_root(self) -> Path | None:
        return self._user_root

    def set_user_root(self, path: Path | None) -> None:
        self._user_root = path

    def reload(self) -> None:
        self._palettes = {}
        self._load_errors = []
        self._scan(self._builtin_root, is_builtin=True)
        if self._user_root is not None:
            self._scan(self._user_root, is_builtin=False)
        logger.debug(
            "palette registry loaded %d palettes (%d problems)",
            len(self._palettes),
            len(self._load_errors),
        )

    def list_palettes(self) -> list[PaletteSummary]:
        rows = [
            PaletteSummary(
                palette_id=package.manifest.palette_id,
                name=package.manifest.name,
                version=package.manifest.version,
                author=package.manifest.author,
                description=package.manifest.description,
                appearance=package.manifest.appearance,
                is_builtin=package.is_builtin,
                source_dir=package.source_dir,
            )
            for package in self._palettes.values()
        ]
        return sorted(rows, key=lambda row: (not row.is_builtin, row.name.lower()))

    def get_palette(self, palette_id: str) -> PalettePackage | None:
        return self._palettes.get(palette_id)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def _scan(self, root: Path, *, is_builtin: bool) -> None:
        if not root.exists():
            return
        try:
            subdirs = sorted(path for path in root.iterdir() if path.is_dir())
        except OSError as exc:
            self._load_errors.append(f"Failed to list palettes in {root}: {exc}")
            return

        candidates = []
        for path in subdirs:
            if path.is_symlink():
                self._load_errors.append(f"Skipping symlink palette directory: {path}")
            else:
                candidates.append(path)
        if len(candidates) > _MAX_PALETTE_DIR_CANDIDATES:
            self._load_errors.append(
                f"Palette directory limit exceeded in {root}; "
                f"only first {_MAX_PALETTE_DIR_CANDIDATES} folders were scanned."
            )
            del candidates[_MAX_PALETTE_DIR_CANDIDATES:]

        for palette_dir in candidates:
            try:
                package = load_palette_package(palette_dir, is_builtin=is_builtin)
            except PaletteValidationError as exc:
                self._load_errors.append(str(exc))
                continue
            self._register(package, palette_dir)

    def _register(self, package: PalettePackage, palette_dir: Path) -> None:
        palette_id = package.manifest.palette_id
        existing = self._palettes.get(palette_id)
        if existing is not None:
            if package.is_builtin:
                self._load_errors.append(
                    f"Duplicate builtin palette id {palette_id!r} at {palette_dir}; skipping."
                )
                return
            if existing.is_builtin:
                self._load_errors.append(f"User palette {palette_id!r} overrides built-in palette.")
            else:
                self._load_errors.append(
                    f"Duplicate user palette id {palette_id!r} at {palette_dir}; replacing."
                )
        self._palettes[palette_id] = package
