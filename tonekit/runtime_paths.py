"""Runtime path helpers for source and frozen executable modes."""

from __future__ import annotations

from pathlib import Path
import sys


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Return the directory holding the `tonekit` package resources."""
    if is_frozen():
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidate = Path(meipass) / "tonekit"
            return candidate if candidate.exists() else Path(meipass)
    return Path(__file__).resolve().parent


def builtin_palettes_root() -> Path:
    """Resolve the built-in palette directory across source/frozen layouts."""
    return package_root() / "palettes" / "builtin"
