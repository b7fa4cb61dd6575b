"""Palette package parsing and validation."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Mapping

from tonekit.palettes.constants import (
    APPEARANCES,
    OPTIONAL_TOKEN_KEYS,
    PALETTE_SCHEMA_VERSION,
    REQUIRED_TOKEN_KEYS,
)
from tonekit.palettes.models import (
    PaletteManifest,
    PalettePackage,
    PaletteValidationError,
    ThemeColors,
)
from tonekit.styles.colors import parse_color

_PALETTE_ID_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(?:[-+][A-Za-z0-9.-]+)?$")

_MAX_MANIFEST_BYTES = 32 * 1024
_MAX_TOKENS_BYTES = 64 * 1024
_MAX_PALETTE_ID_LEN = 64
_MAX_SHORT_FIELD_LEN = 120
_MAX_DESC_LEN = 240
_MAX_COLOR_VALUE_LEN = 64


def load_palette_package(palette_dir: Path, *, is_builtin: bool = False) -> PalettePackage:
    """Load and validate a single palette package directory."""
    if not palette_dir.exists() or not palette_dir.is_dir():
        raise PaletteValidationError(f"Palette path is not a directory: {palette_dir}")
    if palette_dir.is_symlink():
        raise PaletteValidationError(f"Palette directory cannot be a symlink: {palette_dir}")

    manifest_data = _load_json(palette_dir / "manifest.json", max_bytes=_MAX_MANIFEST_BYTES)
    manifest = _parse_manifest(manifest_data, palette_dir)
    tokens_data = _load_json(palette_dir / "tokens.json", max_bytes=_MAX_TOKENS_BYTES)
    tokens = parse_tokens(tokens_data, context=str(palette_dir))

    return PalettePackage(
        manifest=manifest,
        colors=ThemeColors.from_mapping(tokens),
        source_dir=palette_dir,
        is_builtin=is_builtin,
    )


def parse_tokens(data: Mapping[str, object], *, context: str = "tokens") -> dict[str, str]:
    """Validate a raw token mapping and return cleaned color strings."""
    _reject_unknown_keys(
        data,
        allowed=set(REQUIRED_TOKEN_KEYS) | set(OPTIONAL_TOKEN_KEYS),
        context=f"{context}/tokens.json",
    )
    missing = [key for key in REQUIRED_TOKEN_KEYS if key not in data]
    if missing:
        joined = ", ".join(sorted(missing))
        raise PaletteValidationError(f"{context}: missing required token keys: {joined}")

    tokens: dict[str, str] = {}
    for key in REQUIRED_TOKEN_KEYS + OPTIONAL_TOKEN_KEYS:
        if key not in data:
            continue
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise PaletteValidationError(f"{context}: token {key!r} must be a non-empty string")
        cleaned = value.strip()
        if len(cleaned) > _MAX_COLOR_VALUE_LEN:
            raise PaletteValidationError(f"{context}: token {key!r} value is too long")
        if parse_color(cleaned) is None:
            raise PaletteValidationError(f"{context}: token {key!r} has invalid color {cleaned!r}")
        tokens[key] = cleaned
    return tokens


def _load_json(path: Path, *, max_bytes: int) -> Mapping[str, object]:
    content = _read_text_limited(path, max_bytes=max_bytes)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise PaletteValidationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PaletteValidationError(f"Expected JSON object in {path}")
    return data


def _parse_manifest(data: Mapping[str, object], palette_dir: Path) -> PaletteManifest:
    _reject_unknown_keys(
        data,
        allowed={
            "schema_version",
            "palette_id",
            "name",
            "version",
            "author",
            "description",
            "appearance",
        },
        context=f"{palette_dir}/manifest.json",
    )

    schema_version = _required_str(data, "schema_version", palette_dir, max_len=8)
    if schema_version != PALETTE_SCHEMA_VERSION:
        raise PaletteValidationError(
            f"{palette_dir}: unsupported schema_version {schema_version!r}; "
            f"expected {PALETTE_SCHEMA_VERSION!r}"
        )

    palette_id = _required_str(data, "palette_id", palette_dir, max_len=_MAX_PALETTE_ID_LEN)
    if not _PALETTE_ID_RE.match(palette_id):
        raise PaletteValidationError(
            f"{palette_dir}: palette_id must match pattern [a-z0-9-], got {palette_id!r}"
        )

    version = _required_str(data, "version", palette_dir, max_len=40)
    if not _SEMVER_RE.match(version):
        raise PaletteValidationError(
            f"{palette_dir}: manifest version must be semver-like, got {version!r}"
        )

    appearance = _required_str(data, "appearance", palette_dir, max_len=8).lower()
    if appearance not in APPEARANCES:
        raise PaletteValidationError(
            f"{palette_dir}: appearance must be one of {', '.join(APPEARANCES)}, got {appearance!r}"
        )

    return PaletteManifest(
        schema_version=schema_version,
        palette_id=palette_id,
        name=_required_str(data, "name", palette_dir, max_len=_MAX_SHORT_FIELD_LEN),
        version=version,
        author=_required_str(data, "author", palette_dir, max_len=_MAX_SHORT_FIELD_LEN),
        description=_required_str(data, "description", palette_dir, max_len=_MAX_DESC_LEN),
        appearance=appearance,
    )


def _required_str(data: Mapping[str, object], key: str, palette_dir: Path, *, max_len: int) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise PaletteValidationError(f"{palette_dir}: field {key!r} must be a non-empty string")
    cleaned = value.strip()
    if len(cleaned) > max_len:
        raise PaletteValidationError(f"{palette_dir}: field {key!r} exceeds max length {max_len}")
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise PaletteValidationError(f"{palette_dir}: field {key!r} must be a single line string")
    return cleaned


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(key for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise PaletteValidationError(f"{context}: unsupported keys found: {joined}")


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise PaletteValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > max_bytes:
        raise PaletteValidationError(f"{path}: file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PaletteValidationError(f"Unable to read {path}: {exc}") from exc
