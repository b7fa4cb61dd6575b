"""Error codes and error reporting helpers for tonekit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for palette and configuration problems."""

    # Palette errors
    PALETTE_NOT_FOUND = auto()
    PALETTE_INVALID = auto()

    # Configuration errors
    CONFIG_INVALID = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.PALETTE_NOT_FOUND: "The requested palette is not installed.",
    ErrorCode.PALETTE_INVALID: "The palette package failed validation.",
    ErrorCode.CONFIG_INVALID: "A configuration value is invalid; the default is used instead.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.PALETTE_NOT_FOUND: "Reload palettes or pick one of the built-in palettes.",
    ErrorCode.PALETTE_INVALID: "Check manifest.json and tokens.json against the palette format.",
}


@dataclass
class TonekitError(Exception):
    """Base exception carrying an error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def format_error_for_user(error: TonekitError | Exception) -> str:
    """Format an error for display with its suggestion, if any."""
    if not isinstance(error, TonekitError):
        error = TonekitError(ErrorCode.PALETTE_INVALID, message=f"{type(error).__name__}: {error}")
    parts = [error.message]
    if error.details:
        parts.append(" (" + ", ".join(f"{k}={v}" for k, v in error.details.items()) + ")")
    if error.suggestion:
        parts.append(f" {error.suggestion}")
    return "".join(parts)
