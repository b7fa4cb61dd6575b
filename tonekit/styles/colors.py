"""Color parsing and contrast helpers."""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import NamedTuple

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_HEX6_RE = re.compile(r"^#?(?P<digits>[0-9a-f]{6})$", re.IGNORECASE)
_FUNC_RE = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$",
    re.IGNORECASE,
)

LIGHT_TEXT = "#FFFFFF"
DARK_TEXT = "#0B1220"

_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


class Color(NamedTuple):
    """A parsed color: integer channels in [0, 255], alpha in [0, 1]."""

    r: int
    g: int
    b: int
    a: float = 1.0


def parse_color(color: object) -> Color | None:
    """Parse a hex or rgb()/rgba() color string.

    Returns None for anything that is not one of the supported notations.
    """
    if not isinstance(color, str):
        return None
    text = color.strip()

    match = _HEX_RE.match(text)
    if match:
        digits = match.group("digits")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = _FUNC_RE.match(text)
    if match:
        r, g, b = (int(part) for part in match.group(1, 2, 3))
        if max(r, g, b) > 255:
            return None
        raw_alpha = match.group(4)
        alpha = _clamp_alpha(float(raw_alpha)) if raw_alpha is not None else 1.0
        return Color(r, g, b, alpha)

    return None


def to_hex(color: Color) -> str:
    """Format a color as canonical upper-case ``#RRGGBB`` (alpha dropped)."""
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def with_alpha(color: str, alpha: float) -> str:
    """Return ``color`` as an ``rgba(...)`` string carrying ``alpha``.

    Alpha is clamped into [0, 1]. Unrecognised input comes back unchanged.
    """
    parsed = parse_color(color)
    if parsed is None:
        logger.debug("with_alpha: leaving unparsed color %r unchanged", color)
        return color
    return f"rgba({parsed.r}, {parsed.g}, {parsed.b}, {_format_alpha(_clamp_alpha(alpha))})"


def relative_luminance(color: str) -> float | None:
    """Weighted luminance in [0, 1] for a 6-digit hex color, else None."""
    if not isinstance(color, str):
        return None
    match = _HEX6_RE.match(color.strip())
    if not match:
        return None
    digits = match.group("digits")
    channels = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return sum(weight * channel for weight, channel in zip(_LUMINANCE_WEIGHTS, channels))


def choose_readable_text(
    background: str,
    light: str = LIGHT_TEXT,
    dark: str = DARK_TEXT,
) -> str:
    """Pick a text color that reads on ``background``.

    Luminance strictly above 0.5 gets ``dark``; exactly 0.5 and below get
    ``light``. Backgrounds that are not 6-digit hex also get ``light``.
    """
    luminance = relative_luminance(background)
    if luminance is None:
        return light
    return dark if luminance > 0.5 else light


def blend(top: Color, bottom: Color, weight: float) -> Color:
    """Linear per-channel mix: ``weight`` of ``top`` over ``1 - weight`` of ``bottom``."""
    weight = _clamp_alpha(weight)
    return Color(
        round_channel(top.r * weight + bottom.r * (1 - weight)),
        round_channel(top.g * weight + bottom.g * (1 - weight)),
        round_channel(top.b * weight + bottom.b * (1 - weight)),
    )


def round_channel(value: float) -> int:
    # Half-up, not banker's rounding.
    return max(0, min(255, int(value + 0.5)))


def _clamp_alpha(alpha: float) -> float:
    return max(0.0, min(1.0, float(alpha)))


def _format_alpha(alpha: float) -> str:
    if alpha.is_integer():
        return str(int(alpha))
    # Shortest round-tripping digits, always positional (no "1e-05").
    return format(Decimal(repr(alpha)), "f")
