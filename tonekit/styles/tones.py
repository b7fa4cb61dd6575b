"""Tone derivations: muted and vibrant shades, tone and role base colors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tonekit.styles.colors import (
    LIGHT_TEXT,
    Color,
    blend,
    parse_color,
    relative_luminance,
    round_channel,
    to_hex,
)
from tonekit.styles.roles import Tone, Variant

if TYPE_CHECKING:
    from tonekit.palettes.models import ThemeColors

logger = logging.getLogger(__name__)

# Share of the base color kept when washing it toward the background.
MUTED_BASE_WEIGHT = 0.3
# Fraction of the remaining distance each channel is pushed toward 0 or 255.
VIBRANT_FACTOR = 0.15

WHITE = LIGHT_TEXT
TRANSPARENT = "transparent"

_WHITE_COLOR = Color(255, 255, 255)


@dataclass(frozen=True, slots=True)
class RoleColors:
    """Background, optional border and text color of a control role."""

    background: str
    border: str | None
    text: str


def muted(base: str, background: str = WHITE) -> str:
    """Wash ``base`` toward ``background`` for disabled or inactive states.

    The result keeps MUTED_BASE_WEIGHT of the base color, so its luminance
    falls between the two inputs. No alpha is involved; the returned color is
    opaque ``#RRGGBB``. An unparsed base comes back unchanged and an unparsed
    background is read as white.

    When rounding lands on one of the inputs, the first differing channel is
    stepped one unit toward the other input. Inputs that differ by a single
    unit in a single channel leave no color in between; the background is
    returned then.
    """
    base_color = parse_color(base)
    if base_color is None:
        logger.debug("muted: leaving unparsed color %r unchanged", base)
        return base
    surface = parse_color(background)
    if surface is None:
        surface = _WHITE_COLOR
    mixed = blend(base_color, surface, MUTED_BASE_WEIGHT)
    if base_color[:3] != surface[:3] and mixed[:3] in (base_color[:3], surface[:3]):
        mixed = _step_off_inputs(mixed, base_color, surface)
    return to_hex(mixed)


def _step_off_inputs(mixed: Color, base: Color, surface: Color) -> Color:
    toward = base if mixed[:3] == surface[:3] else surface
    inputs = (base[:3], surface[:3])
    for index in range(3):
        if base[index] == surface[index]:
            continue
        channels = list(mixed[:3])
        channels[index] += 1 if toward[index] > mixed[index] else -1
        if tuple(channels) not in inputs:
            return Color(*channels)
    return mixed


def vibrant(base: str) -> str:
    """Push each channel of ``base`` toward its nearer extreme.

    Channels above 127 move VIBRANT_FACTOR of the way to 255, the rest move
    the same share toward 0. A result that lands exactly on the 0.5 text
    contrast boundary is nudged one step darker.
    """
    color = parse_color(base)
    if color is None:
        logger.debug("vibrant: leaving unparsed color %r unchanged", base)
        return base

    pushed = Color(*(_push_channel(channel) for channel in color[:3]))
    result = to_hex(pushed)
    # Exact float equality: only a weighted sum of exactly 0.5 takes this step.
    if relative_luminance(result) == 0.5 and relative_luminance(to_hex(color)) != 0.5:
        result = to_hex(pushed._replace(g=max(0, pushed.g - 1)))
    return result


def _push_channel(channel: int) -> int:
    if channel > 127:
        return round_channel(channel + (255 - channel) * VIBRANT_FACTOR)
    return round_channel(channel * (1 - VIBRANT_FACTOR))


def tone_base_color(colors: ThemeColors, tone: Tone | str) -> str:
    """Palette color carrying a tone's semantic hue."""
    tone = Tone.coerce(tone)
    if tone is Tone.SUCCESS:
        return colors.positive
    elif tone is Tone.DANGER:
        return colors.negative
    elif tone is Tone.WARNING:
        return colors.warning
    else:
        # neutral interactions reuse the primary tint for feedback
        return colors.tint_primary


def role_colors(colors: ThemeColors, variant: Variant | str) -> RoleColors:
    """Enabled colors of a button variant."""
    variant = Variant.coerce(variant)
    if variant is Variant.SECONDARY:
        return RoleColors(colors.card, colors.border, colors.text_primary)
    elif variant is Variant.GHOST:
        return RoleColors(TRANSPARENT, None, colors.tint_primary)
    elif variant is Variant.DANGER:
        return RoleColors(colors.negative, None, WHITE)
    else:
        return RoleColors(colors.tint_primary, None, WHITE)


def disabled_colors(colors: ThemeColors, variant: Variant | str) -> RoleColors:
    """Muted counterpart of :func:`role_colors` against the palette background."""
    enabled = role_colors(colors, variant)
    return RoleColors(
        background=_mute_unless_transparent(enabled.background, colors.background),
        border=_mute_unless_transparent(enabled.border, colors.background),
        text=_mute_unless_transparent(enabled.text, colors.background),
    )


def _mute_unless_transparent(color: str | None, background: str) -> str | None:
    if color is None or color == TRANSPARENT:
        return color
    return muted(color, background)
