"""Style derivation exports."""

from tonekit.styles.badges import BadgeOptions, get_badge_visuals
from tonekit.styles.colors import choose_readable_text, parse_color, with_alpha
from tonekit.styles.models import BadgeVisuals, ContainerStyle, StyleDescriptor, TextStyle
from tonekit.styles.roles import ButtonSize, ChipSize, Tone, Variant
from tonekit.styles.tones import disabled_colors, muted, tone_base_color, vibrant
from tonekit.styles.variants import (
    ButtonOptions,
    ChipOptions,
    resolve_button_style,
    resolve_chip_style,
)

__all__ = [
    "BadgeOptions",
    "BadgeVisuals",
    "ButtonOptions",
    "ButtonSize",
    "ChipOptions",
    "ChipSize",
    "ContainerStyle",
    "StyleDescriptor",
    "TextStyle",
    "Tone",
    "Variant",
    "choose_readable_text",
    "disabled_colors",
    "get_badge_visuals",
    "muted",
    "parse_color",
    "resolve_button_style",
    "resolve_chip_style",
    "tone_base_color",
    "vibrant",
    "with_alpha",
]
