"""Button and chip style resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tonekit.styles.colors import choose_readable_text, with_alpha
from tonekit.styles.models import ContainerStyle, Sizing, StyleDescriptor, TextStyle
from tonekit.styles.roles import ButtonSize, ChipSize, Tone, Variant
from tonekit.styles.tones import disabled_colors, muted, role_colors, vibrant

if TYPE_CHECKING:
    from tonekit.palettes.models import ThemeColors

BUTTON_SIZING: dict[ButtonSize, Sizing] = {
    ButtonSize.SM: Sizing(height=36, pad_h=8, radius=8, text=14),
    ButtonSize.MD: Sizing(height=44, pad_h=16, radius=12, text=16),
    ButtonSize.LG: Sizing(height=52, pad_h=20, radius=14, text=17),
}

CHIP_SIZING: dict[ChipSize, Sizing] = {
    ChipSize.SM: Sizing(height=28, pad_h=8, radius=8, text=12),
    ChipSize.MD: Sizing(height=32, pad_h=12, radius=16, text=13),
}

BUTTON_FONT_WEIGHT = "700"
CHIP_FONT_WEIGHT = "600"
SOFT_FILL_ALPHA = 0.12


@dataclass(frozen=True, slots=True)
class ButtonOptions:
    """Recognised button options and their defaults."""

    variant: Variant = Variant.PRIMARY
    size: ButtonSize = ButtonSize.MD
    disabled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "variant", Variant.coerce(self.variant))
        object.__setattr__(self, "size", ButtonSize.coerce(self.size))
        object.__setattr__(self, "disabled", bool(self.disabled))


@dataclass(frozen=True, slots=True)
class ChipOptions:
    """Recognised chip options and their defaults."""

    tone: Tone = Tone.NEUTRAL
    size: ChipSize = ChipSize.MD
    selected: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "tone", Tone.coerce(self.tone))
        object.__setattr__(self, "size", ChipSize.coerce(self.size))
        object.__setattr__(self, "selected", bool(self.selected))


def resolve_button_style(
    colors: ThemeColors,
    options: ButtonOptions | None = None,
) -> StyleDescriptor:
    """Resolve container and text style for a button."""
    options = options or ButtonOptions()
    sizing = BUTTON_SIZING[options.size]
    if options.disabled:
        role = disabled_colors(colors, options.variant)
    else:
        role = role_colors(colors, options.variant)

    container = ContainerStyle(
        height=sizing.height,
        padding_horizontal=sizing.pad_h,
        border_radius=sizing.radius,
        background_color=role.background,
        border_width=1 if role.border else 0,
        border_color=role.border,
    )
    text = TextStyle(font_size=sizing.text, font_weight=BUTTON_FONT_WEIGHT, color=role.text)
    return StyleDescriptor(container=container, text=text)


def resolve_chip_style(
    colors: ThemeColors,
    options: ChipOptions | None = None,
) -> StyleDescriptor:
    """Resolve container and text style for a filter chip.

    Selected chips get a solid vibrant fill with contrast-picked text.
    Unselected chips stay soft: neutral sits on the card, accent on the soft
    tint, and status tones on a 12% wash of their own color.
    """
    options = options or ChipOptions()
    sizing = CHIP_SIZING[options.size]
    tone = options.tone

    if tone is Tone.ACCENT:
        base = colors.tint_primary
        soft_background = colors.tint_soft_bg
    elif tone is Tone.SUCCESS:
        base = colors.positive
        soft_background = with_alpha(base, SOFT_FILL_ALPHA)
    elif tone is Tone.WARNING:
        base = colors.warning
        soft_background = with_alpha(base, SOFT_FILL_ALPHA)
    elif tone is Tone.DANGER:
        base = colors.negative
        soft_background = with_alpha(base, SOFT_FILL_ALPHA)
    else:
        base = colors.text_secondary
        soft_background = colors.card

    if options.selected:
        fill = vibrant(base)
        background, border, text_color = fill, fill, choose_readable_text(fill)
    else:
        background = soft_background
        border = colors.border
        text_color = muted(base, colors.background)

    container = ContainerStyle(
        height=sizing.height,
        padding_horizontal=sizing.pad_h,
        border_radius=sizing.radius,
        background_color=background,
        border_width=1,
        border_color=border,
    )
    text = TextStyle(font_size=sizing.text, font_weight=CHIP_FONT_WEIGHT, color=text_color)
    return StyleDescriptor(container=container, text=text)
