"""Badge and indicator visuals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tonekit.styles.colors import with_alpha
from tonekit.styles.models import BadgeVisuals
from tonekit.styles.roles import ChipSize, Tone
from tonekit.styles.tones import WHITE, tone_base_color

if TYPE_CHECKING:
    from tonekit.palettes.models import ThemeColors

RIPPLE_ALPHA = 0.12
SOFT_BACKGROUND_ALPHA = 0.1
SOFT_BORDER_ALPHA = 0.2


@dataclass(frozen=True, slots=True)
class BadgeOptions:
    """Badge options. ``size`` is accepted for parity with chips but unused."""

    tone: Tone
    selected: bool = False
    size: ChipSize | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tone", Tone.coerce(self.tone))
        object.__setattr__(self, "selected", bool(self.selected))
        if self.size is not None:
            object.__setattr__(self, "size", ChipSize.coerce(self.size))


def get_badge_visuals(colors: ThemeColors, options: BadgeOptions) -> BadgeVisuals:
    """Colors for a badge; the ripple tint does not depend on selection."""
    base = tone_base_color(colors, options.tone)
    ripple = with_alpha(base, RIPPLE_ALPHA)
    if options.selected:
        return BadgeVisuals(
            background_color=base,
            border_color=base,
            text_color=WHITE,
            ripple_color=ripple,
        )
    return BadgeVisuals(
        background_color=with_alpha(base, SOFT_BACKGROUND_ALPHA),
        border_color=with_alpha(base, SOFT_BORDER_ALPHA),
        text_color=base,
        ripple_color=ripple,
    )
