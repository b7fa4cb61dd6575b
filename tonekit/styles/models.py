"""Style descriptor value types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Sizing:
    """Fixed metrics for one control size."""

    height: int
    pad_h: int
    radius: int
    text: int


@dataclass(frozen=True, slots=True)
class ContainerStyle:
    """Box attributes of a control."""

    height: int
    padding_horizontal: int
    border_radius: int
    background_color: str
    border_width: int = 0
    border_color: str | None = None
    align_items: str = "center"
    justify_content: str = "center"


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Label attributes of a control."""

    font_size: int
    font_weight: str
    color: str


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Resolved ``{container, text}`` style for a sized control."""

    container: ContainerStyle
    text: TextStyle

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Plain nested dict for renderers that take attribute mappings."""
        return {"container": asdict(self.container), "text": asdict(self.text)}


@dataclass(frozen=True, slots=True)
class BadgeVisuals:
    """Colors for a badge or indicator that carries no sizing."""

    background_color: str
    border_color: str
    text_color: str
    ripple_color: str
