"""Closed option sets for styled controls."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


def coerce_member(enum_cls: type[_E], value: object, default: _E) -> _E:
    """Map ``value`` onto ``enum_cls``, falling back to ``default``.

    Accepts members or their string values (case-insensitive). Unknown values
    are logged and replaced rather than rejected.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        logger.debug("unknown %s %r; using %r", enum_cls.__name__, value, default.value)
        return default


class Tone(str, Enum):
    """Semantic intent of a chip or badge."""

    NEUTRAL = "neutral"
    ACCENT = "accent"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"

    @classmethod
    def coerce(cls, value: object) -> Tone:
        return coerce_member(cls, value, cls.NEUTRAL)


class Variant(str, Enum):
    """Role of a button-like control."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    GHOST = "ghost"
    DANGER = "danger"

    @classmethod
    def coerce(cls, value: object) -> Variant:
        return coerce_member(cls, value, cls.PRIMARY)


class ButtonSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"

    @classmethod
    def coerce(cls, value: object) -> ButtonSize:
        return coerce_member(cls, value, cls.MD)


class ChipSize(str, Enum):
    SM = "sm"
    MD = "md"

    @classmethod
    def coerce(cls, value: object) -> ChipSize:
        return coerce_member(cls, value, cls.MD)
