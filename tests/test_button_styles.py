"""Tests for button style resolution."""

from __future__ import annotations

import pytest

from tonekit.palettes.defaults import FALLBACK_DARK, FALLBACK_LIGHT
from tonekit.styles.colors import parse_color
from tonekit.styles.roles import ButtonSize, Variant
from tonekit.styles.tones import muted
from tonekit.styles.variants import ButtonOptions, resolve_button_style

PALETTE = FALLBACK_LIGHT


def test_primary_md_defaults() -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant="primary", size="md"))

    assert style.container.height == 44
    assert style.container.padding_horizontal == 16
    assert style.container.border_radius == 12
    assert style.container.background_color == PALETTE.tint_primary
    assert style.container.border_width == 0
    assert style.container.border_color is None
    assert style.text.color == "#FFFFFF"
    assert style.text.font_size == 16
    assert style.text.font_weight == "700"


def test_no_options_means_primary_md() -> None:
    assert resolve_button_style(PALETTE) == resolve_button_style(PALETTE, ButtonOptions())


@pytest.mark.parametrize(
    ("size", "metrics"),
    [
        (ButtonSize.SM, (36, 8, 8, 14)),
        (ButtonSize.MD, (44, 16, 12, 16)),
        (ButtonSize.LG, (52, 20, 14, 17)),
    ],
)
@pytest.mark.parametrize("variant", list(Variant))
def test_sizing_is_independent_of_variant(size, metrics, variant) -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant=variant, size=size))
    container = style.container
    assert (
        container.height,
        container.padding_horizontal,
        container.border_radius,
        style.text.font_size,
    ) == metrics


@pytest.mark.parametrize(
    ("variant", "background", "text"),
    [
        (Variant.PRIMARY, "tint_primary", None),
        (Variant.SECONDARY, "card", "text_primary"),
        (Variant.DANGER, "negative", None),
    ],
)
def test_enabled_variant_colors(variant, background: str, text) -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant=variant))
    assert style.container.background_color == getattr(PALETTE, background)
    expected_text = getattr(PALETTE, text) if text else "#FFFFFF"
    assert style.text.color == expected_text


def test_ghost_is_transparent_with_tinted_text() -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant=Variant.GHOST))
    assert style.container.background_color == "transparent"
    assert style.text.color == PALETTE.tint_primary


@pytest.mark.parametrize("disabled", [False, True])
@pytest.mark.parametrize("variant", list(Variant))
def test_only_secondary_has_border(variant: Variant, disabled: bool) -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant=variant, disabled=disabled))
    if variant is Variant.SECONDARY:
        assert style.container.border_width == 1
        assert style.container.border_color is not None
    else:
        assert style.container.border_width == 0
        assert style.container.border_color is None


def test_disabled_primary_mutes_text_and_background() -> None:
    enabled = resolve_button_style(PALETTE, ButtonOptions(variant="primary", size="md"))
    disabled = resolve_button_style(
        PALETTE, ButtonOptions(variant="primary", size="md", disabled=True)
    )

    assert disabled.text.color != "#FFFFFF"
    assert disabled.text.color != enabled.text.color
    assert parse_color(disabled.text.color) is not None
    assert disabled.container.background_color == muted(PALETTE.tint_primary, PALETTE.background)


@pytest.mark.parametrize("palette", [FALLBACK_LIGHT, FALLBACK_DARK])
@pytest.mark.parametrize("variant", list(Variant))
def test_disabled_colors_stay_opaque(palette, variant: Variant) -> None:
    style = resolve_button_style(palette, ButtonOptions(variant=variant, disabled=True))
    for value in (style.container.background_color, style.text.color):
        assert not value.startswith("rgba")


def test_disabled_ghost_stays_transparent() -> None:
    style = resolve_button_style(PALETTE, ButtonOptions(variant="ghost", disabled=True))
    assert style.container.background_color == "transparent"
    assert style.text.color == muted(PALETTE.tint_primary, PALETTE.background)


@pytest.mark.parametrize("variant", [*Variant, "sparkly", None, 7])
def test_every_variant_and_sentinel_resolves(variant) -> None:
    options = ButtonOptions(variant=variant, size="xl")
    style = resolve_button_style(PALETTE, options)

    assert isinstance(options.variant, Variant)
    assert options.size is ButtonSize.MD
    assert parse_color(style.text.color) is not None
    if variant not in list(Variant):
        assert style == resolve_button_style(PALETTE, ButtonOptions())


def test_options_coerce_strings() -> None:
    options = ButtonOptions(variant=" Ghost ", size="LG", disabled=1)
    assert options == ButtonOptions(variant=Variant.GHOST, size=ButtonSize.LG, disabled=True)


def test_resolution_is_idempotent() -> None:
    options = ButtonOptions(variant="secondary", size="sm", disabled=True)
    first = resolve_button_style(PALETTE, options)
    second = resolve_button_style(PALETTE, options)
    assert first == second
    assert first.as_dict() == second.as_dict()


def test_as_dict_shape() -> None:
    data = resolve_button_style(PALETTE).as_dict()
    assert data["container"]["height"] == 44
    assert data["container"]["align_items"] == "center"
    assert data["text"] == {"font_size": 16, "font_weight": "700", "color": "#FFFFFF"}
