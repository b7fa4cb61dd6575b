"""Tests for color parsing, alpha and contrast helpers."""

from __future__ import annotations

import pytest

from tonekit.styles import colors as colors_module
from tonekit.styles.colors import (
    Color,
    choose_readable_text,
    parse_color,
    relative_luminance,
    to_hex,
    with_alpha,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#0F766E", Color(15, 118, 110, 1.0)),
        ("#0f766e", Color(15, 118, 110, 1.0)),
        ("ffffff", Color(255, 255, 255, 1.0)),
        ("#abc", Color(0xAA, 0xBB, 0xCC, 1.0)),
        ("  #000  ", Color(0, 0, 0, 1.0)),
        ("rgb(1, 2, 3)", Color(1, 2, 3, 1.0)),
        ("rgba(15, 118, 110, 0.24)", Color(15, 118, 110, 0.24)),
        ("RGBA(15,118,110,1)", Color(15, 118, 110, 1.0)),
        ("rgba(0, 0, 0, 1.5)", Color(0, 0, 0, 1.0)),
    ],
)
def test_parse_color_accepts_supported_notations(raw: str, expected: Color) -> None:
    assert parse_color(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["not-a-color", "", "#12345", "#GGGGGG", "rgba(300, 0, 0, 1)", "hsl(0, 0%, 0%)", None, 42],
)
def test_parse_color_reports_unparsed(raw: object) -> None:
    assert parse_color(raw) is None


def test_to_hex_is_upper_case_six_digit() -> None:
    assert to_hex(Color(15, 118, 110, 0.5)) == "#0F766E"


@pytest.mark.parametrize("color", ["#0F766E", "#10B981", "#fff", "#000000", "EF4444"])
@pytest.mark.parametrize("alpha", [0, 1e-9, 1e-05, 0.1, 0.12, 0.333, 0.5, 1])
def test_with_alpha_keeps_channels_and_sets_exact_alpha(color: str, alpha: float) -> None:
    original = parse_color(color)
    parsed = parse_color(with_alpha(color, alpha))

    assert parsed is not None and original is not None
    assert parsed[:3] == original[:3]
    assert parsed.a == alpha


def test_with_alpha_clamps_out_of_range_alpha() -> None:
    assert with_alpha("#0F766E", -0.3) == with_alpha("#0F766E", 0) == "rgba(15, 118, 110, 0)"
    assert with_alpha("#0F766E", 2.0) == with_alpha("#0F766E", 1) == "rgba(15, 118, 110, 1)"


def test_with_alpha_replaces_existing_alpha() -> None:
    assert with_alpha("rgba(15, 118, 110, 0.24)", 0.5) == "rgba(15, 118, 110, 0.5)"
    assert with_alpha("rgb(1, 2, 3)", 0.12) == "rgba(1, 2, 3, 0.12)"


def test_with_alpha_writes_small_alphas_positionally() -> None:
    faint = with_alpha("#0F766E", 0.00001)
    assert faint == "rgba(15, 118, 110, 0.00001)"
    assert with_alpha(faint, 0.5) == "rgba(15, 118, 110, 0.5)"


def test_with_alpha_leaves_unparsed_input_unchanged() -> None:
    assert with_alpha("not-a-color", 0.5) == "not-a-color"


def test_relative_luminance_only_for_six_digit_hex() -> None:
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)
    assert relative_luminance("#000000") == 0
    assert relative_luminance("#0F766E") == pytest.approx(0.3746, abs=1e-3)
    assert relative_luminance("#fff") is None
    assert relative_luminance("rgba(255, 255, 255, 1)") is None


def test_choose_readable_text_defaults() -> None:
    assert choose_readable_text("#FFFFFF") == "#0B1220"
    assert choose_readable_text("#000000") == "#FFFFFF"
    assert choose_readable_text("#0F766E") == "#FFFFFF"


def test_choose_readable_text_custom_pair() -> None:
    assert choose_readable_text("#F8FAFC", light="#EEE", dark="#111") == "#111"
    assert choose_readable_text("#0B1220", light="#EEE", dark="#111") == "#EEE"


def test_choose_readable_text_unparsed_background_gets_light() -> None:
    assert choose_readable_text("rgba(0, 0, 0, 1)") == "#FFFFFF"
    assert choose_readable_text("#fff") == "#FFFFFF"
    assert choose_readable_text("transparent", light="#EEE") == "#EEE"


def test_choose_readable_text_luminance_exactly_half_gets_light(monkeypatch) -> None:
    monkeypatch.setattr(colors_module, "relative_luminance", lambda _color: 0.5)
    assert choose_readable_text("#808080") == "#FFFFFF"

    monkeypatch.setattr(colors_module, "relative_luminance", lambda _color: 0.5000001)
    assert choose_readable_text("#808080") == "#0B1220"
