"""Palettes compiled into the package, used when no package loads."""

from __future__ import annotations

from tonekit.palettes.models import ThemeColors

BRAND_TINT = "#0F766E"

FALLBACK_LIGHT = ThemeColors(
    background="#F8FAFC",
    card="#FFFFFF",
    border="#E5E7EB",
    text_primary="#111827",
    text_secondary="#374151",
    tint_primary=BRAND_TINT,
    tint_soft_bg="rgba(15, 118, 110, 0.1)",
    positive="#10B981",
    negative="#EF4444",
    warning="#F59E0B",
    error_bg="#FEE2E2",
    success_bg="#ECFDF5",
    warning_bg="#FFFBEB",
)

FALLBACK_DARK = ThemeColors(
    background="#0B1220",
    card="#111827",
    border="#1F2937",
    text_primary="#E5E7EB",
    text_secondary="#9CA3AF",
    tint_primary=BRAND_TINT,
    tint_soft_bg="rgba(15, 118, 110, 0.24)",
    positive="#10B981",
    negative="#EF4444",
    warning="#F59E0B",
    error_bg="#3A1D1D",
    success_bg="#102A24",
    warning_bg="#2A2314",
)
