#!/usr/bin/env python3
"""
WCAG 2.1 relative luminance, contrast ratio and compliance levels, plus
color vision deficiency simulation.
"""

from dataclasses import dataclass

import numpy as np

from color_convert import (
    HSLColor,
    RGBColor,
    hex_to_rgb,
    hsl_to_rgb,
    linear_to_srgb,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
    srgb_to_linear,
)


# =============================================================================
# Constants
# =============================================================================

# WCAG 2.1 thresholds
NORMAL_TEXT_AAA = 7.0
NORMAL_TEXT_AA = 4.5
LARGE_TEXT_AAA = 4.5
LARGE_TEXT_AA = 3.0
UI_COMPONENT_AA = 3.0

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

LEVEL_DESCRIPTIONS = {
    'AAA': 'Enhanced contrast - highest level of accessibility',
    'AA': 'Minimum contrast - meets standard accessibility',
    'AA Large': 'Meets requirements for large text only (18pt+ or 14pt+ bold)',
    'Fail': 'Does not meet accessibility standards',
}

SUGGESTION_STEP = 10  # percent
MAX_SUGGESTIONS = 4


@dataclass(frozen=True)
class WCAGCompliance:
    normal_text: str
    large_text: str
    ui_components: str


@dataclass(frozen=True)
class AccessibleColorPair:
    foreground: str
    background: str
    contrast_ratio: float
    compliance: WCAGCompliance
    passes: bool


# =============================================================================
# Luminance and ratio
# =============================================================================

def relative_luminance(rgb: RGBColor) -> float:
    """WCAG relative luminance in [0, 1]."""
    r, g, b = (srgb_to_linear(c / 255) for c in (rgb.r, rgb.g, rgb.b))
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(rgb1: RGBColor, rgb2: RGBColor) -> float:
    """Contrast ratio between two colors, from 1 (same) to 21 (black/white)."""
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def wcag_compliance(ratio: float) -> WCAGCompliance:
    """Classify a contrast ratio for normal text, large text and UI parts."""
    if ratio >= NORMAL_TEXT_AAA:
        normal = 'AAA'
    elif ratio >= NORMAL_TEXT_AA:
        normal = 'AA'
    else:
        normal = 'Fail'

    if ratio >= LARGE_TEXT_AAA:
        large = 'AAA'
    elif ratio >= LARGE_TEXT_AA:
        large = 'AA Large'
    else:
        large = 'Fail'

    ui = 'AA' if ratio >= UI_COMPONENT_AA else 'Fail'

    return WCAGCompliance(normal_text=normal, large_text=large, ui_components=ui)


def check_accessibility(foreground: str, background: str) -> AccessibleColorPair:
    """
    Evaluate a foreground/background hex pair.

    Raises:
        ValueError: If either color is not a valid hex string
    """
    ratio = contrast_ratio(hex_to_rgb(foreground), hex_to_rgb(background))
    compliance = wcag_compliance(ratio)

    return AccessibleColorPair(
        foreground=foreground,
        background=background,
        contrast_ratio=ratio,
        compliance=compliance,
        passes=compliance.normal_text != 'Fail',
    )


# =============================================================================
# Suggestions and formatting
# =============================================================================

def _scale_lightness(rgb: RGBColor, factor: float) -> str:
    hsl = rgb_to_hsl(rgb)
    lightness = min(100.0, max(0.0, hsl.l * factor))
    return rgb_to_hex(hsl_to_rgb(HSLColor(hsl.h, hsl.s, lightness)))


def _first_passing(base: RGBColor, sign: int, target_ratio: float, other: RGBColor):
    for step in range(0, 101, SUGGESTION_STEP):
        candidate = _scale_lightness(base, 1 + sign * step / 100)
        if contrast_ratio(hex_to_rgb(candidate), other) >= target_ratio:
            return candidate
    return None


def suggest_accessible_colors(foreground: str, background: str,
                              target_ratio: float = NORMAL_TEXT_AA) -> list[dict]:
    """
    Suggest pairs that reach target_ratio by darkening or lightening one side.

    Tries the foreground first (darker, then lighter), then the background.

    Returns:
        Up to four {'foreground', 'background'} dicts, duplicates removed
    """
    fg = hex_to_rgb(foreground)
    bg = hex_to_rgb(background)

    suggestions = []
    for sign in (-1, 1):
        candidate = _first_passing(fg, sign, target_ratio, bg)
        if candidate:
            suggestions.append({'foreground': candidate, 'background': background})

    for sign in (-1, 1):
        candidate = _first_passing(bg, sign, target_ratio, fg)
        if candidate:
            suggestions.append({'foreground': foreground, 'background': candidate})

    unique = {}
    for pair in suggestions:
        unique.setdefault((pair['foreground'], pair['background']), pair)

    return list(unique.values())[:MAX_SUGGESTIONS]


def format_contrast_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def wcag_level_description(level: str) -> str:
    if level not in LEVEL_DESCRIPTIONS:
        raise ValueError(f"Unknown WCAG level: {level!r}")
    return LEVEL_DESCRIPTIONS[level]


# =============================================================================
# Color vision deficiency simulation
# =============================================================================

# Applied to linear RGB, the default color space of SVG feColorMatrix filters
COLOR_BLINDNESS_MATRICES = {
    'protanopia': np.array([[0.567, 0.433, 0], [0.558, 0.442, 0], [0, 0.242, 0.758]]),
    'deuteranopia': np.array([[0.625, 0.375, 0], [0.7, 0.3, 0], [0, 0.3, 0.7]]),
    'tritanopia': np.array([[0.95, 0.05, 0], [0, 0.433, 0.567], [0, 0.475, 0.525]]),
    'achromatopsia': np.array([[0.299, 0.587, 0.114]] * 3),
    'protanomaly': np.array([[0.817, 0.183, 0], [0.333, 0.667, 0], [0, 0.125, 0.875]]),
    'deuteranomaly': np.array([[0.8, 0.2, 0], [0.258, 0.742, 0], [0, 0.142, 0.858]]),
    'tritanomaly': np.array([[0.967, 0.033, 0], [0, 0.733, 0.267], [0, 0.183, 0.817]]),
}


def simulate_color_blindness(color: str, deficiency: str) -> str:
    """
    Approximate how a hex color looks with a color vision deficiency.

    Raises:
        ValueError: If the color or the deficiency name is unknown
    """
    if deficiency not in COLOR_BLINDNESS_MATRICES:
        raise ValueError(
            f"Unknown color vision deficiency: {deficiency!r} "
            f"(expected one of {', '.join(COLOR_BLINDNESS_MATRICES)})"
        )

    srgb = np.array(hex_to_rgb(color).as_tuple(), dtype=np.float64) / 255.0
    linear = COLOR_BLINDNESS_MATRICES[deficiency] @ srgb_to_linear(srgb)
    encoded = linear_to_srgb(np.clip(linear, 0.0, 1.0))

    return rgb_to_hex(RGBColor(*(int(round_half_up(c * 255)) for c in encoded)))


def simulate_palette(colors: list[str], deficiency: str) -> list[str]:
    return [simulate_color_blindness(c, deficiency) for c in colors]
