#!/usr/bin/env python3
"""
Color value types and conversions between RGB, HSL, OKLCH and hex.

HSL math runs on fractions [0, 1] internally. Percentages only appear on the
public HSLColor: rgb_to_hsl converts fractions to percent when it builds one,
hsl_to_rgb converts percent back to fractions when it consumes one.
"""

import math
import re
from dataclasses import dataclass

import numpy as np


# =============================================================================
# Types
# =============================================================================

@dataclass(frozen=True)
class RGBColor:
    """8-bit sRGB color."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class OKLCHColor:
    """Lightness [0, 1], chroma (>= 0, practically < 0.4), hue in degrees."""
    l: float
    c: float
    h: float


@dataclass(frozen=True)
class ExtractedColor:
    """One palette entry with every representation precomputed."""
    rgb: RGBColor
    hsl: HSLColor
    oklch: OKLCHColor
    hex: str
    percentage: float  # 0-100, one decimal


# =============================================================================
# Constants
# =============================================================================

# sRGB transfer function
SRGB_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4

# Linear sRGB -> LMS
OKLAB_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# LMS' -> OKLab
OKLAB_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$')


# =============================================================================
# Helpers
# =============================================================================

def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves toward +inf (Python's round() uses banker's rounding)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def circular_hue_distance(hue1: float, hue2: float) -> float:
    """Compute minimum angular distance between two hues (0-180)."""
    diff = abs(hue1 - hue2)
    return min(diff, 360 - diff)


def srgb_to_linear(value):
    """Decode sRGB gamma. Accepts a float or numpy array in [0, 1]."""
    if isinstance(value, np.ndarray):
        return np.where(
            value > SRGB_THRESHOLD,
            ((value + 0.055) / 1.055) ** SRGB_GAMMA,
            value / SRGB_LINEAR_SLOPE,
        )
    if value > SRGB_THRESHOLD:
        return ((value + 0.055) / 1.055) ** SRGB_GAMMA
    return value / SRGB_LINEAR_SLOPE


def linear_to_srgb(value):
    """Encode linear light back to sRGB gamma. Accepts a float or numpy array in [0, 1]."""
    if isinstance(value, np.ndarray):
        return np.where(
            value > SRGB_THRESHOLD / SRGB_LINEAR_SLOPE,
            1.055 * np.power(np.maximum(value, 0), 1 / SRGB_GAMMA) - 0.055,
            value * SRGB_LINEAR_SLOPE,
        )
    if value > SRGB_THRESHOLD / SRGB_LINEAR_SLOPE:
        return 1.055 * value ** (1 / SRGB_GAMMA) - 0.055
    return value * SRGB_LINEAR_SLOPE


# =============================================================================
# Hex
# =============================================================================

def rgb_to_hex(rgb: RGBColor) -> str:
    """Format as #RRGGBB (uppercase)."""
    channels = (int(round_half_up(c)) for c in (rgb.r, rgb.g, rgb.b))
    return '#' + ''.join(f"{c:02X}" for c in channels)


def hex_to_rgb(value: str) -> RGBColor:
    """
    Parse a hex color string.

    Accepts '#RRGGBB', 'RRGGBB' and the '#RGB' shorthand.

    Raises:
        ValueError: If the string is not a hex color
    """
    match = HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)

    return RGBColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


# =============================================================================
# HSL
# =============================================================================

def hsl_fractions(rgb: RGBColor) -> tuple[float, float, float]:
    """Unrounded (h, s, l), each a fraction in [0, 1]."""
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

        if max_c == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return h, s, l


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert RGB to HSL, rounded to whole degrees and percent."""
    h, s, l = hsl_fractions(rgb)

    hue = round_half_up(h * 360) % 360
    return HSLColor(h=hue, s=round_half_up(s * 100), l=round_half_up(l * 100))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL (degrees, percent) back to 8-bit RGB."""
    h = hsl.h / 360
    s = hsl.s / 100
    l = hsl.l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGBColor(
        int(round_half_up(r * 255)),
        int(round_half_up(g * 255)),
        int(round_half_up(b * 255)),
    )


# =============================================================================
# OKLCH
# =============================================================================

def rgb_to_oklab(rgb: RGBColor) -> np.ndarray:
    """Convert RGB to unrounded OKLab [L, a, b]."""
    srgb = np.array([rgb.r, rgb.g, rgb.b], dtype=np.float64) / 255.0
    linear = srgb_to_linear(srgb)
    lms = OKLAB_M1 @ linear
    return OKLAB_M2 @ np.cbrt(lms)


def rgb_to_oklch(rgb: RGBColor) -> OKLCHColor:
    """
    Convert RGB to OKLCH.

    Lightness and chroma are rounded to 3 decimals, hue to 1 decimal.
    """
    L, a, b = rgb_to_oklab(rgb)

    C = math.sqrt(a * a + b * b)
    H = math.degrees(math.atan2(b, a))
    if H < 0:
        H += 360

    hue = round_half_up(H, 1)
    if hue >= 360:
        hue -= 360

    return OKLCHColor(
        l=round_half_up(float(L), 3),
        c=round_half_up(C, 3),
        h=hue,
    )


# =============================================================================
# ExtractedColor construction
# =============================================================================

def make_extracted_color(rgb: RGBColor, percentage: float = 0.0) -> ExtractedColor:
    """Build an ExtractedColor with all representations derived from rgb."""
    return ExtractedColor(
        rgb=rgb,
        hsl=rgb_to_hsl(rgb),
        oklch=rgb_to_oklch(rgb),
        hex=rgb_to_hex(rgb),
        percentage=percentage,
    )


def extracted_from_hsl(hsl: HSLColor, percentage: float = 0.0) -> ExtractedColor:
    """Build an ExtractedColor from an HSL value, keeping the HSL as given."""
    rgb = hsl_to_rgb(hsl)
    return ExtractedColor(
        rgb=rgb,
        hsl=hsl,
        oklch=rgb_to_oklch(rgb),
        hex=rgb_to_hex(rgb),
        percentage=percentage,
    )
