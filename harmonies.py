#!/usr/bin/env python3
"""
Derived palettes: color harmonies, tints and shades, mixing, and
hue/lightness adjustments. Every function returns new colors and leaves its
input untouched.
"""

from dataclasses import dataclass

from color_convert import (
    ExtractedColor,
    HSLColor,
    RGBColor,
    extracted_from_hsl,
    hex_to_rgb,
    hsl_fractions,
    hsl_to_rgb,
    make_extracted_color,
    rgb_to_hex,
    round_half_up,
)


# =============================================================================
# Constants
# =============================================================================

# Hue offsets relative to the base color (0 = the base color itself)
HARMONY_OFFSETS = {
    'complementary': (0, 180),
    'analogous': (-30, 0, 30),
    'triadic': (0, 120, 240),
    'tetradic': (0, 90, 180, 270),
    'split-complementary': (0, 150, 210),
}

MONOCHROMATIC_STEPS = 5
MONOCHROMATIC_SPACING = 15  # lightness percent between steps
MONOCHROMATIC_RANGE = (20, 90)

PALETTE_TYPES = tuple(HARMONY_OFFSETS) + ('monochromatic',)

TEMPERATURE_MAX_SHIFT = 30  # degrees of hue at amount = +/-100


@dataclass
class GeneratedPalette:
    type: str
    colors: list  # ExtractedColor
    base_color: ExtractedColor


# =============================================================================
# Harmonies
# =============================================================================

def generate_palette(base: ExtractedColor, palette_type: str) -> GeneratedPalette:
    """
    Build a harmony palette around a base color.

    The base color object is reused where the harmony includes it; generated
    colors have a percentage of 0.

    Raises:
        ValueError: If palette_type is unknown
    """
    h, s, l = base.hsl.h, base.hsl.s, base.hsl.l

    if palette_type == 'monochromatic':
        low, high = MONOCHROMATIC_RANGE
        colors = []
        for i in range(MONOCHROMATIC_STEPS):
            lightness = max(low, min(high, l + (i - MONOCHROMATIC_STEPS // 2) * MONOCHROMATIC_SPACING))
            colors.append(extracted_from_hsl(HSLColor(h, s, lightness)))
    elif palette_type in HARMONY_OFFSETS:
        colors = [
            base if offset == 0 else extracted_from_hsl(HSLColor((h + offset) % 360, s, l))
            for offset in HARMONY_OFFSETS[palette_type]
        ]
    else:
        raise ValueError(
            f"Unknown palette type: {palette_type!r} (expected one of {', '.join(PALETTE_TYPES)})"
        )

    return GeneratedPalette(type=palette_type, colors=colors, base_color=base)


# =============================================================================
# Mixing, tints and shades
# =============================================================================

def mix_rgb(rgb1: RGBColor, rgb2: RGBColor, ratio: float = 0.5) -> RGBColor:
    """Linear blend in sRGB; ratio 0 gives rgb1, 1 gives rgb2."""
    return RGBColor(*(
        int(round_half_up(a + (b - a) * ratio))
        for a, b in zip(rgb1.as_tuple(), rgb2.as_tuple())
    ))


def mix_colors(color1: str, color2: str, ratio: float = 0.5) -> str:
    return rgb_to_hex(mix_rgb(hex_to_rgb(color1), hex_to_rgb(color2), ratio))


def generate_color_scale(color1: str, color2: str, steps: int = 7) -> list[str]:
    """Evenly spaced mixes from color1 to color2, both ends included."""
    if steps < 2:
        raise ValueError(f"A color scale needs at least 2 steps, got {steps}")
    return [mix_colors(color1, color2, i / (steps - 1)) for i in range(steps)]


def generate_tints(color: str, count: int = 5) -> list[str]:
    """Progressively lighter mixes toward white (base and white excluded)."""
    return [mix_colors(color, '#FFFFFF', i / (count + 1)) for i in range(1, count + 1)]


def generate_shades(color: str, count: int = 5) -> list[str]:
    """Progressively darker mixes toward black (base and black excluded)."""
    return [mix_colors(color, '#000000', i / (count + 1)) for i in range(1, count + 1)]


def generate_tint_shade_scale(color: str, tint_count: int = 5, shade_count: int = 5) -> dict:
    """Tints (lightest first), the base, and shades (darkest last)."""
    return {
        'tints': list(reversed(generate_tints(color, tint_count))),
        'base': color,
        'shades': generate_shades(color, shade_count),
    }


# =============================================================================
# Adjustments
# =============================================================================

def shift_hue(colors: list[ExtractedColor], degrees: float) -> list[ExtractedColor]:
    """Rotate every color's hue, keeping saturation, lightness and share."""
    return [
        extracted_from_hsl(
            HSLColor((c.hsl.h + degrees) % 360, c.hsl.s, c.hsl.l),
            c.percentage,
        )
        for c in colors
    ]


def adjust_lightness(colors: list[ExtractedColor], delta: float) -> list[ExtractedColor]:
    """Add delta percentage points of lightness to every color (clamped)."""
    return [
        extracted_from_hsl(
            HSLColor(c.hsl.h, c.hsl.s, max(0, min(100, c.hsl.l + delta))),
            c.percentage,
        )
        for c in colors
    ]


def is_color_light(rgb: RGBColor) -> bool:
    """Perceived brightness above one half."""
    return (0.299 * rgb.r + 0.587 * rgb.g + 0.114 * rgb.b) / 255 > 0.5


# =============================================================================
# Single-color adjustments (hex in, hex out)
# =============================================================================

def _clamp_fraction(value: float) -> float:
    return max(0.0, min(1.0, value))


def _hex_from_fractions(h: float, s: float, l: float) -> str:
    return rgb_to_hex(hsl_to_rgb(HSLColor(h * 360, s * 100, l * 100)))


def adjust_temperature(color: str, amount: float) -> str:
    """Rotate the hue by up to 30 degrees; amount in [-100, 100], positive is warmer."""
    h, s, l = hsl_fractions(hex_to_rgb(color))
    hue = (h * 360 + amount / 100 * TEMPERATURE_MAX_SHIFT) % 360
    return _hex_from_fractions(hue / 360, s, l)


def adjust_saturation(color: str, amount: float) -> str:
    """Add amount percentage points of saturation (negative desaturates)."""
    h, s, l = hsl_fractions(hex_to_rgb(color))
    return _hex_from_fractions(h, _clamp_fraction(s + amount / 100), l)


def adjust_brightness(color: str, amount: float) -> str:
    """Add amount percentage points of lightness (negative darkens)."""
    h, s, l = hsl_fractions(hex_to_rgb(color))
    return _hex_from_fractions(h, s, _clamp_fraction(l + amount / 100))


def to_grayscale(color: str) -> str:
    return adjust_saturation(color, -100)


def invert_color(color: str) -> str:
    rgb = hex_to_rgb(color)
    return rgb_to_hex(RGBColor(255 - rgb.r, 255 - rgb.g, 255 - rgb.b))


def blend_colors(colors: list[str]) -> str:
    """
    Fold colors together pairwise at 50%, in order.

    Later colors weigh more: with three colors the last contributes half.
    Intermediate results are not rounded.
    """
    if not colors:
        return '#000000'
    if len(colors) == 1:
        return colors[0]

    blended = [float(c) for c in hex_to_rgb(colors[0]).as_tuple()]
    for color in colors[1:]:
        blended = [a + (b - a) * 0.5 for a, b in zip(blended, hex_to_rgb(color).as_tuple())]

    return rgb_to_hex(RGBColor(*(int(round_half_up(c)) for c in blended)))


def generate_custom_scale(start: str, middle: str, end: str, steps: int = 9) -> list[str]:
    """Scale from start to end passing through middle at the center step."""
    half = steps // 2
    first = generate_color_scale(start, middle, half + 1)
    second = generate_color_scale(middle, end, half + 1)[1:]
    return first + second


def color_harmonies(color: str) -> dict:
    """Hex lists of every harmony palette type around one hex color."""
    base = make_extracted_color(hex_to_rgb(color))
    return {
        palette_type: [c.hex for c in generate_palette(base, palette_type).colors]
        for palette_type in PALETTE_TYPES
    }
