#!/usr/bin/env python3
"""Pick primary, accent and background roles from an extracted palette."""

from dataclasses import dataclass
from typing import Optional

from color_convert import ExtractedColor, circular_hue_distance


# =============================================================================
# Constants
# =============================================================================

VIBRANT_MIN_SATURATION = 30  # strictly greater
VIBRANT_MIN_LIGHTNESS = 25  # exclusive
VIBRANT_MAX_LIGHTNESS = 75  # exclusive
ACCENT_MIN_HUE_DISTANCE = 30  # degrees, strictly greater
BACKGROUND_MIN_LIGHTNESS = 80  # strictly greater
NEUTRAL_MAX_SATURATION = 30


@dataclass
class SemanticColors:
    """Role assignment. Each role references an entry of the input list."""
    primary: Optional[ExtractedColor] = None
    accent: Optional[ExtractedColor] = None
    background: Optional[ExtractedColor] = None

    def as_dict(self) -> dict:
        return {
            'primary': self.primary,
            'accent': self.accent,
            'background': self.background,
        }


def is_vibrant(color: ExtractedColor) -> bool:
    hsl = color.hsl
    return (hsl.s > VIBRANT_MIN_SATURATION
            and VIBRANT_MIN_LIGHTNESS < hsl.l < VIBRANT_MAX_LIGHTNESS)


def _prominence(color: ExtractedColor) -> float:
    return color.hsl.s * color.percentage


def identify_semantic_colors(colors: list[ExtractedColor]) -> SemanticColors:
    """
    Assign semantic roles by saturation, lightness and hue heuristics.

    Ties always go to the color that comes first in the input order.

    Returns:
        SemanticColors whose fields are the same objects found in colors
    """
    if not colors:
        return SemanticColors()

    # Stable sort keeps input order among equal scores
    vibrant = sorted((c for c in colors if is_vibrant(c)), key=lambda c: -_prominence(c))
    neutral = [c for c in colors if c.hsl.s <= NEUTRAL_MAX_SATURATION]

    primary = vibrant[0] if vibrant else colors[0]

    hue_distinct = [
        c for c in vibrant
        if circular_hue_distance(c.hsl.h, primary.hsl.h) > ACCENT_MIN_HUE_DISTANCE
    ]
    if hue_distinct:
        accent = max(hue_distinct, key=lambda c: c.hsl.s)
    elif len(vibrant) > 1:
        accent = vibrant[1]
    elif vibrant:
        # The only vibrant color doubles as primary and accent
        accent = vibrant[0]
    elif len(colors) > 1:
        accent = colors[1]
    else:
        accent = None

    light = [c for c in colors if c.hsl.l > BACKGROUND_MIN_LIGHTNESS]
    if light:
        background = max(light, key=lambda c: c.hsl.l)
    elif neutral:
        background = max(neutral, key=lambda c: c.hsl.l)
    else:
        background = colors[-1]

    return SemanticColors(primary=primary, accent=accent, background=background)
