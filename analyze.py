#!/usr/bin/env python3
"""
Palette analysis pipeline.

Extracts a palette from an image and produces a prose report.
Four stages: Sampling → Clustering → Synthesis → Render
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from color_convert import ExtractedColor, circular_hue_distance, hex_to_rgb, hsl_fractions, round_half_up
from contrast import AccessibleColorPair, check_accessibility, format_contrast_ratio
from extract_colors import extract_colors_from_pixels, quick_extract_colors
from popular_palettes import POPULAR_PALETTES, PopularPalette
from sample_pixels import PixelBuffer, sample_pixels
from semantic_colors import SemanticColors, identify_semantic_colors


# =============================================================================
# Constants
# =============================================================================

NEUTRAL_SATURATION = 10  # Below this (percent) a color has no temperature
WARM_HUE_END = 90  # Hues in [0, 90) and [300, 360) are warm
WARM_HUE_START = 300

# Harmony score checks (25 points each)
COMPLEMENTARY_RANGE = (150, 210)
NEAR_HUE = 30  # Within this many degrees (either way round) also counts as complementary
ANALOGOUS_DISTANCE = (10, 60)
GOOD_LIGHTNESS_RANGE = (30, 80)
GOOD_SATURATION_RANGE = (30, 80)
PARTIAL_MINIMUM = 20  # Below the good range but above this earns 15 points

SWATCH_SIZE = 80


@dataclass
class ColorDistribution:
    dominant: str  # 'warm', 'cool', 'neutral'
    warm_percentage: int
    cool_percentage: int
    neutral_percentage: int
    average_saturation: int
    average_lightness: int


@dataclass
class PaletteAnalysis:
    """Output of one pipeline run."""
    source: str
    sample_size: tuple  # (width, height) of the sampled raster
    colors: list  # ExtractedColor, most prominent first
    semantic: SemanticColors
    distribution: Optional[ColorDistribution]
    harmony_score: int
    contrast_pairs: list = field(default_factory=list)  # AccessibleColorPair
    emotions: list = field(default_factory=list)  # most frequent mood words
    industries: list = field(default_factory=list)  # IndustrySuggestion
    similar: list = field(default_factory=list)  # PaletteMatch


# =============================================================================
# Descriptions
# =============================================================================

def color_name(color: ExtractedColor) -> str:
    """Generate a descriptive name from HSL."""
    hue, saturation, lightness = color.hsl.h, color.hsl.s, color.hsl.l

    if saturation < 10:
        if lightness > 90:
            return "White"
        elif lightness > 70:
            return "Light Gray"
        elif lightness > 50:
            return "Gray"
        elif lightness > 30:
            return "Dark Gray"
        elif lightness > 10:
            return "Charcoal"
        return "Black"

    if lightness > 80:
        lightness_mod = "Light "
    elif lightness < 30:
        lightness_mod = "Dark "
    else:
        lightness_mod = ""

    if saturation < 30:
        saturation_mod = "Muted "
    elif saturation > 80:
        saturation_mod = "Vivid "
    else:
        saturation_mod = ""

    if hue < 15 or hue >= 345:
        hue_name = "Red"
    elif hue < 45:
        hue_name = "Orange"
    elif hue < 75:
        hue_name = "Yellow"
    elif hue < 105:
        hue_name = "Lime"
    elif hue < 135:
        hue_name = "Green"
    elif hue < 165:
        hue_name = "Teal"
    elif hue < 195:
        hue_name = "Cyan"
    elif hue < 225:
        hue_name = "Blue"
    elif hue < 255:
        hue_name = "Indigo"
    elif hue < 285:
        hue_name = "Purple"
    elif hue < 315:
        hue_name = "Magenta"
    else:
        hue_name = "Pink"

    return f"{lightness_mod}{saturation_mod}{hue_name}"


def analyze_distribution(colors: list[ExtractedColor]) -> Optional[ColorDistribution]:
    """Share of warm, cool and neutral colors (by count, not coverage)."""
    if not colors:
        return None

    warm = cool = neutral = 0
    for color in colors:
        if color.hsl.s < NEUTRAL_SATURATION:
            neutral += 1
        elif color.hsl.h < WARM_HUE_END or color.hsl.h >= WARM_HUE_START:
            warm += 1
        else:
            cool += 1

    total = len(colors)
    warm_pct = warm / total * 100
    cool_pct = cool / total * 100
    neutral_pct = neutral / total * 100

    if warm_pct > cool_pct and warm_pct > neutral_pct:
        dominant = 'warm'
    elif cool_pct > neutral_pct:
        dominant = 'cool'
    else:
        dominant = 'neutral'

    return ColorDistribution(
        dominant=dominant,
        warm_percentage=int(round_half_up(warm_pct)),
        cool_percentage=int(round_half_up(cool_pct)),
        neutral_percentage=int(round_half_up(neutral_pct)),
        average_saturation=int(round_half_up(sum(c.hsl.s for c in colors) / total)),
        average_lightness=int(round_half_up(sum(c.hsl.l for c in colors) / total)),
    )


def _range_points(value: float, good: tuple) -> int:
    if good[0] < value < good[1]:
        return 25
    if value >= PARTIAL_MINIMUM:
        return 15
    return 0


def _is_complementary(difference: float) -> bool:
    low, high = COMPLEMENTARY_RANGE
    return low < difference < high or difference > 360 - NEAR_HUE or difference < NEAR_HUE


def harmony_score(colors: list[ExtractedColor]) -> int:
    """
    Score palette harmony from 0 to 100.

    Four checks worth 25 points each: a complementary pair, an analogous
    pair, a moderate lightness spread, and moderate average saturation.
    Hue differences are raw (|h1 - h2|, not wrapped). The complementary check
    also passes for hues within 30 degrees of each other, directly or across 0.
    """
    if len(colors) < 2:
        return 0

    differences = [
        abs(a.hsl.h - b.hsl.h)
        for i, a in enumerate(colors)
        for b in colors[i + 1:]
    ]

    score = 0
    if any(_is_complementary(d) for d in differences):
        score += 25
    if any(ANALOGOUS_DISTANCE[0] < d < ANALOGOUS_DISTANCE[1] for d in differences):
        score += 25

    lightnesses = [c.hsl.l for c in colors]
    score += _range_points(max(lightnesses) - min(lightnesses), GOOD_LIGHTNESS_RANGE)

    average_saturation = sum(c.hsl.s for c in colors) / len(colors)
    score += _range_points(average_saturation, GOOD_SATURATION_RANGE)

    return score


def role_contrast_pairs(semantic: SemanticColors) -> list[AccessibleColorPair]:
    """Contrast of primary and accent against the background role."""
    background = semantic.background
    if background is None:
        return []

    foregrounds = [semantic.primary]
    if semantic.accent is not semantic.primary:
        foregrounds.append(semantic.accent)

    pairs = []
    for color in foregrounds:
        if color is None or color is background:
            continue
        pairs.append(check_accessibility(color.hex, background.hex))
    return pairs


# =============================================================================
# Insights
# =============================================================================

# (hue upper bound, primary moods, secondary moods); red also covers [345, 360)
HUE_EMOTIONS = (
    (15, ('Passionate', 'Energetic', 'Bold'), ('Exciting', 'Intense', 'Powerful')),
    (45, ('Enthusiastic', 'Warm', 'Creative'), ('Friendly', 'Confident', 'Adventurous')),
    (75, ('Happy', 'Optimistic', 'Cheerful'), ('Playful', 'Energetic', 'Innovative')),
    (165, ('Natural', 'Fresh', 'Calm'), ('Balanced', 'Growth', 'Harmonious')),
    (195, ('Refreshing', 'Clean', 'Tranquil'), ('Clear', 'Open', 'Professional')),
    (255, ('Trustworthy', 'Calm', 'Professional'), ('Stable', 'Serene', 'Reliable')),
    (285, ('Creative', 'Luxurious', 'Wise'), ('Imaginative', 'Spiritual', 'Mysterious')),
    (345, ('Romantic', 'Playful', 'Compassionate'), ('Youthful', 'Loving', 'Gentle')),
)
TOP_EMOTIONS = 5
MAX_INDUSTRIES = 4
SIMILAR_PALETTE_LIMIT = 5


@dataclass
class ColorEmotion:
    primary: list
    secondary: list


@dataclass
class IndustrySuggestion:
    industry: str
    confidence: str  # 'high', 'medium', 'low'
    reason: str


@dataclass
class PaletteMatch:
    palette: PopularPalette
    similarity: int  # 0-100


def color_emotions(color: ExtractedColor) -> ColorEmotion:
    """Mood words for a color, chosen by hue and adjusted for saturation and lightness."""
    hue, saturation, lightness = color.hsl.h, color.hsl.s, color.hsl.l

    primary, secondary = HUE_EMOTIONS[0][1:]
    if hue < 345:
        for upper, primary, secondary in HUE_EMOTIONS:
            if hue < upper:
                break

    secondary = list(secondary)
    if saturation < 20:
        secondary = ['Neutral', 'Subtle', 'Sophisticated']
    if lightness > 80:
        secondary += ['Soft', 'Delicate', 'Airy']
    elif lightness < 20:
        secondary += ['Bold', 'Dramatic', 'Intense']

    return ColorEmotion(primary=list(primary), secondary=secondary)


def palette_emotions(colors: list[ExtractedColor]) -> tuple[list[str], dict]:
    """
    Most frequent mood words across a palette.

    Returns:
        (top five words, ties in first-seen order; {hex: ColorEmotion})
    """
    detailed = {}
    counts = Counter()
    for color in colors:
        emotion = color_emotions(color)
        detailed[color.hex] = emotion
        counts.update(emotion.primary + emotion.secondary)

    return [word for word, _ in counts.most_common(TOP_EMOTIONS)], detailed


def suggest_industries(colors: list[ExtractedColor]) -> list[IndustrySuggestion]:
    """Industries a palette suits, from hue families, saturation and contrast."""
    if not colors:
        return []

    total = len(colors)
    hues = [c.hsl.h for c in colors]
    lightnesses = [c.hsl.l for c in colors]
    average_saturation = sum(c.hsl.s for c in colors) / total
    average_lightness = sum(lightnesses) / total

    def share(low, high):
        return sum(1 for h in hues if low <= h < high) / total

    suggestions = []
    if share(195, 255) >= 0.4:
        suggestions.append(IndustrySuggestion(
            'Technology / Finance', 'high',
            'Blue tones suggest trustworthiness and professionalism'))
    if share(75, 165) >= 0.4:
        suggestions.append(IndustrySuggestion(
            'Health / Environment / Organic', 'high',
            'Green tones suggest natural and healthy associations'))
    if share(0, 75) >= 0.5 and average_saturation > 50:
        suggestions.append(IndustrySuggestion(
            'Food / Entertainment / Lifestyle', 'high',
            'Warm, saturated colors create appetizing and energetic feel'))
    if average_saturation < 30:
        suggestions.append(IndustrySuggestion(
            'Luxury / Professional Services / Law', 'medium',
            'Muted tones suggest sophistication and elegance'))
    if share(255, 300) >= 0.3:
        suggestions.append(IndustrySuggestion(
            'Beauty / Creative / Arts', 'medium',
            'Purple tones suggest creativity and luxury'))
    if max(lightnesses) - min(lightnesses) > 60:
        suggestions.append(IndustrySuggestion(
            'Fashion / Design / Media', 'medium',
            'High contrast palette suggests bold visual identity'))
    if average_lightness > 70 and 20 < average_saturation < 50:
        suggestions.append(IndustrySuggestion(
            'Children / Education / Healthcare', 'medium',
            'Soft pastel tones create friendly, approachable feel'))

    if not suggestions:
        suggestions.append(IndustrySuggestion(
            'General Purpose / Versatile', 'low',
            'Balanced palette suitable for various applications'))

    return suggestions[:MAX_INDUSTRIES]


def color_similarity(rgb1, rgb2) -> float:
    """0-100; hue difference weighs half, saturation and lightness a quarter each."""
    h1, s1, l1 = hsl_fractions(rgb1)
    h2, s2, l2 = hsl_fractions(rgb2)

    hue_score = (1 - circular_hue_distance(h1 * 360, h2 * 360) / 180) * 0.5
    saturation_score = (1 - abs(s1 - s2)) * 0.25
    lightness_score = (1 - abs(l1 - l2)) * 0.25

    return (hue_score + saturation_score + lightness_score) * 100


def similar_palettes(colors: list[ExtractedColor],
                     limit: int = SIMILAR_PALETTE_LIMIT) -> list[PaletteMatch]:
    """Reference palettes ranked by average all-pairs color similarity."""
    if not colors:
        return []

    matches = []
    for palette in POPULAR_PALETTES:
        scores = [
            color_similarity(color.rgb, hex_to_rgb(reference))
            for color in colors
            for reference in palette.colors
        ]
        matches.append(PaletteMatch(palette, int(round_half_up(sum(scores) / len(scores)))))

    matches.sort(key=lambda m: -m.similarity)
    return matches[:limit]


# =============================================================================
# Pipeline
# =============================================================================

def synthesize(source: str, buffer: PixelBuffer, colors: list[ExtractedColor]) -> PaletteAnalysis:
    """Stage 3: roles, distribution, harmony, contrast and insights."""
    semantic = identify_semantic_colors(colors)

    return PaletteAnalysis(
        source=source,
        sample_size=(buffer.width, buffer.height),
        colors=colors,
        semantic=semantic,
        distribution=analyze_distribution(colors),
        harmony_score=harmony_score(colors),
        contrast_pairs=role_contrast_pairs(semantic),
        emotions=palette_emotions(colors)[0],
        industries=suggest_industries(colors),
        similar=similar_palettes(colors),
    )


def run_pipeline(source) -> PaletteAnalysis:
    """Run analysis stages 1-3.

    Raises:
        ImageLoadError: If the image cannot be loaded
    """
    # Stage 1: Sampling
    buffer = sample_pixels(source)

    # Stage 2: Clustering
    colors = extract_colors_from_pixels(buffer)

    # Stage 3: Synthesis
    label = str(source) if isinstance(source, (str, Path)) else type(source).__name__
    return synthesize(label, buffer, colors)


# =============================================================================
# Stage 4: Render
# =============================================================================

def _roles_of(color: ExtractedColor, semantic: SemanticColors) -> list[str]:
    return [role for role, assigned in semantic.as_dict().items() if assigned is color]


def render(analysis: PaletteAnalysis) -> str:
    """Stage 4: Render analysis as prose."""
    lines = []

    width, height = analysis.sample_size
    lines.append(f"PALETTE: {len(analysis.colors)} colors (sampled at {width}x{height})")

    if not analysis.colors:
        lines.append("No colors detected (image is transparent or only near-black/near-white)")
        return "\n".join(lines)

    dist = analysis.distribution
    lines.append(f"Temperature: {dist.dominant} | warm {dist.warm_percentage}% | "
                 f"cool {dist.cool_percentage}% | neutral {dist.neutral_percentage}%")
    lines.append(f"Average saturation: {dist.average_saturation}% | "
                 f"Average lightness: {dist.average_lightness}%")
    lines.append(f"Harmony score: {analysis.harmony_score}/100")
    if analysis.emotions:
        lines.append(f"Mood: {', '.join(analysis.emotions)}")
    lines.append("")

    lines.append("COLORS:")
    lines.append("")

    for color in analysis.colors:
        roles = _roles_of(color, analysis.semantic)
        label = ", ".join(r.capitalize() for r in roles) if roles else "Color"
        hsl, oklch = color.hsl, color.oklch

        lines.append(f"[{label}] {color_name(color)}")
        lines.append(f"  Hex: {color.hex} | RGB: {color.rgb.as_tuple()} | "
                     f"HSL: ({hsl.h:.0f}°, {hsl.s:.0f}%, {hsl.l:.0f}%)")
        lines.append(f"  OKLCH: ({oklch.l:.3f}, {oklch.c:.3f}, {oklch.h:.1f}) | "
                     f"Coverage: {color.percentage:.1f}%")
        lines.append("")

    if analysis.contrast_pairs:
        lines.append("CONTRAST (against background):")
        lines.append("")
        for pair in analysis.contrast_pairs:
            c = pair.compliance
            lines.append(f"  - {pair.foreground} on {pair.background}: "
                         f"{format_contrast_ratio(pair.contrast_ratio)} | normal text {c.normal_text} | "
                         f"large text {c.large_text} | UI {c.ui_components}")
        lines.append("")

    if analysis.industries:
        lines.append("SUGGESTED USES:")
        lines.append("")
        for suggestion in analysis.industries:
            lines.append(f"  - {suggestion.industry} ({suggestion.confidence}): {suggestion.reason}")
        lines.append("")

    if analysis.similar:
        lines.append("SIMILAR PALETTES:")
        lines.append("")
        for match in analysis.similar:
            lines.append(f"  - {match.palette.name} ({match.palette.category}): {match.similarity}% similar")

    return "\n".join(lines).rstrip()


def render_swatches(colors: list[ExtractedColor], output_path: str) -> None:
    """
    Save a swatch strip visualizing the palette with percentages.

    Args:
        colors: Palette to draw
        output_path: Path to save the PNG
    """
    from PIL import Image, ImageDraw

    padding = 10
    text_height = 25
    count = max(len(colors), 1)

    img_width = count * (SWATCH_SIZE + padding) + padding
    img_height = SWATCH_SIZE + text_height + 2 * padding

    img = Image.new('RGB', (img_width, img_height), (240, 240, 240))
    draw = ImageDraw.Draw(img)

    for i, color in enumerate(colors):
        x = padding + i * (SWATCH_SIZE + padding)
        y = padding

        draw.rectangle([x, y, x + SWATCH_SIZE, y + SWATCH_SIZE], fill=color.rgb.as_tuple())

        # Center text under swatch
        text = f"{color.percentage:.1f}%"
        bbox = draw.textbbox((0, 0), text)
        text_width = bbox[2] - bbox[0]
        text_x = x + (SWATCH_SIZE - text_width) // 2
        draw.text((text_x, y + SWATCH_SIZE + 4), text, fill=(0, 0, 0))

    img.save(output_path)


# =============================================================================
# CLI
# =============================================================================

def main(argv=None):
    import argparse
    import sys

    from sample_pixels import ImageLoadError

    parser = argparse.ArgumentParser(
        description='Analyze an image and extract its color palette.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path, URL or data URL of the image'
    )
    parser.add_argument(
        '--swatch', '-s',
        nargs='?',
        const=True,
        default=None,
        help='Write a PNG swatch strip. Optionally specify path, otherwise auto-names from input.'
    )
    parser.add_argument(
        '--quick',
        action='store_true',
        help='Only print the quick low-resolution preview colors'
    )

    args = parser.parse_args(argv)

    try:
        if args.quick:
            print("\n".join(quick_extract_colors(args.input)))
            return 0
        analysis = run_pipeline(args.input)
    except ImageLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(analysis))

    if args.swatch:
        if args.swatch is True:
            remote = args.input.startswith(("data:", "http://", "https://"))
            stem = "image" if remote else Path(args.input).stem
            output_path = Path(f"{stem}-palette.png")
        else:
            output_path = Path(args.swatch)

        try:
            render_swatches(analysis.colors, str(output_path))
            print(f"\nWrote: {output_path}")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
