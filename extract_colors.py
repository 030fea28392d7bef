#!/usr/bin/env python3
"""
Extract a small palette of visually distinct colors from an image.

Pixels are bucketed into coarse RGB cells, each cell is averaged into a
cluster, clusters are ranked by a visual-weight heuristic that favors
saturated mid-lightness colors, and a greedy pass keeps only colors that are
not similar to an already kept one.
"""

import math
from dataclasses import dataclass

import numpy as np

from color_convert import (
    ExtractedColor,
    HSLColor,
    RGBColor,
    circular_hue_distance,
    make_extracted_color,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from sample_pixels import FULL_SAMPLE_SIZE, QUICK_SAMPLE_SIZE, PixelBuffer, sample_pixels


# =============================================================================
# Constants
# =============================================================================

# Full extraction
FULL_PIXEL_STRIDE = 3  # Sample every 3rd pixel (12 bytes of RGBA)
FULL_BUCKET_SIZE = 15  # Channel width of one bucket
MIN_ALPHA = 128  # Pixels below this alpha are treated as transparent

# Near-black / near-white clusters are noise (HSL lightness percent)
MIN_LIGHTNESS = 10
MAX_LIGHTNESS = 95

# Selection
MAX_DISTINCT_COLORS = 10
MAX_NEUTRAL_COLORS = 2
MAX_PALETTE_COLORS = 8
GRAYSCALE_SATURATION = 15  # Below this a color counts as neutral

# Similarity thresholds (degrees / percentage points)
SIMILAR_GRAY_SATURATION = 20
SIMILAR_GRAY_LIGHTNESS = 15
SIMILAR_HUE = 30
SIMILAR_SATURATION = 20
SIMILAR_LIGHTNESS = 20

# Quick extraction
QUICK_PIXEL_STRIDE = 1
QUICK_BUCKET_SIZE = 32
QUICK_MAX_COLORS = 5
QUICK_FALLBACK_COLORS = ['#646464', '#969696']


@dataclass
class ColorCluster:
    """Averaged color of one bucket."""
    rgb: RGBColor
    hsl: HSLColor
    pixel_count: int
    visual_weight: float


# =============================================================================
# Scoring and similarity
# =============================================================================

def visual_weight(pixel_count: int, hsl: HSLColor) -> float:
    """
    Score how prominent a cluster should be in the palette.

    Frequency is damped by a square root so that a smaller saturated,
    mid-lightness region can outrank a large dull one.
    """
    saturation = hsl.s / 100
    lightness = hsl.l / 100

    saturation_boost = saturation ** 1.5 * 2
    lightness_balance = 1 - abs(lightness - 0.5) * 1.5
    frequency_weight = math.sqrt(pixel_count)

    return frequency_weight * (1 + saturation_boost) * (0.5 + lightness_balance)


def is_near_grayscale(hsl: HSLColor) -> bool:
    return hsl.s < GRAYSCALE_SATURATION


def colors_are_similar(hsl1: HSLColor, hsl2: HSLColor) -> bool:
    """Two grays compare by lightness only; other pairs need hue, saturation
    and lightness all close."""
    hue_diff = circular_hue_distance(hsl1.h, hsl2.h)
    sat_diff = abs(hsl1.s - hsl2.s)
    light_diff = abs(hsl1.l - hsl2.l)

    if hsl1.s < SIMILAR_GRAY_SATURATION and hsl2.s < SIMILAR_GRAY_SATURATION:
        return light_diff < SIMILAR_GRAY_LIGHTNESS

    return hue_diff < SIMILAR_HUE and sat_diff < SIMILAR_SATURATION and light_diff < SIMILAR_LIGHTNESS


# =============================================================================
# Bucketing
# =============================================================================

def _opaque_rgb(pixels: np.ndarray, stride: int) -> np.ndarray:
    """Sub-sample a flat RGBA buffer and return the opaque pixels as int RGB."""
    rgba = np.asarray(pixels, dtype=np.uint8).reshape(-1, 4)[::stride]
    rgba = rgba[rgba[:, 3] >= MIN_ALPHA]
    return rgba[:, :3].astype(np.int64)


def _bucketize(rgb: np.ndarray, bucket_size: int) -> tuple:
    """
    Group pixels by bucket, in order of first appearance.

    Returns:
        (keys, counts, sums) where sums holds per-bucket channel totals
    """
    keys = rgb // bucket_size
    unique_keys, first_index, inverse, counts = np.unique(
        keys, axis=0, return_index=True, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    sums = np.zeros((len(unique_keys), 3), dtype=np.int64)
    np.add.at(sums, inverse, rgb)

    order = np.argsort(first_index, kind='stable')
    return unique_keys[order], counts[order], sums[order]


def build_clusters(pixels: np.ndarray, stride: int = FULL_PIXEL_STRIDE,
                   bucket_size: int = FULL_BUCKET_SIZE) -> list[ColorCluster]:
    """
    Bucket a flat RGBA buffer into averaged, weighted clusters.

    Args:
        pixels: Flat uint8 RGBA buffer (row-major)
        stride: Take every stride-th pixel
        bucket_size: Channel width of a bucket

    Returns:
        Clusters in first-seen bucket order, near-black and near-white removed
    """
    rgb = _opaque_rgb(pixels, stride)
    if len(rgb) == 0:
        return []

    _, counts, sums = _bucketize(rgb, bucket_size)

    clusters = []
    for count, total in zip(counts.tolist(), sums.tolist()):
        # floor(total / count + 0.5) in integer arithmetic
        avg = RGBColor(*((2 * t + count) // (2 * count) for t in total))
        hsl = rgb_to_hsl(avg)

        if hsl.l < MIN_LIGHTNESS or hsl.l > MAX_LIGHTNESS:
            continue

        clusters.append(ColorCluster(
            rgb=avg,
            hsl=hsl,
            pixel_count=count,
            visual_weight=visual_weight(count, hsl),
        ))

    return clusters


# =============================================================================
# Selection
# =============================================================================

def select_distinct(clusters: list[ColorCluster],
                    max_colors: int = MAX_DISTINCT_COLORS) -> list[ColorCluster]:
    """Walk clusters by descending weight, keeping those unlike any kept one."""
    ranked = sorted(clusters, key=lambda c: -c.visual_weight)

    distinct = []
    for cluster in ranked:
        if len(distinct) >= max_colors:
            break
        if not any(colors_are_similar(cluster.hsl, kept.hsl) for kept in distinct):
            distinct.append(cluster)

    return distinct


def select_palette(distinct: list[ColorCluster]) -> list[ColorCluster]:
    """Keep every vibrant color and a couple of neutrals, vibrant first."""
    vibrant = [c for c in distinct if not is_near_grayscale(c.hsl)]
    neutral = [c for c in distinct if is_near_grayscale(c.hsl)][:MAX_NEUTRAL_COLORS]

    return (vibrant + neutral)[:MAX_PALETTE_COLORS]


def assign_percentages(selected: list[ColorCluster]) -> list[ExtractedColor]:
    """Convert clusters to ExtractedColors with shares of the selected pixels."""
    total = sum(c.pixel_count for c in selected)
    if total == 0:
        return []

    return [
        make_extracted_color(c.rgb, round_half_up(c.pixel_count / total * 100, 1))
        for c in selected
    ]


# =============================================================================
# Entry points
# =============================================================================

def extract_colors_from_pixels(buffer) -> list[ExtractedColor]:
    """
    Run clustering and selection over an already sampled buffer.

    Args:
        buffer: PixelBuffer or flat RGBA numpy array

    Returns:
        Up to 8 ExtractedColors, most prominent first. Empty when no opaque
        pixel survives filtering.
    """
    pixels = buffer.data if isinstance(buffer, PixelBuffer) else buffer

    clusters = build_clusters(pixels)
    distinct = select_distinct(clusters)
    selected = select_palette(distinct)

    return assign_percentages(selected)


def extract_colors(source, max_size: int = FULL_SAMPLE_SIZE) -> list[ExtractedColor]:
    """
    Extract the palette of an image.

    Args:
        source: Anything sample_pixels.load_image accepts

    Raises:
        ImageLoadError: If the image cannot be loaded
    """
    return extract_colors_from_pixels(sample_pixels(source, max_size))


def quick_buckets(pixels: np.ndarray, max_colors: int = QUICK_MAX_COLORS) -> list[str]:
    """Most frequent coarse buckets of a buffer as hex strings."""
    rgb = _opaque_rgb(pixels, QUICK_PIXEL_STRIDE)
    if len(rgb) == 0:
        return list(QUICK_FALLBACK_COLORS)

    keys, counts, _ = _bucketize(rgb, QUICK_BUCKET_SIZE)
    ranked = sorted(zip(keys.tolist(), counts.tolist()), key=lambda kc: -kc[1])

    return [
        rgb_to_hex(RGBColor(*(k * QUICK_BUCKET_SIZE for k in key)))
        for key, _ in ranked[:max_colors]
    ]


def quick_extract_colors(source) -> list[str]:
    """
    Cheap low-fidelity palette for previews.

    Samples a 50px thumbnail and returns up to five bucket colors as hex,
    ordered by pixel count. Falls back to two grays for transparent images.
    """
    buffer = sample_pixels(source, QUICK_SAMPLE_SIZE)
    return quick_buckets(buffer.data)
