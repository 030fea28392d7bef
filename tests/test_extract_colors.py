"""Tests for bucketing, weighting and distinct-color selection."""

import itertools

import numpy as np
import pytest

from color_convert import HSLColor, RGBColor, hsl_to_rgb
from extract_colors import (
    QUICK_FALLBACK_COLORS,
    ColorCluster,
    build_clusters,
    colors_are_similar,
    extract_colors,
    extract_colors_from_pixels,
    is_near_grayscale,
    quick_buckets,
    quick_extract_colors,
    select_distinct,
    select_palette,
    visual_weight,
)
from sample_pixels import ImageLoadError

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _buffer(pixels):
    return np.array(pixels, dtype=np.uint8).reshape(-1)


def _cluster(h, s, l, count=100):
    hsl = HSLColor(h, s, l)
    return ColorCluster(rgb=hsl_to_rgb(hsl), hsl=hsl, pixel_count=count,
                        visual_weight=visual_weight(count, hsl))


# =============================================================================
# Scenarios
# =============================================================================

def test_solid_red_image_yields_single_color(solid_image):
    colors = extract_colors(solid_image(RED))
    assert len(colors) == 1
    assert colors[0].hex == '#FF0000'
    assert colors[0].percentage == 100.0


def test_three_to_one_red_blue_split(banded_image):
    colors = extract_colors(banded_image([(RED, 75), (BLUE, 25)]))
    assert [c.hex for c in colors] == ['#FF0000', '#0000FF']
    assert [c.percentage for c in colors] == [75.0, 25.0]


def test_transparent_image_yields_empty_palette(solid_image):
    assert extract_colors(solid_image((255, 0, 0, 0))) == []


def test_only_near_black_and_white_yields_empty_palette(banded_image):
    img = banded_image([((0, 0, 0, 255), 50), ((255, 255, 255, 255), 50)])
    assert extract_colors(img) == []


def test_equal_weights_keep_first_seen_order(banded_image):
    colors = extract_colors(banded_image([(BLUE, 50), (RED, 50)]))
    assert [c.hex for c in colors] == ['#0000FF', '#FF0000']


def test_extract_colors_from_path(solid_image, png_file):
    path = png_file(solid_image(BLUE))
    assert [c.hex for c in extract_colors(path)] == ['#0000FF']


def test_extract_colors_missing_file_raises(tmp_path):
    with pytest.raises(ImageLoadError):
        extract_colors(tmp_path / 'nope.png')


# =============================================================================
# Invariants
# =============================================================================

@pytest.fixture
def noisy_buffer():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(120, 120, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    return pixels.reshape(-1)


def test_palette_is_capped_at_eight(noisy_buffer):
    assert 0 < len(extract_colors_from_pixels(noisy_buffer)) <= 8


def test_palette_colors_are_pairwise_distinct(noisy_buffer):
    colors = extract_colors_from_pixels(noisy_buffer)
    for a, b in itertools.combinations(colors, 2):
        assert not colors_are_similar(a.hsl, b.hsl)


def test_percentages_sum_to_one_hundred(noisy_buffer):
    colors = extract_colors_from_pixels(noisy_buffer)
    assert all(c.percentage >= 0 for c in colors)
    assert sum(c.percentage for c in colors) == pytest.approx(100, abs=0.1 * len(colors))


def test_many_distinct_hues_are_capped(banded_image):
    bands = []
    for hue in range(0, 360, 30):
        rgb = hsl_to_rgb(HSLColor(hue, 100, 50))
        bands.append(((rgb.r, rgb.g, rgb.b, 255), 10))
    img = banded_image(bands, width=100, height=120)

    clusters = build_clusters(np.asarray(img).reshape(-1))
    assert len(select_distinct(clusters)) == 10
    assert len(extract_colors(img)) == 8


# =============================================================================
# Building blocks
# =============================================================================

def test_visual_weight_formula():
    assert visual_weight(100, HSLColor(0, 100, 50)) == pytest.approx(10 * 3 * 1.5)
    assert visual_weight(100, HSLColor(0, 0, 100)) == pytest.approx(10 * 1 * 0.75)
    assert visual_weight(25, HSLColor(0, 0, 50)) == pytest.approx(5 * 1 * 1.5)


def test_visual_weight_favors_saturated_midtones():
    vivid = visual_weight(100, HSLColor(200, 90, 50))
    dull = visual_weight(400, HSLColor(200, 5, 85))
    assert vivid > dull


def test_grays_compare_by_lightness_only():
    assert colors_are_similar(HSLColor(0, 5, 50), HSLColor(200, 10, 60))
    assert not colors_are_similar(HSLColor(0, 5, 50), HSLColor(0, 5, 65))


def test_chromatic_similarity_needs_all_three_close():
    base = HSLColor(10, 60, 50)
    assert colors_are_similar(base, HSLColor(35, 70, 60))
    assert colors_are_similar(base, HSLColor(350, 60, 50))
    assert not colors_are_similar(base, HSLColor(40, 60, 50))
    assert not colors_are_similar(base, HSLColor(10, 80, 50))
    assert not colors_are_similar(base, HSLColor(10, 60, 70))


def test_near_grayscale_threshold():
    assert is_near_grayscale(HSLColor(0, 14, 50))
    assert not is_near_grayscale(HSLColor(0, 15, 50))


def test_build_clusters_averages_bucket_members_half_up():
    clusters = build_clusters(_buffer([(200, 10, 10, 255), (201, 11, 11, 255)]), stride=1)
    assert len(clusters) == 1
    assert clusters[0].rgb == RGBColor(201, 11, 11)
    assert clusters[0].pixel_count == 2


def test_build_clusters_drops_translucent_pixels():
    clusters = build_clusters(_buffer([(255, 0, 0, 127), (0, 0, 255, 128)]), stride=1)
    assert [c.rgb for c in clusters] == [RGBColor(0, 0, 255)]


def test_build_clusters_samples_every_third_pixel():
    pixels = [RED, BLUE, BLUE, RED, BLUE, BLUE]
    clusters = build_clusters(_buffer(pixels))
    assert [(c.rgb, c.pixel_count) for c in clusters] == [(RGBColor(255, 0, 0), 2)]


def test_build_clusters_keeps_first_seen_order():
    clusters = build_clusters(_buffer([BLUE, RED, BLUE]), stride=1)
    assert [c.rgb for c in clusters] == [RGBColor(0, 0, 255), RGBColor(255, 0, 0)]


def test_build_clusters_empty_buffer():
    assert build_clusters(np.zeros(0, dtype=np.uint8)) == []


def test_select_distinct_keeps_heaviest_of_similar_pair():
    light = _cluster(10, 60, 50, count=50)
    heavy = _cluster(15, 65, 55, count=400)
    assert select_distinct([light, heavy]) == [heavy]


def test_select_palette_limits_neutrals_and_puts_vibrant_first():
    grays = [_cluster(0, 0, l) for l in (20, 50, 80)]
    vibrant = [_cluster(0, 80, 50), _cluster(200, 80, 50)]
    distinct = [grays[0], vibrant[0], grays[1], vibrant[1], grays[2]]

    assert select_palette(distinct) == [vibrant[0], vibrant[1], grays[0], grays[1]]


# =============================================================================
# Quick extraction
# =============================================================================

def test_quick_buckets_snap_to_bucket_corner_and_rank_by_count():
    pixels = _buffer([BLUE, RED, RED, (250, 5, 5, 255)])
    assert quick_buckets(pixels) == ['#E00000', '#0000E0']


def test_quick_buckets_limit():
    pixels = _buffer([(v, 0, 0, 255) for v in range(0, 256, 32)])
    assert len(quick_buckets(pixels)) == 5


def test_quick_buckets_fallback_for_transparent():
    assert quick_buckets(_buffer([(1, 2, 3, 0)])) == QUICK_FALLBACK_COLORS


def test_quick_extract_colors_on_image(solid_image):
    assert quick_extract_colors(solid_image(RED, width=300, height=200)) == ['#E00000']
