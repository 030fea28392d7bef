"""Tests for WCAG luminance, contrast ratio and compliance."""

import itertools

import pytest

from color_convert import RGBColor, hex_to_rgb
from contrast import (
    COLOR_BLINDNESS_MATRICES,
    WCAGCompliance,
    check_accessibility,
    contrast_ratio,
    format_contrast_ratio,
    relative_luminance,
    simulate_color_blindness,
    simulate_palette,
    suggest_accessible_colors,
    wcag_compliance,
    wcag_level_description,
)

BLACK = RGBColor(0, 0, 0)
WHITE = RGBColor(255, 255, 255)
SAMPLES = [RGBColor(*c) for c in itertools.product((0, 60, 128, 200, 255), repeat=3)]


def test_relative_luminance_extremes():
    assert relative_luminance(BLACK) == 0
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(RGBColor(255, 0, 0)) == pytest.approx(0.2126)


def test_black_on_white_is_twenty_one():
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    assert contrast_ratio(WHITE, WHITE) == pytest.approx(1.0)


def test_contrast_ratio_is_bounded_and_symmetric():
    for a, b in itertools.combinations(SAMPLES, 2):
        ratio = contrast_ratio(a, b)
        assert 1 <= ratio <= 21 + 1e-9
        assert ratio == contrast_ratio(b, a)


@pytest.mark.parametrize('ratio, expected', [
    (21.0, WCAGCompliance('AAA', 'AAA', 'AA')),
    (7.0, WCAGCompliance('AAA', 'AAA', 'AA')),
    (6.99, WCAGCompliance('AA', 'AAA', 'AA')),
    (4.5, WCAGCompliance('AA', 'AAA', 'AA')),
    (4.49, WCAGCompliance('Fail', 'AA Large', 'AA')),
    (3.0, WCAGCompliance('Fail', 'AA Large', 'AA')),
    (2.99, WCAGCompliance('Fail', 'Fail', 'Fail')),
    (1.0, WCAGCompliance('Fail', 'Fail', 'Fail')),
])
def test_wcag_compliance_thresholds(ratio, expected):
    assert wcag_compliance(ratio) == expected


def test_check_accessibility_black_on_white():
    pair = check_accessibility('#000000', '#FFFFFF')
    assert format_contrast_ratio(pair.contrast_ratio) == '21.00:1'
    assert pair.compliance.normal_text == 'AAA'
    assert pair.passes
    assert (pair.foreground, pair.background) == ('#000000', '#FFFFFF')


def test_check_accessibility_low_contrast_fails():
    pair = check_accessibility('#777777', '#888888')
    assert not pair.passes
    assert pair.compliance == WCAGCompliance('Fail', 'Fail', 'Fail')


def test_check_accessibility_rejects_bad_hex():
    with pytest.raises(ValueError):
        check_accessibility('#00000', '#FFFFFF')


def test_suggestions_reach_target_ratio():
    suggestions = suggest_accessible_colors('#777777', '#888888')
    assert 0 < len(suggestions) <= 4
    for pair in suggestions:
        ratio = contrast_ratio(hex_to_rgb(pair['foreground']), hex_to_rgb(pair['background']))
        assert ratio >= 4.5


def test_suggestions_are_unique():
    suggestions = suggest_accessible_colors('#000000', '#FFFFFF')
    keys = [(s['foreground'], s['background']) for s in suggestions]
    assert len(keys) == len(set(keys))
    assert {'foreground': '#000000', 'background': '#FFFFFF'} in suggestions


def test_wcag_level_description():
    assert 'large text' in wcag_level_description('AA Large')
    with pytest.raises(ValueError):
        wcag_level_description('A')


# =============================================================================
# Color vision deficiency simulation
# =============================================================================

@pytest.mark.parametrize('deficiency', sorted(COLOR_BLINDNESS_MATRICES))
def test_simulation_keeps_black_and_white(deficiency):
    assert simulate_color_blindness('#000000', deficiency) == '#000000'
    assert simulate_color_blindness('#FFFFFF', deficiency) == '#FFFFFF'


def test_protanopia_turns_red_olive():
    assert simulate_color_blindness('#FF0000', 'protanopia') == '#C6C500'


def test_achromatopsia_is_gray():
    for hex_value in ('#FF0000', '#1D4ED8', '#22AA44'):
        rgb = hex_to_rgb(simulate_color_blindness(hex_value, 'achromatopsia'))
        assert rgb.r == rgb.g == rgb.b


def test_simulate_palette_maps_every_color():
    palette = ['#FF0000', '#FFFFFF']
    assert simulate_palette(palette, 'protanopia') == ['#C6C500', '#FFFFFF']


def test_unknown_deficiency_raises():
    with pytest.raises(ValueError, match="Unknown color vision deficiency"):
        simulate_color_blindness('#FF0000', 'colorful')
