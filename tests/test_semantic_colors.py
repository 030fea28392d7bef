"""Tests for primary / accent / background role selection."""

from color_convert import ExtractedColor, HSLColor, OKLCHColor, RGBColor, hex_to_rgb
from semantic_colors import SemanticColors, identify_semantic_colors, is_vibrant


def color(hex_value, h, s, l, percentage=10.0):
    """ExtractedColor with explicit HSL so each case controls the heuristics."""
    return ExtractedColor(
        rgb=hex_to_rgb(hex_value),
        hsl=HSLColor(h, s, l),
        oklch=OKLCHColor(0.5, 0.1, h),
        hex=hex_value,
        percentage=percentage,
    )


def test_empty_palette_has_no_roles():
    assert identify_semantic_colors([]) == SemanticColors()


def test_gray_and_red_scenario():
    gray = color('#888888', 0, 0, 53, 50.0)
    red = color('#E63946', 355, 70, 50, 50.0)

    roles = identify_semantic_colors([gray, red])

    assert roles.primary is red
    assert roles.background is gray
    # Only one vibrant color: it is both primary and accent
    assert roles.accent is red


def test_roles_are_the_same_objects():
    colors = [color('#1D4ED8', 224, 76, 48, 40.0), color('#F97316', 25, 95, 53, 30.0),
              color('#F8FAFC', 210, 40, 98, 30.0)]
    roles = identify_semantic_colors(colors)
    assert all(any(r is c for c in colors) for r in roles.as_dict().values())


def test_primary_maximizes_saturation_times_share():
    small_vivid = color('#FF0000', 0, 100, 50, 10.0)
    large_muted = color('#3366AA', 215, 50, 43, 60.0)
    roles = identify_semantic_colors([small_vivid, large_muted])
    assert roles.primary is large_muted


def test_primary_tie_goes_to_first():
    first = color('#CC3333', 0, 60, 50, 20.0)
    second = color('#33CC33', 120, 60, 50, 20.0)
    assert identify_semantic_colors([first, second]).primary is first


def test_primary_falls_back_to_first_color_without_vibrant():
    dark = color('#111122', 240, 30, 10)
    pale = color('#EEEEFF', 240, 100, 97)
    assert identify_semantic_colors([dark, pale]).primary is dark


def test_accent_prefers_most_saturated_distinct_hue():
    primary = color('#2255CC', 222, 70, 47, 50.0)
    near = color('#3366DD', 225, 90, 53, 5.0)  # too close in hue
    orange = color('#EE8822', 30, 85, 53, 10.0)
    green = color('#22AA44', 135, 66, 40, 20.0)

    roles = identify_semantic_colors([primary, near, orange, green])

    assert roles.primary is primary
    assert roles.accent is orange


def test_accent_falls_back_to_second_ranked_vibrant():
    primary = color('#2255CC', 222, 70, 47, 50.0)
    similar = color('#3366DD', 230, 72, 53, 20.0)
    assert identify_semantic_colors([similar, primary]).accent is similar


def test_single_vibrant_color_is_also_the_accent():
    red = color('#E63946', 355, 70, 50, 60.0)
    white = color('#FAFAFA', 0, 0, 98, 40.0)

    roles = identify_semantic_colors([red, white])

    assert roles.primary is red
    assert roles.accent is red
    assert roles.background is white


def test_single_color_palette():
    only = color('#E63946', 355, 70, 50, 100.0)
    roles = identify_semantic_colors([only])
    assert roles.primary is only
    assert roles.accent is only
    assert roles.background is only


def test_accent_is_none_without_vibrant_or_second_color():
    gray = color('#888888', 0, 0, 53, 100.0)
    roles = identify_semantic_colors([gray])
    assert roles.primary is gray
    assert roles.accent is None


def test_background_prefers_lightest_above_eighty():
    cream = color('#FFF5E0', 40, 100, 94)
    white = color('#FAFAFA', 0, 0, 98)
    gray = color('#999999', 0, 0, 60)
    red = color('#E63946', 355, 70, 50)
    assert identify_semantic_colors([red, cream, gray, white]).background is white


def test_background_falls_back_to_lightest_neutral():
    red = color('#E63946', 355, 70, 50)
    slate = color('#556677', 210, 17, 40)
    stone = color('#A8A29E', 24, 6, 64)
    assert identify_semantic_colors([red, slate, stone]).background is stone


def test_background_falls_back_to_last_color():
    red = color('#E63946', 355, 70, 50)
    blue = color('#1D4ED8', 224, 76, 48)
    assert identify_semantic_colors([red, blue]).background is blue


def test_is_vibrant_bounds_are_exclusive():
    assert not is_vibrant(color('#000000', 0, 31, 25))
    assert not is_vibrant(color('#000000', 0, 31, 75))
    assert not is_vibrant(color('#000000', 0, 30, 50))
    assert is_vibrant(color('#000000', 0, 31, 26))
