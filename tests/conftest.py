"""Shared fixtures: synthetic images built with Pillow and numpy."""

import numpy as np
import pytest
from PIL import Image


def make_image(regions, width=100, height=100):
    """
    Build an RGBA image from horizontal bands.

    Args:
        regions: List of (rgba_tuple, rows) pairs, stacked top to bottom
    """
    array = np.zeros((height, width, 4), dtype=np.uint8)
    row = 0
    for rgba, rows in regions:
        array[row:row + rows] = rgba
        row += rows
    return Image.fromarray(array)


@pytest.fixture
def solid_image():
    def factory(rgba=(255, 0, 0, 255), width=100, height=100):
        return make_image([(rgba, height)], width=width, height=height)
    return factory


@pytest.fixture
def banded_image():
    return make_image


@pytest.fixture
def png_file(tmp_path):
    """Save an image to a temporary PNG and return the path."""
    def factory(img, name='image.png'):
        path = tmp_path / name
        img.save(path)
        return path
    return factory
