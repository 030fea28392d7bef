#!/usr/bin/env python3
"""
Load an image from a path, URL, data URL or bytes and sample it into a
bounded-resolution flat RGBA buffer.
"""

import base64
import io
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote_to_bytes

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError


# =============================================================================
# Constants
# =============================================================================

FULL_SAMPLE_SIZE = 400  # Longest side for full extraction
QUICK_SAMPLE_SIZE = 50  # Longest side for the quick preview

# Image size limits (security: prevent decompression bombs)
MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side

FETCH_TIMEOUT = 10  # seconds


class ImageLoadError(ValueError):
    """The image could not be fetched or decoded."""


@dataclass
class PixelBuffer:
    """Sampled pixels of one image."""
    data: np.ndarray  # flat uint8 RGBA, row-major
    width: int
    height: int
    scale: float  # sampled size / original size (1.0 when not downscaled)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


# =============================================================================
# Loading
# =============================================================================

def _decode_data_url(url: str) -> bytes:
    header, sep, payload = url.partition(',')
    if not sep:
        raise ImageLoadError("Malformed data URL")
    if header.endswith(';base64'):
        try:
            return base64.b64decode(payload, validate=False)
        except ValueError as e:
            raise ImageLoadError(f"Malformed base64 in data URL: {e}") from e
    return unquote_to_bytes(payload)


def _fetch_url(url: str) -> bytes:
    try:
        response = requests.get(url, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise ImageLoadError(f"Could not fetch image: {e}") from e
    return response.content


def _open_bytes(raw: bytes) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Could not decode image: {e}") from e
    return img


def load_image(source) -> Image.Image:
    """
    Open and decode an image.

    Args:
        source: Filesystem path, http(s) URL, data URL, raw bytes or an
            already open PIL image

    Raises:
        ImageLoadError: If the image cannot be fetched, decoded, or exceeds
            size limits
    """
    if isinstance(source, Image.Image):
        img = source
    elif isinstance(source, (bytes, bytearray)):
        img = _open_bytes(bytes(source))
    else:
        location = str(source)
        if location.startswith('data:'):
            img = _open_bytes(_decode_data_url(location))
        elif location.startswith(('http://', 'https://')):
            img = _open_bytes(_fetch_url(location))
        else:
            path = Path(location)
            if not path.is_file():
                raise ImageLoadError(f"Image not found: {path}")
            try:
                img = _open_bytes(path.read_bytes())
            except OSError as e:
                raise ImageLoadError(f"Could not read image: {e}") from e

    try:
        check_image_size(img)
    except ImageLoadError:
        if img is not source:
            img.close()
        raise

    return img


def check_image_size(img: Image.Image) -> None:
    """Reject empty images and images past the dimension or pixel limits."""
    width, height = img.size
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ImageLoadError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_IMAGE_DIMENSION}x{MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ImageLoadError(
            f"Image has {width * height:,} pixels, exceeding maximum {MAX_IMAGE_PIXELS:,}"
        )
    if width == 0 or height == 0:
        raise ImageLoadError("Image has no pixels")


# =============================================================================
# Sampling
# =============================================================================

def fit_dimensions(width: int, height: int, max_size: int) -> tuple[int, int]:
    """Scale (width, height) so the longer side is at most max_size."""
    if width > height and width > max_size:
        height = height * max_size / width
        width = max_size
    elif height > max_size:
        width = width * max_size / height
        height = max_size

    return max(1, int(width)), max(1, int(height))


def sample_pixels(source, max_size: int = FULL_SAMPLE_SIZE) -> PixelBuffer:
    """
    Decode an image into a downscaled RGBA pixel buffer.

    The longer side is capped at max_size; smaller images keep their size.

    Raises:
        ImageLoadError: If the image cannot be loaded
    """
    img = load_image(source)
    original_width, original_height = img.size
    width, height = fit_dimensions(original_width, original_height, max_size)

    with img.convert('RGBA') as rgba:
        if (width, height) != rgba.size:
            surface = rgba.resize((width, height), Image.Resampling.BILINEAR)
        else:
            surface = rgba.copy()
        with surface:
            data = np.asarray(surface, dtype=np.uint8).reshape(-1).copy()

    if img is not source:
        img.close()

    return PixelBuffer(
        data=data,
        width=width,
        height=height,
        scale=width / original_width,
    )
