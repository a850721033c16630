# io/image_handler.py
"""
Image read/write helpers using Pillow.

Functions:
- read_grayscale(path) -> uint8 numpy array (H x W)
- decode_grayscale(data) -> uint8 numpy array from encoded bytes
- encode_png(array) -> PNG bytes (lossless, 8-bit grayscale)
- save_image(path, array) -> writes image
"""

import io
from PIL import Image
import pillow_avif  # noqa: F401  registers the AVIF codec with Pillow
import numpy as np

from core.errors import InvalidDimensions


def _to_gray(img: Image.Image) -> np.ndarray:
    # flatten alpha onto black like a grayscale imread would, then drop to L
    if img.mode in ("RGBA", "LA") or ("transparency" in img.info):
        img = img.convert("RGBA")
        background = Image.new("RGBA", img.size, (0, 0, 0, 255))
        img = Image.alpha_composite(background, img)
    if img.mode != "L":
        img = img.convert("L")
    return np.asarray(img, dtype=np.uint8).copy()


def read_grayscale(path: str) -> np.ndarray:
    """
    Read any Pillow-readable file (AVIF included) from `path` as 8-bit grayscale.
    """
    with Image.open(path) as img:
        return _to_gray(img)


def decode_grayscale(data: bytes) -> np.ndarray:
    """Decode encoded image bytes (PNG, JPEG, ...) into an 8-bit grayscale array."""
    with Image.open(io.BytesIO(data)) as img:
        return _to_gray(img)


def _as_uint8_2d(array: np.ndarray) -> np.ndarray:
    if array.ndim != 2:
        raise InvalidDimensions("Expected an HxW grayscale array.")
    if np.issubdtype(array.dtype, np.floating):
        return np.clip(array, 0.0, 255.0).astype(np.uint8)
    return array.astype(np.uint8)


def encode_png(array: np.ndarray) -> bytes:
    """
    Encode an HxW array as 8-bit grayscale PNG bytes for the display side.
    Float input is clipped to 0..255; pixel values are preserved exactly.
    """
    buf = io.BytesIO()
    Image.fromarray(_as_uint8_2d(array)).save(buf, format="PNG")
    return buf.getvalue()


def save_image(path: str, array: np.ndarray):
    """
    Save an HxW grayscale array to `path`. Format follows the extension.
    Casts floats to uint8 by clipping to 0..255.
    """
    img = Image.fromarray(_as_uint8_2d(array))
    img.save(path)
    return path
