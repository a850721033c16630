"""
core/spectrum.py

Display-oriented view of a ComplexImage:
  1) split into (real, imag)
  2) magnitude sqrt(re^2 + im^2)
  3) log(1 + m) compression
  4) quadrant swap so the DC term sits in the middle
  5) min-max normalization to uint8 [0, 255]

API:
- magnitude(real, imag)
- log_compress(mag)
- shift_dft(arr)
- normalize_minmax(arr)
- log_magnitude(cimg)         -> float32, steps 1-4
- magnitude_spectrum(cimg)    -> uint8, steps 1-5
"""

import numpy as np

from .fft_engine import ComplexImage, fft_shift


def magnitude(real: np.ndarray, imag: np.ndarray) -> np.ndarray:
    if real.shape != imag.shape:
        raise ValueError("real and imag planes must have the same shape.")
    return np.hypot(real, imag)


def log_compress(mag: np.ndarray) -> np.ndarray:
    """log(1 + m); the +1 keeps zero magnitudes finite."""
    return np.log1p(mag)


def even_crop(arr: np.ndarray) -> np.ndarray:
    """Drop a trailing odd row/column (size & -2 on each axis)."""
    rows, cols = arr.shape[:2]
    return arr[: rows & -2, : cols & -2]


def shift_dft(arr: np.ndarray) -> np.ndarray:
    """
    Reorder the four quadrants of a spectrum image: top-left <-> bottom-right,
    top-right <-> bottom-left. The input is first cropped to even dimensions,
    so the returned array may be one row/col smaller than `arr`.
    On even dimensions this is exactly np.fft.fftshift and is its own inverse.
    """
    return np.ascontiguousarray(fft_shift(even_crop(arr)))


def normalize_minmax(arr: np.ndarray) -> np.ndarray:
    """
    Linearly map arr onto [0, 255] and return uint8.
    A flat input (max == min) maps to all zeros.
    """
    a = np.asarray(arr, dtype=np.float64)
    amin = float(np.min(a))
    amax = float(np.max(a))
    if amax <= amin:
        return np.zeros(a.shape, dtype=np.uint8)
    scaled = (a - amin) * (255.0 / (amax - amin))
    return np.clip(np.rint(scaled), 0, 255).astype(np.uint8)


def log_magnitude(cimg: ComplexImage) -> np.ndarray:
    """Log-compressed, quadrant-swapped magnitude, before normalization."""
    real, imag = cimg.planes()
    return shift_dft(log_compress(magnitude(real, imag)))


def magnitude_spectrum(cimg: ComplexImage) -> np.ndarray:
    """uint8 magnitude spectrum ready for encoding (io_utils.image_handler.encode_png)."""
    return normalize_minmax(log_magnitude(cimg))
