"""
core/padding.py

Pad an image to DFT-friendly dimensions.

The DFT is fastest when each axis length factors into small primes
(2, 3 and 5). cv2.getOptimalDFTSize returns the smallest such length that is
not less than the input; the extra rows/cols are appended on the bottom and
right only, so pixel (0, 0) stays where it was.
"""

from typing import Tuple

import cv2
import numpy as np

from .config import BORDER_VALUE
from .errors import InvalidDimensions


def optimal_dft_size(n: int) -> int:
    """Smallest 2^a * 3^b * 5^c that is >= n."""
    if n < 1:
        raise InvalidDimensions(f"Axis length must be >= 1, got {n}.")
    return int(cv2.getOptimalDFTSize(int(n)))


def optimal_shape(shape: Tuple[int, int]) -> Tuple[int, int]:
    rows, cols = shape
    return optimal_dft_size(rows), optimal_dft_size(cols)


def check_image_2d(image: np.ndarray) -> None:
    """Raise InvalidDimensions unless image is a non-empty 2D array."""
    if image.ndim != 2:
        raise InvalidDimensions(f"Expected a 2D grayscale array, got ndim={image.ndim}.")
    if image.shape[0] < 1 or image.shape[1] < 1:
        raise InvalidDimensions(f"Image has zero area: shape={image.shape}.")


def pad_to_optimal(image: np.ndarray) -> np.ndarray:
    """
    Extend `image` with a constant (zero) border on the bottom and right so that
    both dimensions are optimal DFT sizes. Returns a new array of the same dtype;
    an image that is already optimal comes back as an unchanged copy.
    """
    check_image_2d(image)
    rows, cols = image.shape
    opt_rows, opt_cols = optimal_shape((rows, cols))
    src = np.ascontiguousarray(image)
    padded = cv2.copyMakeBorder(
        src, 0, opt_rows - rows, 0, opt_cols - cols,
        cv2.BORDER_CONSTANT, value=BORDER_VALUE,
    )
    # copyMakeBorder hands back (H, W) for single-channel input; keep it 2D regardless
    return padded.reshape(opt_rows, opt_cols)
