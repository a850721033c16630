"""
core/reconstruct.py

Inverse side of the pipeline: run the inverse DFT on a ComplexImage (in place)
and bring the real plane back to a displayable uint8 image.

The inverse is unnormalized, so the real plane comes back rows * cols times
too large. It is only min-max remapped, never divided by the element count;
the displayed range is the same either way.
"""

from typing import Tuple

import numpy as np
import warnings

from .fft_engine import ComplexImage, inverse_transform
from .spectrum import normalize_minmax


def _check_imag_residue(cimg: ComplexImage, rel_tol: float = 1e-3) -> None:
    """
    Warn if the imaginary plane is not negligible next to the real one.
    A spectrum that came from a real image inverts to (almost) zero imag.
    """
    real, imag = cimg.planes()
    real_max = float(np.max(np.abs(real)))
    imag_max = float(np.max(np.abs(imag)))
    if imag_max > rel_tol * max(real_max, 1.0):
        warnings.warn(
            f"Inverse DFT has non-negligible imaginary component (max abs = {imag_max}, "
            f"real max abs = {real_max}). Displaying the real plane only.",
            RuntimeWarning
        )


def reconstruct(cimg: ComplexImage) -> np.ndarray:
    """
    Inverse-transform cimg in place and return its real plane as uint8.
    No log compression and no quadrant swap: the stored spectrum was never shifted.
    """
    inverse_transform(cimg)
    _check_imag_residue(cimg)
    real, _imag = cimg.planes()
    return normalize_minmax(real)


def reconstruct_cropped(cimg: ComplexImage, original_shape: Tuple[int, int]) -> np.ndarray:
    """
    reconstruct(), then drop the bottom/right padding so the result lines up
    with the image that was loaded. Normalization still covers the padded area.
    """
    restored = reconstruct(cimg)
    rows, cols = original_shape
    return restored[:rows, :cols]
