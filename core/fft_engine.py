'''
FFT engine helpers.

Functions:
- ComplexImage: real + imaginary float32 planes of identical shape
- make_complex_image: real plane from the padded samples, zero imaginary plane
- forward_transform: build the complex image and apply the 2D DFT in place
- dft_inplace / inverse_transform: forward / inverse 2D DFT on a ComplexImage
- fft_shift: wrapper around np.fft.fftshift

Scaling convention: neither direction divides by the element count.
np.fft.fft2 is unnormalized by default and the inverse is run with
norm="forward", so after forward + inverse the real plane holds
rows * cols * original. Callers that display the result remap its range
instead of dividing (see core.reconstruct).
'''

import numpy as np
from typing import Tuple

from .errors import InvalidDimensions

TRANSFORM_DTYPE = np.float32


class ComplexImage:
    """
    Planar complex image: two float32 arrays of the same shape.
    Mutated in place by dft_inplace / inverse_transform.
    """

    def __init__(self, real: np.ndarray, imag: np.ndarray):
        real = np.asarray(real, dtype=TRANSFORM_DTYPE)
        imag = np.asarray(imag, dtype=TRANSFORM_DTYPE)
        if real.ndim != 2 or real.shape != imag.shape:
            raise InvalidDimensions(
                f"Complex planes must be 2D with equal shapes, got {real.shape} and {imag.shape}."
            )
        self.real = real
        self.imag = imag

    @property
    def shape(self) -> Tuple[int, int]:
        return self.real.shape

    def planes(self) -> Tuple[np.ndarray, np.ndarray]:
        """Split into (real, imag)."""
        return self.real, self.imag

    def as_complex(self) -> np.ndarray:
        """Merge the planes into a single complex array (copy)."""
        return self.real.astype(np.complex64) + 1j * self.imag.astype(np.complex64)

    def assign(self, values: np.ndarray) -> None:
        """Overwrite both planes in place from a complex array of the same shape."""
        if values.shape != self.shape:
            raise InvalidDimensions(f"Shape mismatch: {values.shape} vs {self.shape}.")
        self.real[...] = np.real(values)
        self.imag[...] = np.imag(values)

    def copy(self) -> "ComplexImage":
        return ComplexImage(self.real.copy(), self.imag.copy())

    def __repr__(self) -> str:
        return f"ComplexImage(shape={self.shape})"


def make_complex_image(padded: np.ndarray) -> ComplexImage:
    """
    Convert the padded samples to float32 and pair them with a zero imaginary plane.
    """
    if padded.ndim != 2:
        raise InvalidDimensions("make_complex_image expects a 2D grayscale array.")
    real = np.array(padded, dtype=TRANSFORM_DTYPE, copy=True)
    imag = np.zeros_like(real)
    return ComplexImage(real, imag)


def dft_inplace(cimg: ComplexImage) -> ComplexImage:
    """Unnormalized forward 2D DFT, written back into cimg."""
    cimg.assign(np.fft.fft2(cimg.as_complex()))
    return cimg


def inverse_transform(cimg: ComplexImage) -> ComplexImage:
    """
    Unnormalized inverse 2D DFT, written back into cimg.
    The result is rows * cols times the spatial image the spectrum came from.
    """
    cimg.assign(np.fft.ifft2(cimg.as_complex(), norm="forward"))
    return cimg


def forward_transform(padded: np.ndarray) -> ComplexImage:
    """
    Build a fresh ComplexImage from the padded real image and transform it.
    """
    return dft_inplace(make_complex_image(padded))


def fft_shift(F: np.ndarray) -> np.ndarray:
    """Shift zero-frequency to center (wrapper)."""
    return np.fft.fftshift(F)
