"""
core/session.py

PipelineSession: single-owner holder of the state shared between a forward
transform and the matching inverse.

    EMPTY --load--> LOADED --transform--> TRANSFORMED --antitransform--> RECONSTRUCTED
      ^               ^                        |                              |
      |               +---------- load --------+-------------- load ---------+
      +--------------------------- reset --------------------------------------+

Only `transform` and `antitransform` are state-gated. Calling either from the
wrong state raises PreconditionViolation; callers are expected to consult
`can_transform` / `can_antitransform` (the viewer's buttons are driven by these).
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .errors import PreconditionViolation
from .fft_engine import ComplexImage, forward_transform
from .padding import check_image_2d, pad_to_optimal
from .reconstruct import reconstruct
from .spectrum import magnitude_spectrum


class SessionState(Enum):
    EMPTY = "empty"
    LOADED = "loaded"
    TRANSFORMED = "transformed"
    RECONSTRUCTED = "reconstructed"


class TransformResult(NamedTuple):
    padded: np.ndarray
    spectrum: np.ndarray


def _as_gray_uint8(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    check_image_2d(arr)
    if arr.dtype == np.uint8:
        return arr.copy()
    if np.issubdtype(arr.dtype, np.bool_):
        return arr.astype(np.uint8) * 255
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise TypeError(f"Unsupported pixel dtype {arr.dtype}.")
    return np.clip(np.rint(arr), 0, 255).astype(np.uint8)


class PipelineSession:
    def __init__(self):
        self._state = SessionState.EMPTY
        self._image: Optional[np.ndarray] = None
        self._complex: Optional[ComplexImage] = None

    # --- state projection ---
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def image(self) -> Optional[np.ndarray]:
        return self._image

    @property
    def complex_image(self) -> Optional[ComplexImage]:
        return self._complex

    @property
    def original_shape(self) -> Optional[Tuple[int, int]]:
        return None if self._image is None else self._image.shape

    @property
    def can_transform(self) -> bool:
        return self._state is SessionState.LOADED

    @property
    def can_antitransform(self) -> bool:
        return self._state is SessionState.TRANSFORMED

    # --- transitions ---
    def load(self, image: np.ndarray) -> None:
        """
        Take a new grayscale image (any state). Drops any stored spectrum.
        Raises InvalidDimensions for empty or non-2D input; the session is left
        untouched in that case.
        """
        gray = _as_gray_uint8(image)
        self._image = gray
        self._complex = None
        self._state = SessionState.LOADED

    def transform(self) -> TransformResult:
        """Pad, forward DFT, store the complex image; returns padded input + uint8 spectrum."""
        if not self.can_transform:
            raise PreconditionViolation(
                f"transform() needs a freshly loaded image (state is {self._state.value})."
            )
        padded = pad_to_optimal(self._image)
        cimg = forward_transform(padded)
        spectrum = magnitude_spectrum(cimg)
        self._complex = cimg
        self._state = SessionState.TRANSFORMED
        return TransformResult(padded=padded, spectrum=spectrum)

    def antitransform(self) -> np.ndarray:
        """Inverse DFT on the stored complex image (in place); returns the restored uint8 image."""
        if not self.can_antitransform:
            raise PreconditionViolation(
                f"antitransform() needs a prior transform() (state is {self._state.value})."
            )
        restored = reconstruct(self._complex)
        self._state = SessionState.RECONSTRUCTED
        return restored

    def reset(self) -> None:
        self._image = None
        self._complex = None
        self._state = SessionState.EMPTY

    def __repr__(self) -> str:
        return f"PipelineSession(state={self._state.value}, shape={self.original_shape})"
