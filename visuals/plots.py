"""
visuals/plots.py

Export utilities for the spectrum viewer.

APIs:
- save_spectrum_image(spectrum, out_path)              raw 8-bit PNG of a ready spectrum
- plot_magnitude_spectrum(cimg, out_path=None)         spectrum straight from a ComplexImage
- compare_and_save(original, spectrum, restored, out_path=None, titles=None)
- fig_to_array(fig) -> np.ndarray (H,W,3) uint8

Notes:
- Raw exports go through io_utils.image_handler (no Matplotlib) so pixel values
  are exactly the normalized ones.
- If out_path is None, functions return the array / matplotlib Figure instead.
"""

from typing import Optional, Sequence
import os
import numpy as np
import matplotlib.pyplot as plt
from core.fft_engine import ComplexImage
from core.spectrum import magnitude_spectrum
from io_utils.image_handler import save_image

# Helper to ensure outdir exists
def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path

def save_spectrum_image(spectrum: np.ndarray, out_path: str) -> str:
    """Write an already-normalized uint8 spectrum (or restored image) as PNG."""
    _ensure_outdir(out_path)
    return save_image(out_path, spectrum)

def plot_magnitude_spectrum(cimg: ComplexImage, out_path: Optional[str] = None):
    """
    Log-scaled, centered, normalized magnitude of `cimg`.
    Writes a raw PNG when out_path is given, otherwise returns the uint8 array.
    """
    spec = magnitude_spectrum(cimg)
    if out_path is not None:
        return save_spectrum_image(spec, out_path)
    return spec

def fig_to_array(fig: plt.Figure) -> np.ndarray:
    """
    Convert a Matplotlib figure to an HxWx3 uint8 RGB numpy array.
    """
    fig.canvas.draw()
    rgba = np.asarray(fig.canvas.buffer_rgba())
    return np.ascontiguousarray(rgba[..., :3])

def compare_and_save(
    original: np.ndarray,
    spectrum: np.ndarray,
    restored: Optional[np.ndarray] = None,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Original | Magnitude spectrum | Restored (when given), side by side.
    """
    panels = [original, spectrum] + ([restored] if restored is not None else [])
    names = list(titles) if titles else ["Original", "Magnitude Spectrum", "Restored"]

    fig, axs = plt.subplots(1, len(panels), figsize=(4 * len(panels), 4))
    for ax, img, name in zip(axs, panels, names):
        ax.imshow(img, cmap="gray", vmin=0, vmax=255, interpolation="nearest")
        ax.set_title(name)
        ax.axis("off")

    if out_path:
        _ensure_outdir(out_path)
        fig.savefig(out_path, dpi=150, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        return out_path
    else:
        return fig
