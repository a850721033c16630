# visuals/__init__.py
"""
Visual helpers for the Fourier spectrum viewer.
Provides export utilities used by the GUI and scripts.
"""
from .plots import (
    save_spectrum_image,
    plot_magnitude_spectrum,
    compare_and_save,
    fig_to_array,
)
__all__ = [
    "save_spectrum_image",
    "plot_magnitude_spectrum",
    "compare_and_save",
    "fig_to_array",
]
