"""
Core package init for the Fourier spectrum viewer.
Exposes public modules for import in tests, scripts and the GUI.
"""
__all__ = ["padding", "fft_engine", "spectrum", "reconstruct", "session", "worker", "errors", "config"]
