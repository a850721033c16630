"""
ttkbootstrap front-end: Load / Apply DFT / Apply Inverse DFT.
"""
from .interface import FourierApp, launch_app

__all__ = ["FourierApp", "launch_app"]
