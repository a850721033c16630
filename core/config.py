"""
core/config.py

Module-level defaults shared by the GUI and the batch script.
Edit here rather than passing the same values around.
"""

# constant value used for the bottom/right padding border
BORDER_VALUE = 0

# fixed preview width in the viewer (aspect ratio preserved)
PREVIEW_FIT_WIDTH = 250

# viewer window
APP_TITLE = "Fourier Transform"
APP_THEME = "cyborg"
APP_GEOMETRY = "900x420"

# where scripts drop their output
RESULTS_DIR = "results"
PROJECT_NAME = "fourier"
