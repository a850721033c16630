"""
core/errors.py

Exceptions raised by the frequency-domain pipeline.

- PreconditionViolation: a step was requested in the wrong session state
  (transform with nothing loaded, antitransform with no prior transform).
- InvalidDimensions: empty / non-2D input, or mismatched complex planes.

A flat (max == min) range during normalization is NOT an error; it maps to an
all-zero image (see core.spectrum.normalize_minmax).
"""


class FourierPipelineError(Exception):
    """Base class for every pipeline error."""


class PreconditionViolation(FourierPipelineError, RuntimeError):
    pass


class InvalidDimensions(FourierPipelineError, ValueError):
    pass
