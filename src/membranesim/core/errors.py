"""
Construction errors.

Stepping never raises: once a membrane exists, every step completes.
Only construction can fail, and it fails with one of these.
"""


class MembraneError(ValueError):
    """Base class for membrane construction failures."""


class InvalidGeometry(MembraneError):
    """Spacing vectors are zero, parallel, or not 3-component."""


class InvalidDimensions(MembraneError):
    """Width or height is not a positive integer."""
