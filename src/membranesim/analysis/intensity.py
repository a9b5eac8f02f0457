"""
Time-averaged wave intensity on a membrane.

Intensity at a cell is the mean of (displacement - reference)² over the
steps sampled so far. Behind a slit barrier this builds up the familiar
diffraction pattern.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from membranesim.core.membrane import RectangularMembrane


class IntensityAccumulator:
    """Running mean of squared displacement, one sample per step."""

    def __init__(self, membrane: "RectangularMembrane"):
        self.membrane = membrane
        self._sum_sq = np.zeros(membrane.lattice.shape, dtype=np.float64)
        self.samples = 0

    def sample(self) -> None:
        """Record the membrane's current displacement."""
        m = self.membrane
        displacement = m.lattice.positions @ m.dof - m.reference_displacement
        self._sum_sq += displacement ** 2
        self.samples += 1

    @property
    def intensity(self) -> np.ndarray:
        """(width, height) mean squared displacement; zeros before any sample."""
        if self.samples == 0:
            return np.zeros_like(self._sum_sq)
        return self._sum_sq / self.samples

    def reset(self) -> None:
        self._sum_sq.fill(0.0)
        self.samples = 0
