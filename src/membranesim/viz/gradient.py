"""
Two-colour gradient for membrane displacement.

Displacement below the reference plane blends toward `below`, above it
toward `above`. At ±expected_displacement (and beyond) the colour is
fully reached; at the reference it is the midpoint of the two.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np
import matplotlib.colors as mcolors


@dataclass
class ColorGradient:
    """Maps displacement along dof to an RGB colour."""

    reference: float
    below: object  # Any matplotlib colour spec
    above: object
    expected_displacement: float
    _below_rgb: np.ndarray = field(init=False, repr=False)
    _above_rgb: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        if self.expected_displacement <= 0:
            raise ValueError("expected_displacement must be positive")
        self._below_rgb = np.array(mcolors.to_rgb(self.below))
        self._above_rgb = np.array(mcolors.to_rgb(self.above))

    def weight(self, displacement) -> np.ndarray:
        """Blend weight in [0, 1]: 0 is fully `below`, 1 is fully `above`."""
        scaled = (np.asarray(displacement, dtype=np.float64) - self.reference) / self.expected_displacement
        return np.clip(0.5 + 0.5 * scaled, 0.0, 1.0)

    def colors(self, displacement) -> np.ndarray:
        """RGB array with shape displacement.shape + (3,)."""
        w = self.weight(displacement)[..., np.newaxis]
        return (1 - w) * self._below_rgb + w * self._above_rgb

    def color_for(self, displacement: float) -> tuple[float, float, float]:
        """RGB tuple for a single displacement."""
        r, g, b = self.colors(displacement)
        return float(r), float(g), float(b)
