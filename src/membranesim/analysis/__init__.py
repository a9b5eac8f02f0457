"""
Analysis layer: derived quantities for visualization and comparison.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- IntensityAccumulator: time-averaged squared displacement
- screen_profile / find_fringes: diffraction fringes along a row
"""

from membranesim.analysis.intensity import IntensityAccumulator
from membranesim.analysis.fringes import FringePattern, screen_profile, find_fringes

__all__ = [
    "IntensityAccumulator",
    "FringePattern",
    "screen_profile",
    "find_fringes",
]
