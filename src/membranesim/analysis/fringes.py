"""
Fringe detection along a screen row.

A "screen" is one row j of a (width, height) field, read across all
columns. Fringes are the local maxima of that profile.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from scipy.signal import find_peaks


@dataclass
class FringePattern:
    """Bright fringes found on a screen profile."""

    profile: np.ndarray
    columns: np.ndarray  # Column index of each fringe, ascending
    heights: np.ndarray  # Profile value at each fringe

    @property
    def count(self) -> int:
        return len(self.columns)

    @property
    def central(self) -> int | None:
        """Column of the brightest fringe, or None if there are none."""
        if self.count == 0:
            return None
        return int(self.columns[np.argmax(self.heights)])

    def spacing(self) -> float | None:
        """Mean distance between adjacent fringes (None with fewer than two)."""
        if self.count < 2:
            return None
        return float(np.diff(self.columns).mean())


def screen_profile(field: np.ndarray, row: int) -> np.ndarray:
    """Values of a (width, height) field along row `row`."""
    field = np.asarray(field)
    if not 0 <= row < field.shape[1]:
        raise IndexError(f"row {row} outside field with {field.shape[1]} rows")
    return field[:, row].copy()


def find_fringes(
    profile: np.ndarray,
    prominence: float | None = None,
    distance: int | None = None,
) -> FringePattern:
    """
    Locate bright fringes in a 1D intensity profile.

    Args:
        profile: Intensity along a screen row
        prominence: Minimum peak prominence (defaults to 5% of the
                    profile's range)
        distance: Minimum column separation between fringes

    Returns:
        FringePattern with fringe columns and heights
    """
    profile = np.asarray(profile, dtype=np.float64)
    if prominence is None:
        span = float(profile.max() - profile.min()) if profile.size else 0.0
        prominence = 0.05 * span if span > 0 else None

    columns, _ = find_peaks(profile, prominence=prominence, distance=distance)
    return FringePattern(profile=profile, columns=columns, heights=profile[columns])
