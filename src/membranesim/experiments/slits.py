"""
Slit diffraction presets.

A wave source drives one cell on the top row. Halfway down, a barrier
row of FixedPoints blocks the wave except at the hole columns, and the
wave spreads out behind the holes.
"""

from __future__ import annotations
from typing import Sequence

from membranesim.core.generator import ParticleGenerator
from membranesim.core.lattice import MembraneConfig
from membranesim.core.membrane import RectangularMembrane, linear_response


def slit_experiment(
    width: int = 100,
    height: int = 50,
    holes: Sequence[int] = (50,),
    source: tuple[int, int] = (50, 0),
    source_magnitude: float = 5.0,
    strength: float = 100.0,
    spacing: float = 0.01,
    wall_row: int | None = None,
) -> RectangularMembrane:
    """
    Build a membrane with a slit barrier and a point source.

    Args:
        width, height: Grid size
        holes: Columns left open in the barrier row
        source: (i, j) cell driven with a constant forcing term
        source_magnitude: Forcing magnitude at the source
        strength: Spring constant of the linear response
        spacing: Distance between columns (along x) and rows (along z)
        wall_row: Barrier row (defaults to height // 2)
    """
    if wall_row is None:
        wall_row = height // 2
    open_columns = frozenset(holes)
    source_x, source_y = source

    generator = ParticleGenerator(
        mass=lambda i, j: 1.0,
        forcing=lambda i, j: source_magnitude if (i, j) == (source_x, source_y) else 0.0,
        fixed=lambda i, j: j == wall_row and i not in open_columns,
    )

    config = MembraneConfig(
        width=width,
        height=height,
        anchor=None,
        col_spacing=(spacing, 0.0, 0.0),
        row_spacing=(0.0, 0.0, spacing),
        fixed_edges=True,
    )
    membrane = RectangularMembrane(config, generator, linear_response(strength))
    membrane.generate_gradient("red", "green", 0.1)
    return membrane


def single_slit_experiment() -> RectangularMembrane:
    """100x50 membrane, one hole in the middle of the barrier."""
    width = 100
    return slit_experiment(width=width, height=50, holes=(width // 2,), source=(width // 2, 0))


def double_slit_experiment() -> RectangularMembrane:
    """100x50 membrane, two holes two columns apart."""
    width = 100
    return slit_experiment(
        width=width,
        height=50,
        holes=(width // 2 - 1, width // 2 + 1),
        source=(width // 2, 0),
    )
