"""
Lattice: the 2D grid of restrained particles that forms a membrane.

The lattice stores ONLY particle primitives:
- One particle per cell, created once at construction
- Dense position and force buffers shared with the particles
- The dof axis derived from the two spacing vectors

It does NOT compute displacements or coupling forces; that is the
membrane's job. It does NOT integrate motion; that is the world's job.

Indexing is [i, j] with i the column in [0, width) and j the row in
[0, height), matching the column-major construction order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator
import logging

import numpy as np

from membranesim.core.errors import InvalidDimensions, InvalidGeometry
from membranesim.core.generator import ParticleGenerator, uniform_generator
from membranesim.core.particles import Particle

logger = logging.getLogger(__name__)

# Cross products shorter than this are treated as parallel spacing vectors
GEOMETRY_TOLERANCE = 1e-12


def _vector(value) -> np.ndarray:
    return np.array(value, dtype=np.float64)


@dataclass
class MembraneConfig:
    """Geometry and boundary policy of a rectangular membrane."""

    width: int  # Number of columns
    height: int  # Number of rows
    anchor: np.ndarray = field(default_factory=lambda: np.zeros(3))  # Top-left particle
    col_spacing: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))
    row_spacing: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    fixed_edges: bool = False  # Couple edges to the anchor plane

    def __post_init__(self):
        self.anchor = np.zeros(3) if self.anchor is None else _vector(self.anchor)
        self.col_spacing = _vector(self.col_spacing)
        self.row_spacing = _vector(self.row_spacing)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (width, height) grid dimensions."""
        return self.width, self.height

    def validate(self) -> None:
        """Raise InvalidDimensions unless both dimensions are positive integers."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimensions(f"{name} must be positive, got {value}")


def compute_dof(col_spacing: np.ndarray, row_spacing: np.ndarray) -> np.ndarray:
    """
    Unit normal of the lattice plane: normalize(col_spacing × row_spacing).

    Raises:
        InvalidGeometry: if either vector is not 3-component, or the
            vectors are zero or parallel.
    """
    a = _vector(col_spacing)
    b = _vector(row_spacing)
    if a.shape != (3,) or b.shape != (3,):
        raise InvalidGeometry(
            f"spacing vectors must have 3 components, got shapes {a.shape} and {b.shape}"
        )

    normal = np.cross(a, b)
    norm = np.linalg.norm(normal)
    if not np.isfinite(norm) or norm < GEOMETRY_TOLERANCE:
        raise InvalidGeometry(
            f"spacing vectors {a.tolist()} and {b.tolist()} are degenerate or parallel"
        )
    return normal / norm


class Lattice:
    """
    The membrane's particles and their dense state buffers.

    IMPORTANT: `positions` and `forces` alias the particles' own vectors.
    Mutating a particle's position through its `position` property is
    immediately visible here, and vice versa.
    """

    def __init__(self, config: MembraneConfig, generator: ParticleGenerator | None = None):
        config.validate()
        self.config = config
        self.width, self.height = config.width, config.height
        self.dof = compute_dof(config.col_spacing, config.row_spacing)
        self.generator = generator if generator is not None else uniform_generator()

        self._positions = np.zeros((self.width, self.height, 3), dtype=np.float64)
        self._forces = np.zeros((self.width, self.height, 3), dtype=np.float64)
        self._movable = np.ones((self.width, self.height), dtype=bool)
        self._particles: list[list[Particle]] = []

        self._make_particles()
        logger.debug(
            "built %dx%d lattice, dof=%s, %d fixed cells",
            self.width, self.height, self.dof.tolist(), int((~self._movable).sum()),
        )

    def _make_particles(self):
        """Populate the grid column by column, walking a cursor from the anchor."""
        column_cursor = self.config.anchor.copy()

        for i in range(self.width):
            cursor = column_cursor.copy()
            column = []

            for j in range(self.height):
                particle = self.generator(i, j, cursor, self.dof)
                particle.bind(self._positions[i, j], self._forces[i, j])
                self._movable[i, j] = not particle.fixed
                column.append(particle)
                cursor = cursor + self.config.row_spacing

            self._particles.append(column)
            column_cursor = column_cursor + self.config.col_spacing

    @property
    def shape(self) -> tuple[int, int]:
        """Return (width, height) grid dimensions."""
        return self.width, self.height

    @property
    def num_particles(self) -> int:
        return self.width * self.height

    @property
    def positions(self) -> np.ndarray:
        """Dense (width, height, 3) view of every particle position."""
        return self._positions

    @property
    def forces(self) -> np.ndarray:
        """Dense (width, height, 3) view of accumulated forces."""
        return self._forces

    @property
    def movable(self) -> np.ndarray:
        """(width, height) mask, False where the cell holds a FixedPoint."""
        return self._movable

    def check_cell(self, i: int, j: int):
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"cell ({i}, {j}) outside {self.width}x{self.height} lattice")

    def particle(self, i: int, j: int) -> Particle:
        self.check_cell(i, j)
        return self._particles[i][j]

    def position(self, i: int, j: int) -> np.ndarray:
        """Current position of the particle at (i, j)."""
        self.check_cell(i, j)
        return self._positions[i, j]

    def apply_force(self, i: int, j: int, force: np.ndarray) -> None:
        """Accumulate `force` on the particle at (i, j) for this step."""
        self.check_cell(i, j)
        self._particles[i][j].apply_force(force)

    def apply_forces(self, magnitudes: np.ndarray) -> None:
        """
        Bulk apply_force: add magnitudes[i, j] * dof to every movable cell.

        Equivalent to calling apply_force on each cell with a force along
        dof; fixed cells are masked out.
        """
        self._forces += np.where(self._movable, magnitudes, 0.0)[..., np.newaxis] * self.dof

    def clear_forces(self) -> None:
        """Reset every particle's accumulator to its forcing term."""
        for particle in self.particles():
            particle.clear_force()

    def particles(self) -> Iterator[Particle]:
        """Iterate over particles in construction (column-major) order."""
        for column in self._particles:
            yield from column

    def iter_cells(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (i, j) cell coordinates, column-major."""
        for i in range(self.width):
            for j in range(self.height):
                yield i, j
