"""
Per-cell particle generation.

A ParticleGenerator decides, for each lattice cell (i, j), what particle
lives there. Every field is a function of the cell coordinate, so presets
can place a wave source at one cell and a barrier along a row.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

import numpy as np

from membranesim.core.particles import FixedPoint, Particle, RestrainedParticle

CellFn = Callable[[int, int], float]


def _zero(i: int, j: int) -> float:
    return 0.0


@dataclass
class ParticleGenerator:
    """
    Cell → particle factory.

    Attributes:
        mass: particle mass at (i, j)
        velocity: initial speed along dof
        forcing: constant external force magnitude along dof
        displacement: initial offset along dof from the lattice cursor
        fixed: optional predicate; True places a FixedPoint instead
    """

    mass: CellFn
    velocity: CellFn = _zero
    forcing: CellFn = _zero
    displacement: CellFn = _zero
    fixed: Callable[[int, int], bool] | None = None

    def particle_position(self, i: int, j: int, cursor: np.ndarray, dof: np.ndarray) -> np.ndarray:
        """Cursor position shifted by the cell's initial displacement."""
        return cursor + self.displacement(i, j) * dof

    def __call__(self, i: int, j: int, cursor: np.ndarray, dof: np.ndarray) -> Particle:
        position = self.particle_position(i, j, cursor, dof)

        if self.fixed is not None and self.fixed(i, j):
            return FixedPoint(self.mass(i, j), position, self.velocity(i, j) * dof)

        return RestrainedParticle(
            mass=self.mass(i, j),
            position=position,
            dof=dof,
            velocity=self.velocity(i, j),
            forcing=self.forcing(i, j),
        )


def uniform_generator(mass: float = 1.0) -> ParticleGenerator:
    """Every cell gets a resting particle of the same mass."""
    return ParticleGenerator(mass=lambda i, j: mass)
