"""
Particle variants that populate a membrane lattice.

Two variants share one capability set:
- RestrainedParticle: moves along the dof axis only, accumulates forces
- FixedPoint: immovable (e.g. a barrier cell), ignores forces

Both expose `position` and `force` as 3-vectors. Once a lattice adopts a
particle, those vectors become views into the lattice's dense buffers, so
writing `particle.position = ...` updates the buffer in place.
"""

from __future__ import annotations
from typing import Protocol

import numpy as np


class Particle(Protocol):
    """What the lattice and the world need from a cell's particle."""

    fixed: bool
    mass: float

    @property
    def position(self) -> np.ndarray:
        ...

    @property
    def force(self) -> np.ndarray:
        ...

    def apply_force(self, force: np.ndarray) -> None:
        ...

    def clear_force(self) -> None:
        ...

    def bind(self, position_slot: np.ndarray, force_slot: np.ndarray) -> None:
        ...


class RestrainedParticle:
    """
    A point mass restricted to one degree of freedom.

    Applied forces are projected onto `dof` before accumulation; any
    component perpendicular to the axis is discarded by the restraint.
    `forcing` is a constant external drive along dof (e.g. a wave source)
    that is restored each time the force accumulator is cleared.
    """

    fixed = False

    def __init__(
        self,
        mass: float,
        position: np.ndarray,
        dof: np.ndarray,
        velocity: float = 0.0,
        forcing: float = 0.0,
    ):
        self.mass = float(mass)
        self.dof = np.asarray(dof, dtype=np.float64)
        self._position = np.array(position, dtype=np.float64)
        self.velocity = float(velocity) * self.dof
        self.forcing = float(forcing)
        self._force = self.forcing * self.dof

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: np.ndarray):
        self._position[...] = value

    @property
    def force(self) -> np.ndarray:
        """Force accumulated for the current step (includes forcing)."""
        return self._force

    @property
    def displacement(self) -> float:
        """Signed position along the dof axis."""
        return float(self._position @ self.dof)

    def apply_force(self, force: np.ndarray) -> None:
        self._force += np.dot(force, self.dof) * self.dof

    def clear_force(self) -> None:
        self._force[...] = self.forcing * self.dof

    def bind(self, position_slot: np.ndarray, force_slot: np.ndarray) -> None:
        """Move position and force storage into the given buffer views."""
        position_slot[...] = self._position
        force_slot[...] = self._force
        self._position = position_slot
        self._force = force_slot

    def __repr__(self) -> str:
        return (
            f"RestrainedParticle(mass={self.mass}, "
            f"position={self._position.tolist()}, forcing={self.forcing})"
        )


class FixedPoint:
    """An immovable particle. Forces applied to it are dropped."""

    fixed = True

    def __init__(self, mass: float, position: np.ndarray, velocity: np.ndarray | None = None):
        self.mass = float(mass)
        self._position = np.array(position, dtype=np.float64)
        self.velocity = np.zeros(3) if velocity is None else np.array(velocity, dtype=np.float64)
        self._force = np.zeros(3)

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: np.ndarray):
        self._position[...] = value

    @property
    def force(self) -> np.ndarray:
        return self._force

    def apply_force(self, force: np.ndarray) -> None:
        pass

    def clear_force(self) -> None:
        pass

    def bind(self, position_slot: np.ndarray, force_slot: np.ndarray) -> None:
        # The force slot is left at zero; bulk force application masks it out.
        position_slot[...] = self._position
        self._position = position_slot

    def __repr__(self) -> str:
        return f"FixedPoint(mass={self.mass}, position={self._position.tolist()})"
