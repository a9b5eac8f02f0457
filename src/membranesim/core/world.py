"""
World: the registry a membrane plugs into.

A membrane plays two roles toward its world:
- System: places its particles (and itself) into the world once
- Force: contributes forces to those particles once per tick

The World here only does registration and force accumulation. Advancing
positions and velocities from the accumulated forces belongs to whatever
integrator drives the world.
"""

from __future__ import annotations
from typing import Iterable, Protocol

import numpy as np


class Body(Protocol):
    """Anything with a position that can receive forces."""

    mass: float

    @property
    def position(self) -> np.ndarray:
        ...

    def apply_force(self, force: np.ndarray) -> None:
        ...

    def clear_force(self) -> None:
        ...


class Force(Protocol):
    """Something that applies forces to bodies each tick."""

    def apply_to(self, world: "World") -> None:
        ...


class System(Protocol):
    """Something that knows how to place itself into a world."""

    def add_to(self, world: "World") -> None:
        ...


class World:
    """Bodies plus the forces acting on them."""

    def __init__(self):
        self.bodies: list[Body] = []
        self.forces: list[Force] = []

    def add_body(self, body: Body) -> None:
        self.bodies.append(body)

    def add_bodies(self, bodies: Iterable[Body]) -> None:
        self.bodies.extend(bodies)

    def add_force(self, force: Force) -> None:
        self.forces.append(force)

    def add(self, system: System) -> None:
        """Let a system register its own bodies and forces."""
        system.add_to(self)

    def accumulate_forces(self) -> None:
        """
        Start a tick: clear every body's accumulator, then let every
        registered force contribute.
        """
        for body in self.bodies:
            body.clear_force()
        for force in self.forces:
            force.apply_to(self)
