"""
Core membrane primitives.

This layer knows NOTHING about time integration, rendering, or presets.
It only knows:
- Particles restricted to one degree of freedom (or fixed in place)
- A lattice that places them and owns their position/force buffers
- The coupling engine: displacement → mean relative displacement → force
- A minimal world the membrane registers into
"""

from membranesim.core.errors import MembraneError, InvalidGeometry, InvalidDimensions
from membranesim.core.particles import Particle, RestrainedParticle, FixedPoint
from membranesim.core.generator import ParticleGenerator, uniform_generator
from membranesim.core.lattice import Lattice, MembraneConfig, compute_dof
from membranesim.core.membrane import (
    RectangularMembrane,
    LinearResponse,
    linear_response,
    neighbor_counts,
    create_membrane,
)
from membranesim.core.world import World, Body, Force, System

__all__ = [
    "MembraneError",
    "InvalidGeometry",
    "InvalidDimensions",
    "Particle",
    "RestrainedParticle",
    "FixedPoint",
    "ParticleGenerator",
    "uniform_generator",
    "Lattice",
    "MembraneConfig",
    "compute_dof",
    "RectangularMembrane",
    "LinearResponse",
    "linear_response",
    "neighbor_counts",
    "create_membrane",
    "World",
    "Body",
    "Force",
    "System",
]
