"""
RectangularMembrane: the coupling engine.

Each particle is restricted to the dof axis and feels a correcting force
that is a function of its mean displacement relative to its neighbours.

Per step:
1. absolute[i, j] = position(i, j) · dof
2. relative[i, j] = mean over neighbours of (absolute[i, j] - neighbour)
   - with fixed edges, the anchor plane counts as an extra neighbour on
     every boundary a cell touches, and every cell averages over 4
   - with free edges, every cell averages over its real neighbours
3. force(i, j) = response(relative[i, j]) * dof

The response is typically negative-sloped (restoring), but nothing here
enforces a sign.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING
import logging

import numpy as np

from membranesim.core.generator import ParticleGenerator, uniform_generator
from membranesim.core.lattice import Lattice, MembraneConfig

if TYPE_CHECKING:
    from membranesim.core.world import World
    from membranesim.viz.gradient import ColorGradient

logger = logging.getLogger(__name__)

Response = Callable[[float], float]


@dataclass(frozen=True)
class LinearResponse:
    """Hooke-like response: force = -strength * d. Works on arrays too."""

    strength: float
    vectorized = True

    def __call__(self, displacement):
        return -self.strength * displacement


def linear_response(strength: float) -> LinearResponse:
    """Restoring linear response with spring constant `strength`."""
    return LinearResponse(strength=strength)


def _array_response(response: Response) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a scalar response to whole fields."""
    if getattr(response, "vectorized", False):
        return response
    return np.vectorize(response, otypes=[np.float64])


def neighbor_counts(width: int, height: int) -> np.ndarray:
    """Number of in-grid von Neumann neighbours of every cell, as (width, height)."""
    i = np.arange(width)[:, np.newaxis]
    j = np.arange(height)[np.newaxis, :]
    return (
        (i > 0).astype(np.int64)
        + (i < width - 1)
        + (j > 0)
        + (j < height - 1)
    )


class RectangularMembrane:
    """
    A rectangular membrane: a particle lattice plus the force it exerts
    on itself.

    The two displacement fields are allocated once and overwritten every
    step. They are exposed read-only for analysis and visualization.
    """

    def __init__(
        self,
        config: MembraneConfig,
        generator: ParticleGenerator | None = None,
        response: Response | None = None,
    ):
        """
        Create a membrane.

        Args:
            config: Grid size, anchor, spacing vectors and boundary mode
            generator: Per-cell particle factory (uniform unit mass if None)
            response: Maps mean relative displacement (m) to force (N);
                      linear with strength 1 if None

        Raises:
            InvalidDimensions: width or height is not positive
            InvalidGeometry: spacing vectors are degenerate
        """
        self.config = config
        self.lattice = Lattice(config, generator)
        self.width, self.height = self.lattice.shape
        self.dof = self.lattice.dof

        self.response = response if response is not None else linear_response(1.0)
        self._field_response = _array_response(self.response)

        # Only used with fixed edges
        self.reference_displacement = float(config.anchor @ self.dof)

        self._absolute = np.zeros((self.width, self.height), dtype=np.float64)
        self._relative = np.zeros((self.width, self.height), dtype=np.float64)
        self._free_counts = np.maximum(neighbor_counts(self.width, self.height), 1)

        self.gradient: ColorGradient | None = None
        self._fixed_edges = bool(config.fixed_edges)
        logger.debug(
            "membrane %dx%d, fixed_edges=%s, reference=%g",
            self.width, self.height, self._fixed_edges, self.reference_displacement,
        )

    # ═══════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ═══════════════════════════════════════════════════════════════

    @property
    def fixed_edges(self) -> bool:
        """Whether edges are coupled to the anchor plane."""
        return self._fixed_edges

    @fixed_edges.setter
    def fixed_edges(self, value: bool):
        self._fixed_edges = bool(value)
        logger.debug("fixed_edges set to %s", self._fixed_edges)

    def set_fixed_edges(self, value: bool) -> None:
        self.fixed_edges = value

    @property
    def num_particles(self) -> int:
        return self.lattice.num_particles

    @property
    def absolute_displacements(self) -> np.ndarray:
        """Last computed absolute displacement field (read-only view)."""
        view = self._absolute.view()
        view.flags.writeable = False
        return view

    @property
    def mean_relative_displacements(self) -> np.ndarray:
        """Last computed mean relative displacement field (read-only view)."""
        view = self._relative.view()
        view.flags.writeable = False
        return view

    # ═══════════════════════════════════════════════════════════════
    # WORLD INTERFACE
    # ═══════════════════════════════════════════════════════════════

    def add_to(self, world: "World") -> None:
        """Register every particle, then this membrane as a force."""
        world.add_bodies(self.lattice.particles())
        world.add_force(self)

    def apply_to(self, world: "World | None" = None) -> None:
        """Compute this step's coupling forces and apply them to the particles."""
        self.update_absolute_displacements()
        self.update_mean_relative_displacements()
        self.lattice.apply_forces(self.forces())

    # ═══════════════════════════════════════════════════════════════
    # COUPLING
    # ═══════════════════════════════════════════════════════════════

    def update_absolute_displacements(self) -> np.ndarray:
        """Project every particle position onto dof."""
        self._absolute[...] = self.lattice.positions @ self.dof
        return self._absolute

    def accumulate_relative_displacements(self) -> np.ndarray:
        """
        Total (unnormalized) relative displacement of every cell.

        Each adjacent pair contributes d = a[right] - a[left] to the right
        cell and -d to the left cell, along both grid axes. With fixed
        edges, boundary cells also add (a - reference) once per boundary
        axis they lie on.
        """
        a = self._absolute
        rel = self._relative
        rel.fill(0.0)

        d = a[1:, :] - a[:-1, :]
        rel[1:, :] += d
        rel[:-1, :] -= d

        d = a[:, 1:] - a[:, :-1]
        rel[:, 1:] += d
        rel[:, :-1] -= d

        if self._fixed_edges:
            ref = self.reference_displacement
            rel[0, :] += a[0, :] - ref
            if self.width > 1:
                rel[-1, :] += a[-1, :] - ref
            rel[:, 0] += a[:, 0] - ref
            if self.height > 1:
                rel[:, -1] += a[:, -1] - ref

        return rel

    def update_mean_relative_displacements(self) -> np.ndarray:
        """Accumulate relative displacements and average over neighbours."""
        rel = self.accumulate_relative_displacements()
        if self._fixed_edges:
            rel /= 4
        else:
            rel /= self._free_counts
        return rel

    def forces(self) -> np.ndarray:
        """Force magnitude along dof for every cell, from the current field."""
        return np.asarray(self._field_response(self._relative), dtype=np.float64)

    def force_on(self, i: int, j: int) -> float:
        """Force magnitude along dof on particle (i, j) from the current field."""
        self.lattice.check_cell(i, j)
        return float(self.response(self._relative[i, j]))

    # ═══════════════════════════════════════════════════════════════
    # DISPLAY
    # ═══════════════════════════════════════════════════════════════

    def generate_gradient(self, below, above, expected_displacement: float) -> "ColorGradient":
        """
        Attach a colour gradient for displaying displacement.

        Args:
            below: matplotlib colour for cells "beneath" the membrane
            above: matplotlib colour for cells "above" the membrane
            expected_displacement: displacement at which either colour
                is fully reached
        """
        from membranesim.viz.gradient import ColorGradient

        self.gradient = ColorGradient(
            reference=self.reference_displacement,
            below=below,
            above=above,
            expected_displacement=expected_displacement,
        )
        return self.gradient

    def displacement_colors(self) -> np.ndarray:
        """
        RGB image of the current positions, shape (height, width, 3).

        Requires generate_gradient() to have been called.
        """
        if self.gradient is None:
            raise RuntimeError("no gradient; call generate_gradient() first")
        absolute = self.lattice.positions @ self.dof
        return self.gradient.colors(absolute.T)


def create_membrane(
    width: int,
    height: int,
    anchor=None,
    col_spacing=(1.0, 0.0, 0.0),
    row_spacing=(0.0, 1.0, 0.0),
    particle_mass: float = 1.0,
    strength: float = 1.0,
    fixed_edges: bool = False,
) -> RectangularMembrane:
    """
    Factory for a uniform membrane with a linear restoring response.

    Args:
        width, height: Number of columns and rows
        anchor: Position of the top-left particle (origin if None)
        col_spacing, row_spacing: Vectors between columns and between rows
        particle_mass: Mass of every particle
        strength: Spring constant k of the response -k * d
        fixed_edges: Couple the edges to the anchor plane
    """
    config = MembraneConfig(
        width=width,
        height=height,
        anchor=anchor,
        col_spacing=col_spacing,
        row_spacing=row_spacing,
        fixed_edges=fixed_edges,
    )
    return RectangularMembrane(
        config,
        generator=uniform_generator(particle_mass),
        response=linear_response(strength),
    )
