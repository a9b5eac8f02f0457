"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def small_config():
    """Configuration for a small 4x5 membrane in the xy-plane (dof = +z)."""
    from membranesim.core import MembraneConfig
    return MembraneConfig(
        width=4,
        height=5,
        col_spacing=(1.0, 0.0, 0.0),
        row_spacing=(0.0, 1.0, 0.0),
        fixed_edges=False,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def lift():
    """Move every particle to a given displacement along dof, keeping its in-plane position."""

    def _lift(membrane, displacements):
        positions = membrane.lattice.positions
        dof = membrane.dof
        in_plane = positions - (positions @ dof)[..., np.newaxis] * dof
        field = np.asarray(displacements, dtype=np.float64)
        positions[...] = in_plane + field[..., np.newaxis] * dof

    return _lift
