"""Unit tests for slit experiment presets."""

import numpy as np
import pytest

from membranesim.core import RestrainedParticle, World
from membranesim.experiments import double_slit_experiment, single_slit_experiment, slit_experiment


class TestSingleSlit:
    """Tests for single_slit_experiment."""

    @pytest.fixture(scope="class")
    def membrane(self):
        return single_slit_experiment()

    def test_geometry(self, membrane):
        assert membrane.lattice.shape == (100, 50)
        assert membrane.fixed_edges is True
        assert np.allclose(membrane.dof, [0.0, -1.0, 0.0])
        assert membrane.reference_displacement == 0.0

    def test_spacing(self, membrane):
        assert np.allclose(membrane.lattice.position(3, 2), [0.03, 0.0, 0.02])

    def test_barrier_with_one_hole(self, membrane):
        wall = membrane.lattice.movable[:, 25]
        assert wall.sum() == 1
        assert wall[50]
        assert np.all(membrane.lattice.movable[:, :25])
        assert np.all(membrane.lattice.movable[:, 26:])

    def test_source(self, membrane):
        source = membrane.lattice.particle(50, 0)
        assert isinstance(source, RestrainedParticle)
        assert source.forcing == 5.0
        assert membrane.lattice.particle(49, 0).forcing == 0.0

    def test_response_and_gradient(self, membrane):
        assert membrane.response(0.01) == pytest.approx(-1.0)
        assert membrane.gradient is not None
        assert membrane.gradient.expected_displacement == 0.1


class TestDoubleSlit:
    """Tests for double_slit_experiment."""

    def test_two_holes(self):
        mem = double_slit_experiment()
        wall = mem.lattice.movable[:, 25]
        assert np.flatnonzero(wall).tolist() == [49, 51]


class TestSlitExperiment:
    """Tests for the configurable slit experiment."""

    def test_custom_holes(self):
        mem = slit_experiment(width=20, height=10, holes=(4, 9, 15), source=(10, 0))
        assert np.flatnonzero(mem.lattice.movable[:, 5]).tolist() == [4, 9, 15]

    def test_custom_wall_row(self):
        mem = slit_experiment(width=10, height=10, holes=(5,), source=(5, 0), wall_row=7)
        assert mem.lattice.movable[:, 7].sum() == 1
        assert np.all(mem.lattice.movable[:, 5])

    def test_source_drives_wave_toward_barrier(self):
        mem = slit_experiment(width=11, height=8, holes=(5,), source=(5, 0), strength=100.0)
        world = World()
        world.add(mem)

        dt = 0.01
        for _ in range(50):
            world.accumulate_forces()
            for body in world.bodies:
                if body.fixed:
                    continue
                body.velocity = body.velocity + body.force / body.mass * dt
                body.position = body.position + body.velocity * dt

        mem.update_absolute_displacements()
        displacement = mem.absolute_displacements - mem.reference_displacement
        assert abs(displacement[5, 0]) > 0
        assert abs(displacement[5, 2]) > 0
        # Barrier cells never move
        assert np.all(displacement[:, 4][~mem.lattice.movable[:, 4]] == 0.0)
