"""Unit tests for ColorGradient and membrane colouring."""

import numpy as np
import pytest

from membranesim.core import MembraneConfig, RectangularMembrane
from membranesim.viz.gradient import ColorGradient


class TestColorGradient:
    """Tests for ColorGradient."""

    def test_endpoints(self):
        g = ColorGradient(reference=0.0, below="red", above="green", expected_displacement=0.1)
        assert g.color_for(-0.1) == pytest.approx((1.0, 0.0, 0.0))
        assert g.color_for(0.1) == pytest.approx((0.0, 128 / 255, 0.0))

    def test_midpoint_at_reference(self):
        g = ColorGradient(reference=2.0, below="black", above="white", expected_displacement=1.0)
        assert g.color_for(2.0) == pytest.approx((0.5, 0.5, 0.5))

    def test_clamped(self):
        g = ColorGradient(reference=0.0, below="blue", above="red", expected_displacement=0.5)
        assert g.color_for(10.0) == g.color_for(0.5)
        assert g.color_for(-10.0) == g.color_for(-0.5)

    def test_array_shape(self):
        g = ColorGradient(reference=0.0, below="red", above="green", expected_displacement=1.0)
        assert g.colors(np.zeros((4, 3))).shape == (4, 3, 3)

    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError):
            ColorGradient(reference=0.0, below="red", above="green", expected_displacement=0.0)


class TestMembraneColors:
    """Tests for RectangularMembrane.generate_gradient / displacement_colors."""

    def test_requires_gradient(self):
        mem = RectangularMembrane(MembraneConfig(width=3, height=2))
        with pytest.raises(RuntimeError):
            mem.displacement_colors()

    def test_image_layout(self):
        mem = RectangularMembrane(MembraneConfig(width=3, height=2))
        mem.generate_gradient("black", "white", 1.0)
        mem.lattice.particle(2, 0).position = [2.0, 0.0, 1.0]

        image = mem.displacement_colors()
        assert image.shape == (2, 3, 3)
        assert image[0, 2].tolist() == [1.0, 1.0, 1.0]
        assert image[1, 0].tolist() == [0.5, 0.5, 0.5]
