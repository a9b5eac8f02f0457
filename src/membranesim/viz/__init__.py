"""
Visualization utilities.

- Two-colour displacement gradients
- Field heatmaps (displacement, stretch, intensity)
"""

from membranesim.viz.gradient import ColorGradient
from membranesim.viz.fields import (
    CMAP_MEMBRANE,
    plot_field,
    plot_displacement,
    plot_relative_displacement,
    plot_intensity,
    plot_gradient_image,
    save_figure,
)

__all__ = [
    "ColorGradient",
    "CMAP_MEMBRANE",
    "plot_field",
    "plot_displacement",
    "plot_relative_displacement",
    "plot_intensity",
    "plot_gradient_image",
    "save_figure",
]
