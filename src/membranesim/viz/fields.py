"""
2D visualization of membrane fields.

Provides heatmaps for:
- displacement along dof (relative to the anchor plane)
- mean relative displacement (local stretch)
- time-averaged intensity (diffraction patterns)

Fields are stored [i, j] (column, row); they are transposed for display
so that columns run along the horizontal axis.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from membranesim.core.membrane import RectangularMembrane
    from membranesim.analysis.intensity import IntensityAccumulator


def _create_membrane_cmap():
    """Diverging colormap: red (below) → near black (rest) → green (above)."""
    from matplotlib.colors import LinearSegmentedColormap

    colors = [
        (0.85, 0.10, 0.10),  # Red, below the membrane
        (0.45, 0.05, 0.05),
        (0.05, 0.05, 0.05),  # Rest
        (0.05, 0.45, 0.10),
        (0.10, 0.85, 0.20),  # Green, above the membrane
    ]
    return LinearSegmentedColormap.from_list("membrane", colors)


CMAP_MEMBRANE = _create_membrane_cmap()
CMAP_INTENSITY = "inferno"


def plot_field(
    field: np.ndarray,
    title: str = "",
    cmap=None,
    vmin: float | None = None,
    vmax: float | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Plot a (width, height) field as a heatmap.

    Args:
        field: 2D array indexed [i, j]
        title: Plot title
        cmap: Colormap name
        vmin, vmax: Color scale limits (auto if None)
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_MEMBRANE

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        np.asarray(field).T,
        origin="upper",
        cmap=cmap,
        vmin=vmin,
        vmax=vmax,
        aspect="equal",
    )

    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("column i")
    ax.set_ylabel("row j")

    return fig, ax


def plot_displacement(
    membrane: "RectangularMembrane",
    title: str = "Displacement along dof",
    limit: float | None = None,
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """
    Plot current displacement relative to the anchor plane.

    The colour scale is symmetric: ±limit, or ±max|displacement| if None.
    """
    displacement = membrane.lattice.positions @ membrane.dof - membrane.reference_displacement
    if limit is None:
        limit = float(np.abs(displacement).max()) or 1.0
    return plot_field(
        displacement,
        title=title,
        cmap=CMAP_MEMBRANE,
        vmin=-limit,
        vmax=limit,
        ax=ax,
        **kwargs,
    )


def plot_relative_displacement(
    membrane: "RectangularMembrane",
    title: str = "Mean relative displacement",
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Plot the mean relative displacement field from the last step."""
    return plot_field(membrane.mean_relative_displacements, title=title, ax=ax, **kwargs)


def plot_intensity(
    accumulator: "IntensityAccumulator",
    title: str = "Time-averaged intensity",
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Plot a diffraction intensity pattern."""
    return plot_field(accumulator.intensity, title=title, cmap=CMAP_INTENSITY, vmin=0, ax=ax, **kwargs)


def plot_gradient_image(
    membrane: "RectangularMembrane",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """Show the membrane coloured by its attached ColorGradient."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(membrane.displacement_colors(), origin="upper", aspect="equal")
    ax.set_title(title)
    ax.set_axis_off()
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
