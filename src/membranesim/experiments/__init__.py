"""
Experiment presets: ready-made membranes.

Pre-built scenarios for:
- Single-slit diffraction
- Double-slit interference
"""

from membranesim.experiments.slits import (
    slit_experiment,
    single_slit_experiment,
    double_slit_experiment,
)

__all__ = [
    "slit_experiment",
    "single_slit_experiment",
    "double_slit_experiment",
]
