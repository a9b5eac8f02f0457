"""
membranesim: discretized elastic membrane simulator

A rectangular lattice of point particles, each restricted to one shared
axis, coupled to its four grid neighbours by a restoring force derived
from local relative displacement. Good for watching waves diffract.

Core concepts:
- Positions project onto the dof axis → absolute displacement
- Neighbour differences → mean relative displacement (stretch)
- Stretch → force through a configurable response function
- Fixed edges couple the boundary to the anchor plane
"""

__version__ = "0.1.0"
