"""Distance marker generation.

Markers are placed at every multiple of the interval along the cumulative
path length, across the closing segment when the route is a loop.
"""

from route_planner.generators.marker_generator import MarkerGenerator

__all__ = [
    "MarkerGenerator",
]
