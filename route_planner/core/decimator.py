"""Distance-based point decimation for large imported tracks.

Algorithm (not Douglas-Peucker):
1. Keep the first point.
2. Walk the interior points in order; keep a point only if its geodesic
   distance from the last kept point is at least MIN_SPACING_M (15 m).
3. Keep the last point, appending it unless the last kept point already
   equals it.

Linear time, one haversine per input point. Shape fidelity is bounded by
the spacing: strong curves may keep redundant points and bends shorter
than 15 m may be dropped. Endpoints are always preserved.

Callers decide when to decimate (see Decimator.needs_decimation); decimate()
itself always decimates so it can be tested on small inputs.
"""

import logging
from typing import Sequence

from route_planner.constants import DecimationConfig
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


class Decimator:
    """Reduces dense point lists under a minimum-spacing constraint.

    Holds no state; safe to call from a worker thread.
    """

    @staticmethod
    def needs_decimation(points: Sequence[Coordinate]) -> bool:
        """True if a track is large enough that callers should decimate it."""
        return len(points) > DecimationConfig.POINT_THRESHOLD

    @staticmethod
    def decimate(points: Sequence[Coordinate]) -> list[Coordinate]:
        """Drop points closer than MIN_SPACING_M to the previously kept point.

        Args:
            points: Ordered route points

        Returns:
            New list with first and last point preserved. Inputs with 3 or
            fewer points are returned unchanged.
        """
        if len(points) < DecimationConfig.MIN_POINTS_TO_DECIMATE:
            return list(points)

        min_spacing = DecimationConfig.MIN_SPACING_M
        decimated = [points[0]]

        for point in points[1:-1]:
            if decimated[-1].distance_to(other=point) >= min_spacing:
                decimated.append(point)

        # Always preserve the end point
        if decimated[-1] != points[-1]:
            decimated.append(points[-1])

        logger.debug(f"Decimated {len(points)} points to {len(decimated)} (min spacing {min_spacing:.0f}m)")
        return decimated
