"""Distance marker generation along a route.

Markers sit at every multiple of the interval along the cumulative route
length, including across the closing segment of a loop. Each marker is a
linear interpolation between the endpoints of the segment the target
distance falls in:

    ratio = (target - segment_start) / segment_length

No marker is placed at distance 0 or at the route end. Markers are not kept
in sync automatically; RouteModel clears them on every structural change and
callers regenerate them explicitly.
"""

import logging
import math
from typing import Sequence

import numpy as np

from route_planner.constants import MarkerConfig
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.errors import InvalidIntervalError
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


class MarkerGenerator:
    """Interpolates evenly spaced distance markers along a route."""

    @staticmethod
    def validate_interval(interval_m: float) -> float:
        """Return interval_m as float.

        Raises:
            InvalidIntervalError: If interval_m is not a positive number.
        """
        try:
            value = float(interval_m)
        except (TypeError, ValueError) as exc:
            raise InvalidIntervalError(interval_m=interval_m) from exc
        if not math.isfinite(value) or value <= 0:
            raise InvalidIntervalError(interval_m=interval_m)
        return value

    @staticmethod
    def generate(
        points: Sequence[Coordinate],
        loop_closed: bool,
        interval_m: float,
    ) -> list[Coordinate]:
        """Generate marker positions every interval_m meters.

        Args:
            points: Route points in order
            loop_closed: Include the closing segment (only with >= 3 points)
            interval_m: Marker spacing in meters

        Returns:
            Marker coordinates in route order (empty for < 2 points).

        Raises:
            InvalidIntervalError: If interval_m is not positive.
        """
        interval = MarkerGenerator.validate_interval(interval_m=interval_m)
        if len(points) < 2:
            return []

        path = list(points)
        if loop_closed and len(points) >= 3:
            path.append(points[0])

        segment_lengths = GeoCalculator.haversine_distances_m(
            lats=[p.lat for p in path],
            lons=[p.lon for p in path],
        )
        # cumulative[i] = distance from start to path[i]
        cumulative = np.concatenate(([0.0], np.cumsum(segment_lengths)))
        total = float(cumulative[-1])

        marker_count = int(math.floor((total - MarkerConfig.END_TOLERANCE_M) / interval))
        if marker_count <= 0:
            return []

        targets = interval * np.arange(1, marker_count + 1, dtype=float)
        # Last segment whose start is at or before the target; zero-length
        # segments are skipped because their start equals the next start
        segment_idx = np.searchsorted(cumulative, targets, side="right") - 1

        markers = []
        for target, idx in zip(targets.tolist(), segment_idx.tolist()):
            ratio = (target - cumulative[idx]) / segment_lengths[idx]
            markers.append(path[idx].interpolate(other=path[idx + 1], ratio=float(ratio)))

        logger.debug(f"Generated {len(markers)} markers every {interval:.0f}m over {total:.0f}m")
        return markers
