"""Central error types used across the route planner.

All engine errors are recoverable: they are raised before any state is
written, so the caller's route is unchanged when one is caught.
"""

from __future__ import annotations


class RoutePlannerError(Exception):
    """Base error for route planner failures."""


class InvalidIndexError(RoutePlannerError, IndexError):
    """Raised when an index-based edit targets a position outside the route."""

    def __init__(self, index: int, valid_range: tuple[int, int], operation: str) -> None:
        self.index = index
        self.valid_range = valid_range
        self.operation = operation
        low, high = valid_range
        if high < low:
            detail = "route has no valid positions"
        else:
            detail = f"valid range is [{low}, {high}]"
        super().__init__(f"{operation}: index {index} out of range, {detail}")


class InvalidIntervalError(RoutePlannerError, ValueError):
    """Raised when distance markers are requested with a non-positive interval."""

    def __init__(self, interval_m: float) -> None:
        self.interval_m = interval_m
        super().__init__(f"Marker interval must be a positive number of meters, got {interval_m!r}")


class RouteImportError(RoutePlannerError, ValueError):
    """Raised when an imported GPX/GeoJSON document is malformed."""


class RouteExportError(RoutePlannerError, ValueError):
    """Raised when a route cannot be exported (e.g. it has no points)."""


__all__ = [
    "RoutePlannerError",
    "InvalidIndexError",
    "InvalidIntervalError",
    "RouteImportError",
    "RouteExportError",
]
