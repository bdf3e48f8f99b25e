"""Human-readable distances for route statistics and marker labels."""

from route_planner.constants import DisplayConfig


def format_distance(meters: float) -> str:
    """Format a route distance for display.

    Examples:
        format_distance(123.4)    # "123 m"
        format_distance(1234.0)   # "1.23 km"
        format_distance(12345.0)  # "12.3 km"
    """
    if meters < DisplayConfig.KM_DISPLAY_THRESHOLD_M:
        return f"{meters:.0f} m"
    km = meters / 1000
    if km < DisplayConfig.KM_TWO_DECIMALS_BELOW:
        return f"{km:.2f} km"
    return f"{km:.1f} km"


def format_marker_label(distance_km: float) -> str:
    """Label for a distance marker: "500m" below 1 km, "2" or "2.5" above."""
    if distance_km < 1.0:
        return f"{round(distance_km * 1000)}m"
    if distance_km % 1 == 0:
        return str(int(distance_km))
    return f"{distance_km:g}"
