"""Configuration constants for Route Planner.

All tunable parameters are centralized here. Values are fixed defaults;
there is no runtime configuration API.

Classes:
    GeoConfig: Earth model and coordinate ranges
    DecimationConfig: Point decimation threshold and spacing
    MarkerConfig: Distance marker defaults
    UndoConfig: Undo history settings
    ExportConfig: GPX/GeoJSON export metadata
    DisplayConfig: Route bounds and distance formatting
"""


class GeoConfig:
    """Earth model and valid coordinate ranges."""

    # WGS84 mean radius, spherical approximation
    EARTH_RADIUS_M = 6_371_000

    MIN_LAT = -90.0
    MAX_LAT = 90.0
    MIN_LON = -180.0
    MAX_LON = 180.0


class DecimationConfig:
    """Distance-based point decimation for large imported tracks.

    15 m is below consumer GPS accuracy and route-planning perceptibility.
    Typical dense tracks shrink by 60-80% while turns and endpoints remain.
    """

    # Decimate only when an imported track has more points than this
    POINT_THRESHOLD = 2000

    # Minimum spacing between consecutive kept points (meters)
    MIN_SPACING_M = 15.0

    # Inputs this small are returned unchanged
    MIN_POINTS_TO_DECIMATE = 4


class MarkerConfig:
    """Distance marker generation."""

    # Original app default: 1 km markers
    DEFAULT_INTERVAL_M = 1000.0

    # Targets closer than this to the route end are not placed (float noise)
    END_TOLERANCE_M = 1e-3


class UndoConfig:
    """Undo history settings."""

    MAX_UNDO_STACK_SIZE = 50


class ExportConfig:
    """Metadata written into exported files."""

    CREATOR = "Route Planner"
    DEFAULT_ROUTE_NAME = "Gravel route"
    GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
    GPX_VERSION = "1.1"

    # Decimal places for exported coordinates (~1 cm)
    COORDINATE_PRECISION = 7


class DisplayConfig:
    """Route bounds padding and human-readable distances."""

    BOUNDS_PADDING_RATIO = 0.1

    # Below this, distances are shown in meters
    KM_DISPLAY_THRESHOLD_M = 950.0
    # Below this many km, two decimals are shown
    KM_TWO_DECIMALS_BELOW = 10.0


assert DecimationConfig.MIN_SPACING_M > 0, "Decimation spacing must be positive"
assert DecimationConfig.POINT_THRESHOLD >= DecimationConfig.MIN_POINTS_TO_DECIMATE
assert MarkerConfig.DEFAULT_INTERVAL_M > 0, "Default marker interval must be positive"
assert UndoConfig.MAX_UNDO_STACK_SIZE > 0
