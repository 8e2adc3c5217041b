"""Shared engine constants: single source of truth.

Centralises the projection radius, numerical thresholds, and default
property keys used by the engine, the configuration layer, and the
boundary adapters.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

EARTH_MEAN_RADIUS_M: float = 6_371_008.8
"""Default sphere radius for the Mercator plane (IUGG mean Earth radius)."""

LATITUDE_CLAMP_RAD: float = 1e-6
"""Distance (radians) kept between a projected latitude and either pole."""

# ---------------------------------------------------------------------------
# Ring metrics
# ---------------------------------------------------------------------------

DEGENERATE_AREA_EPSILON: float = 1e-6
"""Rings whose |signed area| (projected square metres) falls below this are degenerate."""

MIN_DISTINCT_RING_POINTS: int = 3
"""Fewer distinct vertices than this can never enclose area."""

# ---------------------------------------------------------------------------
# Geographic bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

GEOGRAPHIC_CRS: str = "EPSG:4326"
"""Input and output coordinates are always WGS 84 longitude/latitude."""

# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

DEFAULT_NAME_KEY: str = "name"
"""Property holding the group name when no other key is configured."""

ANONYMOUS_ID_PREFIX: str = "#"
"""Prefix for identifiers synthesised from a feature's input position."""
