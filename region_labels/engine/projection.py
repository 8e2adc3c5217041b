"""Spherical Mercator projection for planar area/centroid math.

Forward: ``x = R·lon``, ``y = R·ln(tan(π/4 + lat/2))`` (radians);
inverse: ``lon = x/R``, ``lat = 2·atan(exp(y/R)) − π/2``. Both directions
run through pyproj on a sphere of radius ``R``; latitudes are clamped away
from the poles before the forward step so results are always finite.

Anchors are only ever round-tripped through the same ``Projector``, so the
radius affects scale but never where an anchor lands.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from region_labels.core.constants import EARTH_MEAN_RADIUS_M, LATITUDE_CLAMP_RAD


class Projector:
    """Forward/inverse transform between lon/lat degrees and Mercator metres.

    Args:
        sphere_radius_m: Sphere radius ``R`` in metres.
        latitude_clamp_rad: Latitudes are clamped to
            ``[-π/2 + clamp, π/2 - clamp]`` before projecting.
    """

    def __init__(
        self,
        sphere_radius_m: float = EARTH_MEAN_RADIUS_M,
        *,
        latitude_clamp_rad: float = LATITUDE_CLAMP_RAD,
    ) -> None:
        from pyproj import CRS, Transformer

        self.sphere_radius_m = sphere_radius_m
        self.max_latitude = math.degrees(math.pi / 2 - latitude_clamp_rad)

        geographic = CRS.from_proj4(f"+proj=longlat +R={sphere_radius_m!r} +no_defs")
        planar = CRS.from_proj4(f"+proj=merc +R={sphere_radius_m!r} +units=m +no_defs")
        self._to_plane = Transformer.from_crs(geographic, planar, always_xy=True)
        self._to_geographic = Transformer.from_crs(planar, geographic, always_xy=True)

    def __repr__(self) -> str:
        return f"Projector(sphere_radius_m={self.sphere_radius_m!r})"

    def clamp_latitude(self, lat: float) -> float:
        return max(-self.max_latitude, min(self.max_latitude, lat))

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Project ``(lon, lat)`` degrees to ``(x, y)`` metres."""
        x, y = self._to_plane.transform(lon, self.clamp_latitude(lat))
        return (x, y)

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Unproject ``(x, y)`` metres to ``(lon, lat)`` degrees."""
        lon, lat = self._to_geographic.transform(x, y)
        return (lon, lat)

    def forward_ring(self, ring: Sequence[tuple[float, float]]) -> list[tuple[float, float]]:
        """Project a whole ring in one pyproj call."""
        if not ring:
            return []
        lons = [c[0] for c in ring]
        lats = [self.clamp_latitude(c[1]) for c in ring]
        xs, ys = self._to_plane.transform(lons, lats)
        return list(zip(xs, ys, strict=True))
