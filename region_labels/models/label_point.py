"""Data model for an emitted label anchor.

A RepresentativePoint is the engine's output for one group: the lon/lat
of the centroid of the group's largest polygon part, the group name, and
the property map of the feature that owned that part.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shapely.geometry import Point

    from region_labels.models.contracts import LabelPointPayload


@dataclass(frozen=True, slots=True)
class RepresentativePoint:
    """One label anchor per group.

    Attributes:
        name: Resolved group name (the source identifier for unnamed features).
        lon: Anchor longitude in degrees.
        lat: Anchor latitude in degrees.
        properties: Winning feature's properties with the group name written
            under the configured name key.
        area_m2: Projected area of the winning part (Mercator square metres).
        source_feature_id: Identifier of the feature that owned the winning part.
    """

    name: str
    lon: float
    lat: float
    properties: dict[str, Any] = field(default_factory=dict)
    area_m2: float = 0.0
    source_feature_id: str = ""

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.lon, self.lat)

    @property
    def geometry(self) -> Point:
        """The anchor as a shapely ``Point``."""
        from shapely.geometry import Point

        return Point(self.lon, self.lat)

    def to_geojson(self) -> LabelPointPayload:
        """Serialise to a GeoJSON point ``Feature``."""
        from shapely.geometry import mapping

        geometry = mapping(self.geometry)
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": list(geometry["coordinates"])},
            "properties": dict(self.properties),
        }
