"""Data model for a polygonal region feature.

A RegionFeature is one input feature of the engine: one or more disjoint
polygon parts (each an outer ring plus optional holes), a property map,
and an identifier. It is built at the boundary from a GeoJSON mapping or a
shapely geometry; anything other than Polygon / MultiPolygon is rejected
there, before any computation.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from region_labels.core.constants import (
    ANONYMOUS_ID_PREFIX,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from region_labels.core.exceptions import ValidationError
from region_labels.models.contracts import RegionFeaturePayload, RegionGeometryPayload

Coordinate = tuple[float, float]
Ring = tuple[Coordinate, ...]

SUPPORTED_GEOMETRY_TYPES = frozenset({"Polygon", "MultiPolygon"})


class GeometryValueError(ValidationError):
    """Raised when a coordinate is malformed or outside WGS 84 bounds."""

    default_stage = "models"
    default_code = "GEOMETRY_VALUE_INVALID"


class UnsupportedGeometryError(ValidationError):
    """Raised when a feature's geometry is not a Polygon or MultiPolygon."""

    default_stage = "models"
    default_code = "GEOMETRY_UNSUPPORTED"


@dataclass(frozen=True, slots=True)
class PolygonPart:
    """One polygon: an outer ring plus zero or more holes.

    Rings may be open or closed (first point repeated last). Holes are kept
    for completeness but do not take part in area/centroid computation.
    """

    exterior: Ring = ()
    holes: tuple[Ring, ...] = ()

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the outer ring."""
        return len(self.exterior)


@dataclass(frozen=True, slots=True)
class RegionFeature:
    """A feature made of one or more disjoint polygon parts.

    Attributes:
        parts: Polygon parts in input order. Empty for null/empty geometry.
        properties: Property map copied from the source feature.
        feature_id: Source identifier, or ``"#<index>"`` when the source has none.
        index: Zero-based position of the feature in its input collection.
    """

    parts: tuple[PolygonPart, ...] = ()
    properties: dict[str, Any] = field(default_factory=dict)
    feature_id: str = ""
    index: int = 0

    @property
    def vertex_count(self) -> int:
        """Total outer-ring vertices across all parts."""
        return sum(part.vertex_count for part in self.parts)

    @property
    def has_holes(self) -> bool:
        """Whether any part carries interior rings."""
        return any(part.holes for part in self.parts)

    @classmethod
    def from_geojson(
        cls,
        data: RegionFeaturePayload | Mapping[str, Any],
        *,
        index: int = 0,
    ) -> RegionFeature:
        """Build a RegionFeature from a GeoJSON ``Feature`` mapping.

        A ``null`` geometry yields a feature with no parts.

        Raises:
            UnsupportedGeometryError: If the geometry type is not Polygon
                or MultiPolygon.
            GeometryValueError: If a coordinate is malformed.
        """
        geometry = data.get("geometry")
        properties = data.get("properties") or {}
        if not isinstance(properties, Mapping):
            msg = f"properties must be an object, got {type(properties).__name__}"
            raise GeometryValueError(msg)

        feature_id = _resolve_feature_id(data.get("id"), index)
        parts = geojson_geometry_parts(geometry, feature_id)
        return cls(parts=parts, properties=dict(properties), feature_id=feature_id, index=index)

    @classmethod
    def from_shapely(
        cls,
        geom: Any,
        properties: Mapping[str, Any] | None = None,
        *,
        feature_id: object = None,
        index: int = 0,
    ) -> RegionFeature:
        """Build a RegionFeature from a shapely ``Polygon`` or ``MultiPolygon``.

        Raises:
            UnsupportedGeometryError: For any other shapely geometry type.
        """
        resolved_id = _resolve_feature_id(feature_id, index)
        geom_type = getattr(geom, "geom_type", type(geom).__name__)
        if geom_type not in SUPPORTED_GEOMETRY_TYPES:
            msg = f"Unsupported geometry type {geom_type} for feature '{resolved_id}'"
            raise UnsupportedGeometryError(msg)

        polygons = [geom] if geom_type == "Polygon" else list(geom.geoms)
        parts: list[PolygonPart] = []
        for poly in polygons:
            if poly.is_empty:
                continue
            exterior = _ring_from_raw(list(poly.exterior.coords), resolved_id)
            holes = tuple(_ring_from_raw(list(r.coords), resolved_id) for r in poly.interiors)
            parts.append(PolygonPart(exterior=exterior, holes=holes))

        return cls(
            parts=tuple(parts),
            properties=dict(properties or {}),
            feature_id=resolved_id,
            index=index,
        )


# ---------------------------------------------------------------------------
# GeoJSON geometry normalization
# ---------------------------------------------------------------------------


def geojson_geometry_parts(
    geometry: RegionGeometryPayload | object,
    feature_id: str = "",
) -> tuple[PolygonPart, ...]:
    """Convert a GeoJSON geometry mapping into polygon parts.

    Raises:
        UnsupportedGeometryError: If the geometry type is not supported.
        GeometryValueError: If the geometry or a coordinate is malformed.
    """
    if geometry is None:
        return ()
    if not isinstance(geometry, Mapping):
        msg = f"geometry must be an object, got {type(geometry).__name__}"
        raise GeometryValueError(msg)

    geom_type = str(geometry.get("type", ""))
    if geom_type not in SUPPORTED_GEOMETRY_TYPES:
        msg = f"Unsupported geometry type {geom_type or '<missing>'} for feature '{feature_id}'"
        raise UnsupportedGeometryError(msg)

    coordinates = geometry.get("coordinates") or []
    if not isinstance(coordinates, list | tuple):
        msg = f"coordinates must be an array, got {type(coordinates).__name__}"
        raise GeometryValueError(msg)

    polygons = [coordinates] if geom_type == "Polygon" else coordinates
    parts: list[PolygonPart] = []
    for rings in polygons:
        if not isinstance(rings, list | tuple):
            msg = f"Malformed polygon in feature '{feature_id}': expected an array of rings"
            raise GeometryValueError(msg)
        if not rings:
            continue
        exterior = _ring_from_raw(rings[0], feature_id)
        holes = tuple(_ring_from_raw(ring, feature_id) for ring in rings[1:])
        parts.append(PolygonPart(exterior=exterior, holes=holes))
    return tuple(parts)


def _ring_from_raw(raw_coords: object, feature_id: str) -> Ring:
    """Convert a raw coordinate array to ``(lon, lat)`` tuples.

    Drops altitude (third element) if present. Short rings are kept as-is;
    degenerate rings are excluded later by the engine, not here.

    Raises:
        GeometryValueError: If any coordinate is malformed or out of bounds.
    """
    if not isinstance(raw_coords, list | tuple):
        msg = f"Malformed ring in feature '{feature_id}': expected an array of positions"
        raise GeometryValueError(msg)

    coords: list[Coordinate] = []
    for idx, c in enumerate(raw_coords):
        if not isinstance(c, list | tuple) or len(c) < 2:
            msg = f"Malformed coordinate at index {idx} in feature '{feature_id}': {c!r}"
            raise GeometryValueError(msg)
        try:
            lon = float(c[0])
            lat = float(c[1])
        except (TypeError, ValueError) as exc:
            msg = (
                f"Malformed coordinate at index {idx} in feature '{feature_id}': "
                f"cannot convert to float (lon={c[0]!r}, lat={c[1]!r})"
            )
            raise GeometryValueError(msg) from exc
        _check_bounds(lon, lat, feature_id)
        coords.append((lon, lat))
    return tuple(coords)


def _check_bounds(lon: float, lat: float, feature_id: str) -> None:
    if not (math.isfinite(lon) and math.isfinite(lat)):
        msg = f"Non-finite coordinate ({lon}, {lat}) in feature '{feature_id}'"
        raise GeometryValueError(msg)
    if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
        msg = (
            f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
            f"in feature '{feature_id}'"
        )
        raise GeometryValueError(msg)
    if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
        msg = (
            f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
            f"in feature '{feature_id}'"
        )
        raise GeometryValueError(msg)


def _resolve_feature_id(raw_id: object, index: int) -> str:
    if raw_id is None or raw_id == "":
        return f"{ANONYMOUS_ID_PREFIX}{index}"
    return str(raw_id)
