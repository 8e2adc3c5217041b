"""Canonical payload contracts for the engine boundary.

GeoJSON shapes exchanged with callers are defined here as ``TypedDict``.
This module is the single source of truth for field names; drift-detection
tests verify runtime compliance of ``to_geojson()`` and the HTTP handler.
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Input (caller → engine)
# ---------------------------------------------------------------------------


class RegionGeometryPayload(TypedDict):
    """GeoJSON ``Polygon`` or ``MultiPolygon`` geometry."""

    type: str
    coordinates: list[Any]


class RegionFeaturePayload(TypedDict, total=False):
    """GeoJSON ``Feature`` carrying a polygonal geometry."""

    type: str
    id: str | int
    geometry: RegionGeometryPayload | None
    properties: dict[str, Any] | None


class RegionCollectionPayload(TypedDict):
    """GeoJSON ``FeatureCollection`` of region features."""

    type: str
    features: list[RegionFeaturePayload]


# ---------------------------------------------------------------------------
# Output (engine → label renderer)
# ---------------------------------------------------------------------------


class PointGeometryPayload(TypedDict):
    """GeoJSON ``Point`` geometry ``[lon, lat]``."""

    type: str
    coordinates: list[float]


class LabelPointPayload(TypedDict):
    """Serialised ``RepresentativePoint``."""

    type: str
    geometry: PointGeometryPayload
    properties: dict[str, Any]


class LabelCollectionPayload(TypedDict):
    """FeatureCollection of label points returned to callers."""

    type: str
    features: list[LabelPointPayload]
