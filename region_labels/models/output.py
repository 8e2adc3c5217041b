"""Pydantic model of the label-point FeatureCollection.

Validates and serialises the engine output into the GeoJSON document the
label renderer consumes. Coordinates are WGS 84 ``[lon, lat]``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, Field

from region_labels.models.label_point import RepresentativePoint


class PointGeometry(BaseModel):
    """GeoJSON ``Point`` geometry."""

    type: Literal["Point"] = "Point"
    coordinates: list[float] = Field(min_length=2, max_length=2)


class LabelFeature(BaseModel):
    """One label point as a GeoJSON ``Feature``."""

    type: Literal["Feature"] = "Feature"
    geometry: PointGeometry
    properties: dict[str, Any] = Field(default_factory=dict)


class LabelPointCollection(BaseModel):
    """GeoJSON ``FeatureCollection`` of label points.

    Attributes:
        type: Always ``"FeatureCollection"``.
        features: One point feature per non-empty group.
    """

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[LabelFeature] = Field(default_factory=list)

    @classmethod
    def from_points(cls, points: Iterable[RepresentativePoint]) -> LabelPointCollection:
        return cls(features=[LabelFeature.model_validate(p.to_geojson()) for p in points])
