"""Data models and schemas.

Defines the data structures used at the engine boundary:
- RegionFeature / PolygonPart: Polygonal input features
- RepresentativePoint: One label anchor per group
- LabelPointCollection: Pydantic GeoJSON output document
- contracts: TypedDict payload shapes
"""

from region_labels.models.feature import (
    GeometryValueError,
    PolygonPart,
    RegionFeature,
    UnsupportedGeometryError,
)
from region_labels.models.label_point import RepresentativePoint
from region_labels.models.output import LabelPointCollection

__all__ = [
    "GeometryValueError",
    "LabelPointCollection",
    "PolygonPart",
    "RegionFeature",
    "RepresentativePoint",
    "UnsupportedGeometryError",
]
