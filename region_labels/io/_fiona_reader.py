"""Fiona-based dataset reader.

Reads OGR vector formats (GeoPackage, Shapefile, KML, ...) and converts
each record through its ``__geo_interface__`` into a ``RegionFeature``. The
record id is the OGR feature id. The dataset must be in WGS 84.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from region_labels.core.constants import GEOGRAPHIC_CRS
from region_labels.io._errors import PayloadContractError
from region_labels.models.feature import RegionFeature

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("region_labels.io")


def read_with_fiona(path: Path, *, layer: str | None = None) -> list[RegionFeature]:
    """Read all records of one dataset layer.

    Raises:
        PayloadContractError: If the dataset CRS is not EPSG:4326.
        UnsupportedGeometryError: If a record is not polygonal.
    """
    import fiona

    features: list[RegionFeature] = []
    with fiona.open(str(path), layer=layer) as collection:
        _check_crs(collection, path)
        for idx, record in enumerate(collection):
            data = getattr(record, "__geo_interface__", record)
            features.append(RegionFeature.from_geojson(data, index=idx))
    return features


def _check_crs(collection: object, path: Path) -> None:
    """Reject datasets whose CRS is known and not WGS 84."""
    crs = getattr(collection, "crs", None)
    if not crs:
        return

    to_epsg = getattr(crs, "to_epsg", None)
    epsg = to_epsg() if callable(to_epsg) else None
    if epsg is not None and epsg != 4326:
        msg = f"Unexpected CRS EPSG:{epsg} in {path.name} (expected {GEOGRAPHIC_CRS})"
        raise PayloadContractError(msg)
