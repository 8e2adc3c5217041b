"""Boundary adapters: datasets and payloads in, label points out.

GeoJSON files are read with the plain-JSON reader so that feature ids come
from the source ``id`` member exactly; OGR would turn string ids into an
``id`` property and number the rows itself. Every other vector format goes
through fiona. Request bodies go straight through ``parse_feature_collection``.

Unsupported geometry types are rejected here, before the engine runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from region_labels.core.exceptions import LabelEngineError
from region_labels.io._errors import DatasetReadError, PayloadContractError
from region_labels.io._fiona_reader import read_with_fiona
from region_labels.io._geojson import parse_feature_collection, read_geojson_file
from region_labels.io.writer import write_label_points
from region_labels.models.feature import RegionFeature

logger = logging.getLogger("region_labels.io")

GEOJSON_SUFFIXES = frozenset({".geojson", ".json"})

__all__ = [
    "DatasetReadError",
    "GEOJSON_SUFFIXES",
    "PayloadContractError",
    "parse_feature_collection",
    "read_feature_collection",
    "read_geojson_file",
    "read_with_fiona",
    "write_label_points",
]


def read_feature_collection(path: Path | str, *, layer: str | None = None) -> list[RegionFeature]:
    """Read polygon features from a vector dataset.

    Args:
        path: Dataset path (any OGR vector format).
        layer: Layer name for multi-layer datasets such as GeoPackage.

    Returns:
        Features in dataset order.

    Raises:
        DatasetReadError: If the file is missing or no reader can open it.
        PayloadContractError: If the dataset is not in WGS 84 or not a
            FeatureCollection.
        UnsupportedGeometryError: If a record is not polygonal.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Dataset not found: {path}"
        raise DatasetReadError(msg)

    logger.info("Reading dataset: %s", path.name)

    if path.suffix.lower() in GEOJSON_SUFFIXES:
        features = read_geojson_file(path)
    else:
        try:
            features = read_with_fiona(path, layer=layer)
        except LabelEngineError:
            raise
        except Exception as fiona_err:
            msg = f"Cannot open dataset {path.name}: {fiona_err}"
            raise DatasetReadError(msg) from fiona_err

    logger.info("Read %d feature(s) from %s", len(features), path.name)
    return features
