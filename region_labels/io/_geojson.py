"""Plain-JSON GeoJSON parsing.

Used for request bodies and for ``.geojson`` / ``.json`` files.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from region_labels.io._errors import DatasetReadError, PayloadContractError
from region_labels.models.contracts import RegionFeaturePayload
from region_labels.models.feature import RegionFeature

if TYPE_CHECKING:
    from pathlib import Path


def parse_feature_collection(payload: object) -> list[RegionFeature]:
    """Convert a GeoJSON ``FeatureCollection`` mapping into features.

    Raises:
        PayloadContractError: If the payload is not a FeatureCollection of
            Feature objects.
        UnsupportedGeometryError: If a feature is not polygonal.
        GeometryValueError: If a coordinate is malformed.
    """
    if not isinstance(payload, Mapping):
        msg = f"Expected a GeoJSON object, got {type(payload).__name__}"
        raise PayloadContractError(msg)

    if payload.get("type") != "FeatureCollection":
        msg = f"Expected type 'FeatureCollection', got {payload.get('type')!r}"
        raise PayloadContractError(msg)

    raw_features = payload.get("features")
    if not isinstance(raw_features, list):
        msg = f"features must be an array, got {type(raw_features).__name__}"
        raise PayloadContractError(msg)

    features: list[RegionFeature] = []
    for idx, raw in enumerate(raw_features):
        features.append(RegionFeature.from_geojson(_require_feature(raw, idx), index=idx))
    return features


def read_geojson_file(path: Path) -> list[RegionFeature]:
    """Read a GeoJSON file with the standard ``json`` module.

    Raises:
        DatasetReadError: If the file cannot be read or is not valid JSON.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Cannot read GeoJSON file {path.name}: {exc}"
        raise DatasetReadError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Not valid JSON in {path.name}: {exc}"
        raise DatasetReadError(msg) from exc
    return parse_feature_collection(payload)


def _require_feature(raw: object, idx: int) -> RegionFeaturePayload:
    if not isinstance(raw, Mapping):
        msg = f"Feature at index {idx} must be an object, got {type(raw).__name__}"
        raise PayloadContractError(msg)
    if raw.get("type", "Feature") != "Feature":
        msg = f"Item at index {idx} has type {raw.get('type')!r}, expected 'Feature'"
        raise PayloadContractError(msg)
    return cast("RegionFeaturePayload", raw)
