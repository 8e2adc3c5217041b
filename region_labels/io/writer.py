"""Write label points as a GeoJSON FeatureCollection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from region_labels.models.label_point import RepresentativePoint
from region_labels.models.output import LabelPointCollection

logger = logging.getLogger("region_labels.io")


def write_label_points(points: Iterable[RepresentativePoint], path: Path | str) -> Path:
    """Serialise ``points`` to ``path`` (UTF-8 GeoJSON) and return the path."""
    path = Path(path)
    collection = LabelPointCollection.from_points(points)
    path.write_text(collection.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Label points written | points=%d | path=%s", len(collection.features), path)
    return path
