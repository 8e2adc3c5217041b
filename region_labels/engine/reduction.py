"""Per-feature reduction: polygon part → candidate, region → best part.

``part_representative`` projects a part's outer ring, measures it, and
unprojects the centroid. Holes are ignored: the anchor is the centroid of
the outer boundary, which is what label placement needs.

``reduce_region`` keeps the part with the strictly greatest area; ties keep
the first part in input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from region_labels.core.constants import DEGENERATE_AREA_EPSILON
from region_labels.engine.ring_metrics import ring_metrics

if TYPE_CHECKING:
    from region_labels.engine.projection import Projector
    from region_labels.models.feature import PolygonPart


@dataclass(frozen=True, slots=True)
class PartCandidate:
    """Projected area (square metres) and lon/lat centroid of one part."""

    area: float
    lon: float
    lat: float

    @property
    def is_degenerate(self) -> bool:
        return self.area <= 0.0


DEGENERATE_PART = PartCandidate(area=0.0, lon=0.0, lat=0.0)


def part_representative(
    part: PolygonPart,
    projector: Projector,
    *,
    epsilon: float = DEGENERATE_AREA_EPSILON,
) -> PartCandidate:
    """Reduce one polygon part to its area and centroid.

    Returns ``DEGENERATE_PART`` (area 0) when the outer ring is degenerate.
    """
    planar = projector.forward_ring(part.exterior)
    metrics = ring_metrics(planar, epsilon=epsilon)
    if metrics is None:
        return DEGENERATE_PART

    lon, lat = projector.inverse(metrics.centroid_x, metrics.centroid_y)
    return PartCandidate(area=metrics.area, lon=lon, lat=lat)


def reduce_region(
    parts: Iterable[PolygonPart],
    projector: Projector,
    *,
    epsilon: float = DEGENERATE_AREA_EPSILON,
) -> PartCandidate | None:
    """Return the candidate of the largest part, or ``None`` if all are degenerate."""
    best: PartCandidate | None = None
    for part in parts:
        candidate = part_representative(part, projector, epsilon=epsilon)
        if candidate.is_degenerate:
            continue
        if best is None or candidate.area > best.area:
            best = candidate
    return best
