"""Representative-point engine.

- projection: Spherical Mercator forward/inverse (pyproj)
- ring_metrics: Shoelace area and centroid of one planar ring
- reduction: Part → candidate, region → largest part
- grouping: Features → named groups
- builder: Groups → one label anchor each
"""

from region_labels.engine.builder import build_representative_points
from region_labels.engine.grouping import GroupKey, group_features, resolve_group_name
from region_labels.engine.projection import Projector
from region_labels.engine.reduction import PartCandidate, part_representative, reduce_region
from region_labels.engine.ring_metrics import RingMetrics, ring_metrics

__all__ = [
    "GroupKey",
    "PartCandidate",
    "Projector",
    "RingMetrics",
    "build_representative_points",
    "group_features",
    "part_representative",
    "reduce_region",
    "resolve_group_name",
    "ring_metrics",
]
