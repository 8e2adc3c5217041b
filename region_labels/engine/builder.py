"""Representative-point builder.

Groups the input features, reduces every member of a group to its largest
polygon part, and keeps the single largest part across the whole group as
the group's label anchor. The anchor carries the group name and the
properties of the feature that owned the winning part.

The builder is a pure, stateless batch transform: no I/O, no caching, and
inputs are never mutated. Groups are independent, so they may be reduced
on a thread pool (``LabelConfig.max_workers``); results keep group order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from region_labels.engine.grouping import GroupKey, group_features
from region_labels.engine.projection import Projector
from region_labels.engine.reduction import PartCandidate, reduce_region
from region_labels.models.feature import RegionFeature
from region_labels.models.label_point import RepresentativePoint

if TYPE_CHECKING:
    from region_labels.core.config import LabelConfig

logger = logging.getLogger("region_labels.engine.builder")


def build_representative_points(
    features: Iterable[RegionFeature],
    config: LabelConfig,
) -> list[RepresentativePoint]:
    """Compute one label anchor per named group.

    Args:
        features: Region features (see ``RegionFeature.from_geojson``).
        config: Grouping keys, projection radius, and thresholds.

    Returns:
        One ``RepresentativePoint`` per group with at least one
        non-degenerate part. Callers must not rely on the order.

    Raises:
        TypeError: If an item is not a ``RegionFeature``.
    """
    members = list(features)
    for item in members:
        if not isinstance(item, RegionFeature):
            msg = f"Expected RegionFeature, got {type(item).__name__}"
            raise TypeError(msg)

    groups = group_features(members, config.name_keys)
    projector = Projector(config.sphere_radius_m, latitude_clamp_rad=config.latitude_clamp_rad)

    def reduce_group(item: tuple[GroupKey, list[RegionFeature]]) -> RepresentativePoint | None:
        key, group_members = item
        return _representative_for_group(key, group_members, projector, config)

    if config.max_workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            results = list(pool.map(reduce_group, groups.items()))
    else:
        results = [reduce_group(item) for item in groups.items()]

    points = [p for p in results if p is not None]
    logger.info(
        "Label points built | features=%d | groups=%d | points=%d | dropped=%d | name_keys=%s",
        len(members),
        len(groups),
        len(points),
        len(groups) - len(points),
        ",".join(config.name_keys),
    )
    return points


def _representative_for_group(
    key: GroupKey,
    members: list[RegionFeature],
    projector: Projector,
    config: LabelConfig,
) -> RepresentativePoint | None:
    """Pick the largest part across all members; ``None`` if every part is degenerate."""
    best: PartCandidate | None = None
    winner: RegionFeature | None = None

    for feature in members:
        candidate = reduce_region(
            feature.parts, projector, epsilon=config.degenerate_area_epsilon
        )
        if candidate is None:
            continue
        if best is None or candidate.area > best.area:
            best = candidate
            winner = feature

    if best is None or winner is None:
        logger.debug(
            "Dropping group without usable polygon | group=%s | features=%d",
            key.name,
            len(members),
        )
        return None

    properties = dict(winner.properties)
    properties[config.name_key] = key.name
    return RepresentativePoint(
        name=key.name,
        lon=best.lon,
        lat=best.lat,
        properties=properties,
        area_m2=best.area,
        source_feature_id=winner.feature_id,
    )
