"""Partition features into groups by a resolved name.

The name is the first non-empty value among an ordered list of candidate
property keys. A feature with no usable name becomes a singleton group
keyed by its identifier *and* input position, so it can never merge with
another feature, not even a named group that happens to share its id.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, NamedTuple

from region_labels.models.feature import RegionFeature


class GroupKey(NamedTuple):
    """Group identity.

    ``anonymous_index`` is ``None`` for named groups and the feature's input
    position for the singleton group of an unnamed feature.
    """

    name: str
    anonymous_index: int | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.anonymous_index is not None


def resolve_group_name(properties: Mapping[str, Any], name_keys: Sequence[str]) -> str | None:
    """Return the first non-empty candidate name, or ``None``."""
    for key in name_keys:
        value = properties.get(key)
        if value is None:
            continue
        text = str(value)
        if text.strip():
            return text
    return None


def group_features(
    features: Iterable[RegionFeature],
    name_keys: Sequence[str],
) -> dict[GroupKey, list[RegionFeature]]:
    """Group features by name, in first-encounter order.

    Every feature lands in exactly one group.
    """
    groups: dict[GroupKey, list[RegionFeature]] = {}
    for position, feature in enumerate(features):
        name = resolve_group_name(feature.properties, name_keys)
        if name is None:
            key = GroupKey(name=feature.feature_id, anonymous_index=position)
        else:
            key = GroupKey(name=name)
        groups.setdefault(key, []).append(feature)
    return groups
