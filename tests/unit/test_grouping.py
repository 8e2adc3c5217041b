"""Unit tests for name resolution and feature grouping."""

from __future__ import annotations

import pytest

from region_labels.engine.grouping import GroupKey, group_features, resolve_group_name
from region_labels.models.feature import RegionFeature


def _feature(properties: dict[str, object], *, index: int, feature_id: str = "") -> RegionFeature:
    return RegionFeature(
        properties=properties,
        feature_id=feature_id or f"#{index}",
        index=index,
    )


class TestResolveGroupName:
    """First non-empty candidate key wins."""

    def test_primary_key(self) -> None:
        assert resolve_group_name({"name": "Riverside"}, ["name"]) == "Riverside"

    def test_falls_back_in_order(self) -> None:
        props = {"name": "", "PT_NAME": "Kashiwa", "label": "ignored"}
        assert resolve_group_name(props, ["name", "PT_NAME", "label"]) == "Kashiwa"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_values_are_skipped(self, value: object) -> None:
        assert resolve_group_name({"name": value}, ["name"]) is None

    def test_missing_key(self) -> None:
        assert resolve_group_name({"other": "x"}, ["name"]) is None

    def test_no_candidate_keys(self) -> None:
        assert resolve_group_name({"name": "x"}, []) is None

    def test_non_string_values_are_stringified(self) -> None:
        assert resolve_group_name({"code": 12}, ["code"]) == "12"

    def test_zero_is_a_name(self) -> None:
        assert resolve_group_name({"code": 0}, ["code"]) == "0"


class TestGroupFeatures:
    """Every feature lands in exactly one group."""

    def test_same_name_merges(self) -> None:
        a = _feature({"name": "Riverside"}, index=0)
        b = _feature({"name": "Riverside"}, index=1)
        groups = group_features([a, b], ["name"])
        assert groups == {GroupKey("Riverside"): [a, b]}

    def test_first_encounter_order(self) -> None:
        features = [
            _feature({"name": "B"}, index=0),
            _feature({"name": "A"}, index=1),
            _feature({"name": "B"}, index=2),
        ]
        groups = group_features(features, ["name"])
        assert [key.name for key in groups] == ["B", "A"]
        assert [f.index for f in groups[GroupKey("B")]] == [0, 2]

    def test_unnamed_features_never_merge(self) -> None:
        a = _feature({}, index=0)
        b = _feature({"name": None}, index=1)
        groups = group_features([a, b], ["name"])
        assert len(groups) == 2
        assert all(key.is_anonymous for key in groups)
        assert [members for members in groups.values()] == [[a], [b]]

    def test_unnamed_uses_feature_id(self) -> None:
        feature = _feature({}, index=3, feature_id="ward-17")
        (key,) = group_features([feature], ["name"])
        assert key.name == "ward-17"
        assert key.anonymous_index == 0

    def test_unnamed_does_not_join_named_group_with_same_text(self) -> None:
        named = _feature({"name": "ward-17"}, index=0)
        unnamed = _feature({}, index=1, feature_id="ward-17")
        groups = group_features([named, unnamed], ["name"])
        assert len(groups) == 2

    def test_duplicate_ids_stay_separate(self) -> None:
        a = _feature({}, index=0, feature_id="dup")
        b = _feature({}, index=1, feature_id="dup")
        assert len(group_features([a, b], ["name"])) == 2

    def test_fallback_key_groups(self) -> None:
        a = _feature({"PT_NAME": "Masuo"}, index=0)
        b = _feature({"name": "Masuo"}, index=1)
        groups = group_features([a, b], ["name", "PT_NAME"])
        assert groups == {GroupKey("Masuo"): [a, b]}

    def test_every_feature_assigned_once(self) -> None:
        features = [
            _feature({"name": "A"}, index=0),
            _feature({}, index=1),
            _feature({"name": "A"}, index=2),
            _feature({"name": ""}, index=3),
        ]
        groups = group_features(features, ["name"])
        assigned = [f for members in groups.values() for f in members]
        assert sorted(f.index for f in assigned) == [0, 1, 2, 3]

    def test_empty_input(self) -> None:
        assert group_features([], ["name"]) == {}
