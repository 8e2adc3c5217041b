"""Tests for engine configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
"""

from __future__ import annotations

import math
import os
from unittest.mock import patch

import pytest

from region_labels.core.config import ConfigValidationError, LabelConfig
from region_labels.core.constants import EARTH_MEAN_RADIUS_M


class TestLabelConfigDefaults:
    """Verify default configuration values."""

    def test_default_name_key(self) -> None:
        cfg = LabelConfig()
        assert cfg.name_key == "name"
        assert cfg.fallback_name_keys == ()
        assert cfg.name_keys == ("name",)

    def test_default_radius(self) -> None:
        assert LabelConfig().sphere_radius_m == EARTH_MEAN_RADIUS_M

    def test_default_thresholds(self) -> None:
        cfg = LabelConfig()
        assert cfg.degenerate_area_epsilon == 1e-6
        assert cfg.latitude_clamp_rad == 1e-6

    def test_default_single_threaded(self) -> None:
        assert LabelConfig().max_workers == 1

    def test_name_keys_order(self) -> None:
        cfg = LabelConfig(name_key="name", fallback_name_keys=("PT_NAME", "label"))
        assert cfg.name_keys == ("name", "PT_NAME", "label")


class TestLabelConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "LABEL_NAME_KEY": "PT_NAME",
            "LABEL_FALLBACK_NAME_KEYS": "name, label ,",
            "LABEL_SPHERE_RADIUS_M": "6378137",
            "LABEL_DEGENERATE_AREA_EPSILON": "0.01",
            "LABEL_LATITUDE_CLAMP_RAD": "1e-7",
            "LABEL_MAX_WORKERS": "4",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = LabelConfig.from_env()

        assert cfg.name_key == "PT_NAME"
        assert cfg.fallback_name_keys == ("name", "label")
        assert cfg.sphere_radius_m == 6378137.0
        assert cfg.degenerate_area_epsilon == 0.01
        assert cfg.latitude_clamp_rad == 1e-7
        assert cfg.max_workers == 4

    def test_defaults_when_env_missing(self) -> None:
        keys = [k for k in os.environ if k.startswith("LABEL_")]
        with patch.dict(os.environ, {}, clear=False):
            for key in keys:
                os.environ.pop(key)
            cfg = LabelConfig.from_env()
        assert cfg == LabelConfig()

    def test_unparseable_number(self) -> None:
        with (
            patch.dict(os.environ, {"LABEL_MAX_WORKERS": "many"}, clear=False),
            pytest.raises(ValueError),
        ):
            LabelConfig.from_env()


class TestLabelConfigValidation:
    """Out-of-range values fail fast."""

    @pytest.mark.parametrize(
        ("env_key", "value"),
        [
            ("LABEL_NAME_KEY", "  "),
            ("LABEL_SPHERE_RADIUS_M", "0"),
            ("LABEL_SPHERE_RADIUS_M", "-1"),
            ("LABEL_SPHERE_RADIUS_M", "inf"),
            ("LABEL_DEGENERATE_AREA_EPSILON", "-0.5"),
            ("LABEL_DEGENERATE_AREA_EPSILON", "nan"),
            ("LABEL_LATITUDE_CLAMP_RAD", "0"),
            ("LABEL_LATITUDE_CLAMP_RAD", "2"),
            ("LABEL_MAX_WORKERS", "0"),
        ],
    )
    def test_rejects(self, env_key: str, value: str) -> None:
        with (
            patch.dict(os.environ, {env_key: value}, clear=False),
            pytest.raises(ConfigValidationError) as excinfo,
        ):
            LabelConfig.from_env()
        assert excinfo.value.key == env_key

    def test_error_attributes(self) -> None:
        with (
            patch.dict(os.environ, {"LABEL_MAX_WORKERS": "0"}, clear=False),
            pytest.raises(ConfigValidationError) as excinfo,
        ):
            LabelConfig.from_env()
        err = excinfo.value
        assert err.value == 0
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert "LABEL_MAX_WORKERS" in str(err)

    def test_clamp_upper_bound_is_exclusive(self) -> None:
        with (
            patch.dict(os.environ, {"LABEL_LATITUDE_CLAMP_RAD": repr(math.pi / 2)}, clear=False),
            pytest.raises(ConfigValidationError),
        ):
            LabelConfig.from_env()


class TestWithNameKey:
    """Per-request name-key override."""

    def test_replaces_name_key_only(self) -> None:
        base = LabelConfig(fallback_name_keys=("alt",), max_workers=3)
        cfg = base.with_name_key("district")
        assert cfg.name_keys == ("district", "alt")
        assert cfg.max_workers == 3
        assert base.name_key == "name"

    def test_rejects_empty(self) -> None:
        with pytest.raises(ConfigValidationError):
            LabelConfig().with_name_key("")

    def test_rejects_blank(self) -> None:
        with pytest.raises(ConfigValidationError) as excinfo:
            LabelConfig().with_name_key("   ")
        assert excinfo.value.key == "LABEL_NAME_KEY"
