"""Engine configuration loaded from environment variables.

Every engine call receives a ``LabelConfig`` explicitly; the engine itself
never reads the environment. ``from_env()`` exists for the outer
application (the Azure Functions app) to build one at start-up.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so bad settings surface at startup rather than as
    NaN anchors later.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from region_labels.core.constants import (
    DEFAULT_NAME_KEY,
    DEGENERATE_AREA_EPSILON,
    EARTH_MEAN_RADIUS_M,
    LATITUDE_CLAMP_RAD,
)
from region_labels.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        reason: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid configuration {key}={value!r}: {reason}")


@dataclass(frozen=True, slots=True)
class LabelConfig:
    """Immutable engine configuration.

    Attributes:
        name_key: Property holding the group name; the output point carries
            the group name under this key.
        fallback_name_keys: Further properties tried in order when
            ``name_key`` is missing or empty.
        sphere_radius_m: Radius of the sphere used by the Mercator plane.
        degenerate_area_epsilon: Rings with a smaller |signed area|
            (projected square metres) are excluded.
        latitude_clamp_rad: Latitudes are kept this far (radians) from the poles.
        max_workers: Threads used to reduce groups; ``1`` runs inline.
    """

    name_key: str = DEFAULT_NAME_KEY
    fallback_name_keys: tuple[str, ...] = ()
    sphere_radius_m: float = EARTH_MEAN_RADIUS_M
    degenerate_area_epsilon: float = DEGENERATE_AREA_EPSILON
    latitude_clamp_rad: float = LATITUDE_CLAMP_RAD
    max_workers: int = 1

    @property
    def name_keys(self) -> tuple[str, ...]:
        """Candidate name keys in priority order."""
        return (self.name_key, *self.fallback_name_keys)

    def with_name_key(self, name_key: str) -> LabelConfig:
        """Return a copy grouping by ``name_key`` instead.

        Raises:
            ConfigValidationError: If ``name_key`` is empty or blank.
        """
        config = LabelConfig(
            name_key=name_key,
            fallback_name_keys=self.fallback_name_keys,
            sphere_radius_m=self.sphere_radius_m,
            degenerate_area_epsilon=self.degenerate_area_epsilon,
            latitude_clamp_rad=self.latitude_clamp_rad,
            max_workers=self.max_workers,
        )
        _validate(config)
        return config

    @classmethod
    def from_env(cls) -> LabelConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a required
                string value is empty.
            ValueError: If a numeric environment variable cannot be parsed
                (e.g. ``LABEL_MAX_WORKERS=abc``).
        """
        fallback_raw = os.getenv("LABEL_FALLBACK_NAME_KEYS", "")
        config = cls(
            name_key=os.getenv("LABEL_NAME_KEY", DEFAULT_NAME_KEY).strip(),
            fallback_name_keys=tuple(k.strip() for k in fallback_raw.split(",") if k.strip()),
            sphere_radius_m=float(os.getenv("LABEL_SPHERE_RADIUS_M", str(EARTH_MEAN_RADIUS_M))),
            degenerate_area_epsilon=float(
                os.getenv("LABEL_DEGENERATE_AREA_EPSILON", str(DEGENERATE_AREA_EPSILON))
            ),
            latitude_clamp_rad=float(
                os.getenv("LABEL_LATITUDE_CLAMP_RAD", str(LATITUDE_CLAMP_RAD))
            ),
            max_workers=int(os.getenv("LABEL_MAX_WORKERS", "1")),
        )
        _validate(config)
        return config


def _validate(config: LabelConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.name_key.strip():
        raise ConfigValidationError("LABEL_NAME_KEY", config.name_key, "must not be empty")

    if not math.isfinite(config.sphere_radius_m) or config.sphere_radius_m <= 0:
        raise ConfigValidationError(
            "LABEL_SPHERE_RADIUS_M",
            config.sphere_radius_m,
            "must be a finite number > 0 (metres)",
        )

    if not math.isfinite(config.degenerate_area_epsilon) or config.degenerate_area_epsilon < 0:
        raise ConfigValidationError(
            "LABEL_DEGENERATE_AREA_EPSILON",
            config.degenerate_area_epsilon,
            "must be a finite number >= 0 (square metres)",
        )

    if not 0.0 < config.latitude_clamp_rad < math.pi / 2:
        raise ConfigValidationError(
            "LABEL_LATITUDE_CLAMP_RAD",
            config.latitude_clamp_rad,
            "must be between 0 and pi/2 (radians, exclusive)",
        )

    if config.max_workers < 1:
        raise ConfigValidationError(
            "LABEL_MAX_WORKERS",
            config.max_workers,
            "must be >= 1",
        )
