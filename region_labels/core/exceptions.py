"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the engine and its boundary
adapters. Every domain exception inherits from ``LabelEngineError`` and
carries structured context fields for consistent error responses and
operator diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``: input violations (bad coordinates, unsupported
  geometry types, out-of-range configuration).
- ``ContractError``: payload/schema drift at the boundary (a body that
  is not a FeatureCollection, a dataset in the wrong CRS).

Degenerate geometry is not an error: it is excluded silently by the engine.

Every exception exposes ``to_error_dict()`` for a stable structured error
payload suitable for HTTP responses and logging.
"""

from __future__ import annotations


class LabelEngineError(Exception):
    """Base exception for all label-engine errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"models"``, ``"io"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"GEOMETRY_UNSUPPORTED"``).
        correlation_id: Request correlation identifier, if any.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(LabelEngineError):
    """Input or domain-model validation failure."""


class ContractError(LabelEngineError):
    """Payload or schema drift at the engine boundary."""
