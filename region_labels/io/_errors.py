"""Exceptions raised by the boundary readers."""

from __future__ import annotations

from region_labels.core.exceptions import ContractError, ValidationError


class DatasetReadError(ValidationError):
    """Raised when a vector dataset cannot be opened or decoded."""

    default_stage = "io"
    default_code = "DATASET_READ_FAILED"


class PayloadContractError(ContractError):
    """Raised when a payload is not a GeoJSON FeatureCollection of Features."""

    default_stage = "io"
    default_code = "PAYLOAD_CONTRACT_VIOLATED"
