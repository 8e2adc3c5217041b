"""HTTP request handling for the label-point endpoint.

Keeps the Azure Functions wiring in ``function_app.py`` thin: this module
decodes the request body, builds label points, and maps domain errors to
HTTP status codes with a structured error payload. It has no dependency
on the Functions runtime, so it is unit-testable on its own.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from region_labels.core.exceptions import ContractError, LabelEngineError
from region_labels.engine.builder import build_representative_points
from region_labels.io import parse_feature_collection
from region_labels.models.output import LabelPointCollection

if TYPE_CHECKING:
    from region_labels.core.config import LabelConfig

logger = logging.getLogger("region_labels.core.ingress")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNPROCESSABLE = 422


class RequestBodyError(ContractError):
    """Raised when the request body is not decodable JSON."""

    default_stage = "ingress"
    default_code = "REQUEST_BODY_INVALID"


@dataclass(frozen=True, slots=True)
class IngressResponse:
    """Status code plus JSON-serialisable body."""

    status_code: int
    payload: dict[str, object]

    def to_json(self) -> str:
        return json.dumps(self.payload, ensure_ascii=False)


def handle_label_request(
    body: bytes,
    config: LabelConfig,
    *,
    name_key: str = "",
    correlation_id: str = "",
) -> IngressResponse:
    """Turn a FeatureCollection request body into a label-point response.

    Args:
        body: Raw request body (UTF-8 GeoJSON FeatureCollection).
        config: Engine configuration loaded at start-up.
        name_key: Per-request override of ``config.name_key``.
        correlation_id: Invocation identifier echoed in error payloads.

    Returns:
        ``200`` with the label FeatureCollection, ``400`` for contract
        violations (bad JSON, not a FeatureCollection), ``422`` for
        validation failures (unsupported geometry, bad coordinates,
        bad ``name_key``).
    """
    try:
        if name_key:
            config = config.with_name_key(name_key)
        payload = _decode_body(body)
        features = parse_feature_collection(payload)
        points = build_representative_points(features, config)
    except LabelEngineError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        status = HTTP_BAD_REQUEST if exc.category == "contract" else HTTP_UNPROCESSABLE
        logger.warning(
            "Label request rejected | status=%d | code=%s | correlation_id=%s | %s",
            status,
            exc.code,
            correlation_id,
            exc.message,
        )
        return IngressResponse(status_code=status, payload={"error": exc.to_error_dict()})

    collection = LabelPointCollection.from_points(points)
    logger.info(
        "Label request served | features=%d | points=%d | correlation_id=%s",
        len(features),
        len(points),
        correlation_id,
    )
    return IngressResponse(status_code=HTTP_OK, payload=collection.model_dump())


def _decode_body(body: bytes) -> object:
    if not body:
        msg = "Request body is empty"
        raise RequestBodyError(msg)
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"Request body is not valid JSON: {exc}"
        raise RequestBodyError(msg) from exc
