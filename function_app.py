"""Azure Functions entry point: region label anchor service.

Registers the HTTP function using the Python v2 programming model.

All business logic lives in the region_labels package. This file is purely
the wiring layer between Azure Functions bindings and application code.
"""

from __future__ import annotations

import azure.functions as func

from region_labels.core.config import LabelConfig
from region_labels.core.ingress import handle_label_request

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

# Loaded and validated once at host start-up.
CONFIG = LabelConfig.from_env()


# ---------------------------------------------------------------------------
# HTTP: FeatureCollection in → label points out
# ---------------------------------------------------------------------------


@app.function_name("label_points")
@app.route(route="label-points", methods=["POST"])
def label_points(req: func.HttpRequest, context: func.Context) -> func.HttpResponse:
    """Return one label anchor per named region group.

    Body: GeoJSON FeatureCollection of Polygon / MultiPolygon features.
    Query: optional ``name_key`` overriding the configured group-name property.
    """
    response = handle_label_request(
        req.get_body(),
        CONFIG,
        name_key=req.params.get("name_key", ""),
        correlation_id=context.invocation_id,
    )
    mimetype = "application/geo+json" if response.status_code == 200 else "application/json"
    return func.HttpResponse(
        response.to_json(),
        status_code=response.status_code,
        mimetype=mimetype,
        charset="utf-8",
    )
