"""Endpoint Metadata Route — GET /api describes every declared route.

Invariants:
    - Built from the app's OpenAPI document, regenerated per request from
      app.routes, so a route added to the app shows up without a second
      registry to update and however include_router nests its routes
    - Keys are "<METHOD> <path>" with {param} rewritten as :param
    - Routes excluded from the OpenAPI schema (health probes, docs) are skipped
"""

import re

from fastapi import APIRouter, Request
from fastapi.openapi.utils import get_openapi

from newsdesk.schemas.endpoints import EndpointDescription, EndpointsResponse

router = APIRouter(prefix="/api", tags=["meta"])

_PATH_PARAM = re.compile(r"\{(\w+)(?::\w+)?\}")
_HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options"}


def to_colon_path(path: str) -> str:
    """/api/articles/{article_id} -> /api/articles/:article_id"""
    return _PATH_PARAM.sub(r":\1", path)


def _first_line(text: str | None) -> str:
    if not text:
        return ""
    return text.strip().splitlines()[0].strip()


def _resolve(schema: dict, components: dict) -> dict:
    ref = schema.get("$ref")
    if not ref:
        return schema
    return components.get(ref.rsplit("/", 1)[-1], {})


def _request_body_fields(operation: dict, components: dict) -> list[str]:
    content = operation.get("requestBody", {}).get("content", {})
    schema = content.get("application/json", {}).get("schema")
    if not schema:
        return []
    return list(_resolve(schema, components).get("properties", {}))


def describe_openapi(document: dict) -> dict[str, EndpointDescription]:
    components = document.get("components", {}).get("schemas", {})
    endpoints: dict[str, EndpointDescription] = {}
    for path, operations in document.get("paths", {}).items():
        colon_path = to_colon_path(path)
        for method, operation in operations.items():
            if method not in _HTTP_METHODS:
                continue
            endpoints[f"{method.upper()} {colon_path}"] = EndpointDescription(
                description=(
                    _first_line(operation.get("description"))
                    or operation.get("summary", "")
                ),
                queries=[
                    p["name"] for p in operation.get("parameters", [])
                    if p.get("in") == "query"
                ],
                request_body=_request_body_fields(operation, components),
            )
    return endpoints


@router.get("", response_model=EndpointsResponse)
async def get_endpoints(request: Request):
    """Serves a description of every available endpoint."""
    app = request.app
    document = get_openapi(title=app.title, version=app.version, routes=app.routes)
    return EndpointsResponse(endpoints=describe_openapi(document))
