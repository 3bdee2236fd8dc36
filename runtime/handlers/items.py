"""Items Lambda handler.

Single-table CRUD over API Gateway proxy integration. Routes on HTTP method
and the optional ``id`` path parameter:

    GET    /items        -> 200 list of all items
    GET    /items/{id}   -> 200 item, or {} when absent
    POST   /items        -> 201 stored item (pk from body ``id`` or a timestamp)
    PUT    /items/{id}   -> 200 stored item (full overwrite)
    DELETE /items/{id}   -> 204 empty body
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from runtime.repositories.item_repository import ItemRepository
from runtime.shared.config import RuntimeConfig, load_runtime_config
from runtime.shared.constants import (
    CORS_HEADERS,
    ERROR_ID_REQUIRED,
    ERROR_INTERNAL,
    ERROR_METHOD_NOT_ALLOWED,
    JSON_HEADERS,
    PATH_ID_PARAM,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class ApiRequest(BaseModel):
    """The fields of an API Gateway proxy event the handler reads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    http_method: str = Field("", alias="httpMethod")
    path: str = ""
    path_parameters: dict[str, str] | None = Field(None, alias="pathParameters")
    body: str | None = None

    @property
    def method(self) -> str:
        return self.http_method.upper()

    @property
    def item_id(self) -> str | None:
        params = self.path_parameters or {}
        return params.get(PATH_ID_PARAM) or None

    def json_body(self) -> dict[str, Any]:
        """Decode the body as a JSON object; numbers with fractions become Decimal."""
        if self.body is None:
            raise ValueError("Request body is required")
        data = json.loads(self.body, parse_float=Decimal)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data


# Cold-start initialisation

_config: RuntimeConfig | None = None
_repo: ItemRepository | None = None


def _init() -> tuple[RuntimeConfig, ItemRepository]:
    """Lazy-initialise shared resources on first invocation."""
    global _config, _repo  # noqa: PLW0603
    if _config is None:
        _config = load_runtime_config()
        logger.setLevel(_config.log_level)
        _repo = ItemRepository(
            _config.table_name,
            region=_config.aws_region,
            endpoint_url=_config.dynamodb_endpoint,
        )
    assert _repo is not None
    return _config, _repo


# Lambda entry point


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Dispatch one API Gateway request to the matching CRUD handler."""
    logger.info("Event: %s", json.dumps(event, default=str))

    try:
        request = ApiRequest.model_validate(event)
        routes: dict[str, Callable[[ApiRequest], dict[str, Any]]] = {
            "GET": _handle_get,
            "POST": _handle_create,
            "PUT": _handle_replace,
            "DELETE": _handle_delete,
        }
        route_handler = routes.get(request.method)
        if route_handler is None:
            return _response(405, {"error": ERROR_METHOD_NOT_ALLOWED})
        return route_handler(request)
    except Exception:
        logger.exception("Unhandled error in items handler")
        return _response(500, {"error": ERROR_INTERNAL})


# CRUD handlers


def _handle_get(request: ApiRequest) -> dict[str, Any]:
    """List all items, or fetch one when an id is present."""
    _, repo = _init()
    if request.item_id is None:
        return _response(200, repo.list_items())
    return _response(200, repo.get_item(request.item_id) or {})


def _handle_create(request: ApiRequest) -> dict[str, Any]:
    data = request.json_body()
    _, repo = _init()
    return _response(201, repo.create_item(data))


def _handle_replace(request: ApiRequest) -> dict[str, Any]:
    item_id = request.item_id
    if item_id is None:
        return _response(400, {"error": ERROR_ID_REQUIRED})
    data = request.json_body()
    _, repo = _init()
    return _response(200, repo.replace_item(item_id, data))


def _handle_delete(request: ApiRequest) -> dict[str, Any]:
    item_id = request.item_id
    if item_id is None:
        return _response(400, {"error": ERROR_ID_REQUIRED})
    _, repo = _init()
    repo.delete_item_by_id(item_id)
    return _response(204, None)


# Helpers


def _json_default(value: Any) -> Any:
    """Serialise DynamoDB numbers back to plain JSON numbers."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return str(value)


def _response(status_code: int, body: Any) -> dict[str, Any]:
    """Build an API Gateway proxy integration response."""
    if body is None:
        return {"statusCode": status_code, "headers": dict(CORS_HEADERS), "body": ""}
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, default=_json_default),
    }
