"""Shared constants used by the items Lambda."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Item keys
# ---------------------------------------------------------------------------
PARTITION_KEY = "pk"
ITEM_ID_FIELD = "id"
PATH_ID_PARAM = "id"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
JSON_HEADERS = {"Content-Type": "application/json", **CORS_HEADERS}

# ---------------------------------------------------------------------------
# Error messages returned to callers
# ---------------------------------------------------------------------------
ERROR_ID_REQUIRED = "ID is required"
ERROR_METHOD_NOT_ALLOWED = "Method not allowed"
ERROR_INTERNAL = "Internal server error"
