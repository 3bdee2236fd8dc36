"""Base repository with common DynamoDB operations.

Wraps a single table keyed on one string partition key. No conditional
writes are issued; writes are last-write-wins.
"""

from __future__ import annotations

import logging
from typing import Any

import boto3

logger = logging.getLogger(__name__)


class BaseRepository:
    """Thin wrapper around a single DynamoDB table resource."""

    key_name = "pk"

    def __init__(
        self,
        table_name: str,
        *,
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        kwargs: dict[str, Any] = {}
        if region:
            kwargs["region_name"] = region
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        self._resource = boto3.resource("dynamodb", **kwargs)
        self._table = self._resource.Table(table_name)
        self._table_name = table_name

    @property
    def table_name(self) -> str:
        return self._table_name

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def put_item(self, item: dict[str, Any]) -> dict[str, Any]:
        """Put an item into the table, replacing any existing one.

        Returns the item as stored.
        """
        self._table.put_item(Item=item)
        return item

    def get_item_or_none(self, key: str) -> dict[str, Any] | None:
        """Get a single item by partition key, returning None if missing."""
        response = self._table.get_item(Key={self.key_name: key})
        return response.get("Item")

    def delete_item(self, key: str) -> None:
        """Delete an item by partition key. Deleting a missing key is a no-op."""
        self._table.delete_item(Key={self.key_name: key})

    def scan(self) -> list[dict[str, Any]]:
        """Return every item in the table, following scan pages."""
        items: list[dict[str, Any]] = []
        response = self._table.scan()
        items.extend(response.get("Items", []))

        while "LastEvaluatedKey" in response:
            logger.debug("Continuing scan of %s", self._table_name)
            response = self._table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response.get("Items", []))

        return items
