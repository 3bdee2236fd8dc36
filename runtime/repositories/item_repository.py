"""Repository for schemaless items in the items table.

Items table schema:
    pk: <item id>   (no sort key, no indexes)
"""

from __future__ import annotations

import time
from typing import Any

from runtime.shared.constants import ITEM_ID_FIELD, PARTITION_KEY

from .base_repository import BaseRepository


def generate_item_id() -> str:
    """Timestamp-derived id (milliseconds since the epoch)."""
    return str(int(time.time() * 1000))


class ItemRepository(BaseRepository):
    """CRUD operations for items keyed on ``pk``."""

    key_name = PARTITION_KEY

    def list_items(self) -> list[dict[str, Any]]:
        return self.scan()

    def get_item(self, item_id: str) -> dict[str, Any] | None:
        return self.get_item_or_none(item_id)

    def create_item(self, data: dict[str, Any]) -> dict[str, Any]:
        """Store ``data`` under its ``id`` field, or a generated id when absent.

        An existing item with the same key is replaced.
        """
        item = dict(data)
        item[PARTITION_KEY] = str(item.get(ITEM_ID_FIELD) or generate_item_id())
        return self.put_item(item)

    def replace_item(self, item_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the item at ``item_id`` with ``data``; no merge."""
        item = dict(data)
        item[PARTITION_KEY] = item_id
        return self.put_item(item)

    def delete_item_by_id(self, item_id: str) -> None:
        self.delete_item(item_id)
