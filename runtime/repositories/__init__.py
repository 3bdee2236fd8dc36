"""Data access layer for the items table."""

from runtime.repositories.base_repository import BaseRepository
from runtime.repositories.item_repository import ItemRepository

__all__ = [
    "BaseRepository",
    "ItemRepository",
]
