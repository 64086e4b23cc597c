"""In-memory, id-keyed collection owned by one engine instance."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from models.outfit_item import OutfitItem, apply_updates

logger = logging.getLogger(__name__)


class ItemStore:
    """Insertion-ordered item collection with O(1) lookup, update and removal.

    The store does not persist anything; callers mirror mutations to durable
    storage themselves.
    """

    def __init__(self, items: Iterable[OutfitItem] = ()) -> None:
        self._items: Dict[str, OutfitItem] = {}
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[OutfitItem]:
        return iter(list(self._items.values()))

    def add(self, item: OutfitItem) -> OutfitItem:
        """Append ``item``; an existing id is replaced in its current position."""

        if item.item_id in self._items:
            logger.warning("Item %s already present, replacing it", item.item_id)
        self._items[item.item_id] = item
        return item

    def get(self, item_id: str) -> Optional[OutfitItem]:
        return self._items.get(item_id)

    def list_items(self) -> List[OutfitItem]:
        return list(self._items.values())

    def update(self, item_id: str, updated_fields: Dict[str, Any]) -> Optional[OutfitItem]:
        """Merge ``updated_fields`` into the item; unknown ids are a no-op."""

        current = self._items.get(item_id)
        if current is None:
            logger.info("Update skipped, item %s not found", item_id)
            return None
        updated = apply_updates(current, updated_fields)
        self._items[item_id] = updated
        return updated

    def remove(self, item_id: str) -> bool:
        removed = self._items.pop(item_id, None)
        if removed is None:
            logger.info("Remove skipped, item %s not found", item_id)
        return removed is not None


__all__ = ["ItemStore"]
