"""Application service: List Items use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory


class ListItemsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, sort_by_name: bool = False) -> list[ItemDTO]:
        """Return every item, in insertion order unless sorted by name."""
        items = self._inventory.sorted_by_name() if sort_by_name else self._inventory
        return [ItemDTO.from_item(item) for item in items]
