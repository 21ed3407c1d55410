"""Application service: Show Item use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.inventory import Inventory


class ShowItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> ItemDTO:
        item = self._inventory.get(name)
        if item is None:
            raise EntityNotFoundError(f"Item not found: '{name}'")
        return ItemDTO.from_item(item)
