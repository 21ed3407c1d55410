"""Application service: Remove Item use case."""

from __future__ import annotations

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.inventory import Inventory


class RemoveItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> None:
        item = self._inventory.get(name)
        if item is None:
            raise EntityNotFoundError(f"Item not found: '{name}'")
        self._inventory.remove(item)
