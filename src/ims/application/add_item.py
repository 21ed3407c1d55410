"""Application service: Add Item use case."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.application.fields import parse_float, parse_int
from ims.domain.exceptions import ValidationError
from ims.domain.model.inventory import Inventory
from ims.domain.model.item import Item


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str, weight: str, wholesale_price: str, quantity: str) -> ItemDTO:
        """Create an item from form input and add it to the inventory."""
        if not name or not name.strip():
            raise ValidationError("Item name is required", field="name", rejected_value=name)

        item = Item(
            name=name.strip(),
            weight=parse_float("weight", weight),
            wholesale_price=parse_float("wholesale price", wholesale_price),
            quantity=parse_int("quantity", quantity),
        )
        self._inventory.add(item)
        return ItemDTO.from_item(item)
