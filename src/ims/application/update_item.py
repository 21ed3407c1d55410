"""Application service: Update Item use case."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.application.fields import parse_float, parse_int
from ims.domain.exceptions import DuplicateNameError, EntityNotFoundError
from ims.domain.model.inventory import Inventory
from ims.domain.model.item import Item


class UpdateItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        name: str,
        new_name: str | None = None,
        weight: str | None = None,
        wholesale_price: str | None = None,
        quantity: str | None = None,
    ) -> ItemDTO:
        """Change any of an item's base values.

        Uses a two-phase approach:
          Phase 1: parse and validate every supplied value, and make sure
                   the new name is free.  Fails before any mutation.
          Phase 2: apply the values through the item's setters; the
                   inventory follows along through its listener.
        """
        item = self._inventory.get(name)
        if item is None:
            raise EntityNotFoundError(f"Item not found: '{name}'")

        # Phase 1: parse and validate
        if new_name is not None:
            new_name = Item.validate_name(new_name).strip()
            other = self._inventory.get(new_name)
            if other is not None and other is not item:
                raise DuplicateNameError(new_name)
        new_weight = (
            Item.validate_weight(parse_float("weight", weight)) if weight is not None else None
        )
        new_price = (
            Item.validate_wholesale_price(parse_float("wholesale price", wholesale_price))
            if wholesale_price is not None
            else None
        )
        new_quantity = (
            Item.validate_quantity(parse_int("quantity", quantity)) if quantity is not None else None
        )

        # Phase 2: apply
        if new_name is not None:
            item.set_name(new_name)
        if new_weight is not None:
            item.set_weight(new_weight)
        if new_price is not None:
            item.set_wholesale_price(new_price)
        if new_quantity is not None:
            item.set_quantity(new_quantity)

        return ItemDTO.from_item(item)
