"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (or their listeners) to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.inventory import Inventory
from ims.domain.model.item import Item


def format_money(amount: float) -> str:
    """Format a dollar amount, e.g. ``$1,234.50``."""
    amount = round(amount, 2) + 0.0  # no "-0.00" from rounding drift
    return f"${amount:,.2f}"


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as displayed to the user."""

    name: str
    weight: float
    wholesale_price: str  # formatted, e.g. "$10.00"
    quantity: int
    storage_cost: str
    retail_price: str

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            name=item.name,
            weight=item.weight,
            wholesale_price=format_money(item.wholesale_price),
            quantity=item.quantity,
            storage_cost=format_money(item.storage_cost),
            retail_price=format_money(item.retail_price),
        )


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: the inventory totals."""

    total_products: int
    items_in_stock: int
    total_wholesale: str
    total_retail: str

    @staticmethod
    def from_inventory(inventory: Inventory) -> InventoryReportDTO:
        return InventoryReportDTO(
            total_products=inventory.total_products,
            items_in_stock=inventory.total_items_in_stock,
            total_wholesale=format_money(inventory.total_wholesale_value),
            total_retail=format_money(inventory.total_retail_value),
        )
