"""Change notifications emitted by items.

Every mutating call on an Item produces a two-phase event pair: a
``CHANGING`` event before anything is applied (listeners may veto by
raising) and a ``CHANGED`` event once the new value is in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ims.domain.model.item import Item


class ItemField(Enum):
    NAME = "name"
    WEIGHT = "weight"
    WHOLESALE_PRICE = "wholesale_price"
    QUANTITY = "quantity"
    STORAGE_COST = "storage_cost"
    RETAIL_PRICE = "retail_price"


class ChangePhase(Enum):
    CHANGING = "CHANGING"
    CHANGED = "CHANGED"


@dataclass(frozen=True)
class PropertyChange:
    """A single field transition on an item."""

    phase: ChangePhase
    source: Item
    field: ItemField
    old_value: object
    new_value: object


class ItemListener(ABC):
    """Receives change notifications from the items it subscribes to."""

    @abstractmethod
    def property_change(self, event: PropertyChange) -> None:
        """Handle one event.

        Raising during a ``CHANGING`` event rejects the pending change;
        the exception reaches the caller of the item's setter.
        """
