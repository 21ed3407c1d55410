"""Inventory aggregate: the collection of items and its running totals.

The inventory keeps three indices over the same item set (insertion id,
item identity, name) and four aggregates that are updated incrementally.
It subscribes to every item it holds, so changes made directly on an item
keep the indices and totals in step without any explicit call here.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Callable, Iterable, Iterator

from ims.domain.exceptions import DuplicateNameError, OwnershipError
from ims.domain.model.events import ChangePhase, ItemField, ItemListener, PropertyChange
from ims.domain.model.item import Item


class Inventory(ItemListener):
    """Aggregate root for a catalog of items.

    Invariants:
    - item names are unique within the inventory
    - every total equals the sum recomputed over the contained items
    - the id, identity and name indices always hold the same items
    """

    def __init__(self) -> None:
        self._items_by_id: dict[int, Item] = {}
        self._id_by_item: dict[Item, int] = {}
        self._items_by_name: dict[str, Item] = {}
        self._sorted_names: list[str] = []
        self._next_id = 0
        # Bumped whenever membership or names change; traversals check it.
        self._modifications = 0

        self._total_products = 0
        self._total_items_in_stock = 0
        self._total_wholesale_value = 0.0
        self._total_retail_value = 0.0

        self._handlers: dict[
            tuple[ChangePhase, ItemField], Callable[[PropertyChange], None]
        ] = {
            (ChangePhase.CHANGING, ItemField.NAME): self._reject_taken_name,
            (ChangePhase.CHANGED, ItemField.NAME): self._reindex_name,
            (ChangePhase.CHANGED, ItemField.QUANTITY): self._apply_quantity_change,
            (ChangePhase.CHANGED, ItemField.WHOLESALE_PRICE): self._apply_wholesale_price_change,
            (ChangePhase.CHANGED, ItemField.RETAIL_PRICE): self._apply_retail_price_change,
        }

    # --- Totals ---------------------------------------------------------------

    @property
    def total_products(self) -> int:
        return self._total_products

    @property
    def total_items_in_stock(self) -> int:
        return self._total_items_in_stock

    @property
    def total_wholesale_value(self) -> float:
        return self._total_wholesale_value

    @property
    def total_retail_value(self) -> float:
        return self._total_retail_value

    # --- Membership -----------------------------------------------------------

    def add(self, item: Item) -> None:
        """Add an item and start tracking its changes.

        Raises DuplicateNameError if another item already uses the name,
        and OwnershipError if the item is held by a different inventory.
        """
        if item.name in self._items_by_name:
            raise DuplicateNameError(item.name)
        if any(isinstance(listener, Inventory) for listener in item.listeners):
            raise OwnershipError(f"Item '{item.name}' already belongs to another inventory")

        item_id = self._next_id
        self._next_id += 1
        self._items_by_id[item_id] = item
        self._id_by_item[item] = item_id
        self._items_by_name[item.name] = item
        insort(self._sorted_names, item.name)
        self._modifications += 1

        quantity = item.quantity
        self._total_products += 1
        self._total_items_in_stock += quantity
        self._total_wholesale_value += quantity * item.wholesale_price
        self._total_retail_value += quantity * item.retail_price

        item.subscribe(self)

    def remove(self, item: Item) -> None:
        """Remove an item; does nothing if it is not in this inventory."""
        item_id = self._id_by_item.pop(item, None)
        if item_id is None:
            return

        del self._items_by_id[item_id]
        del self._items_by_name[item.name]
        self._discard_sorted_name(item.name)
        self._modifications += 1

        quantity = item.quantity
        self._total_products -= 1
        self._total_items_in_stock -= quantity
        self._total_wholesale_value -= quantity * item.wholesale_price
        self._total_retail_value -= quantity * item.retail_price
        if self._total_products == 0:
            self._total_wholesale_value = 0.0
            self._total_retail_value = 0.0

        item.unsubscribe(self)

    def contains(self, item: Item) -> bool:
        return item in self._id_by_item

    def get(self, name: str) -> Item | None:
        """Return the item with exactly this name, or None."""
        return self._items_by_name.get(name)

    def __contains__(self, item: object) -> bool:
        return item in self._id_by_item

    def __len__(self) -> int:
        return self._total_products

    # --- Traversal ------------------------------------------------------------

    def __iter__(self) -> Iterator[Item]:
        """Items in the order they were added."""
        return self._fail_fast(self._items_by_id.values())

    def sorted_by_name(self) -> Iterable[Item]:
        """Items in ascending name order.

        The returned view can be iterated any number of times and always
        reflects the inventory's current contents.
        """
        return _NameOrderView(self)

    def _iter_by_name(self) -> Iterator[Item]:
        return self._fail_fast(self._items_by_name[name] for name in self._sorted_names)

    def _fail_fast(self, items: Iterable[Item]) -> Iterator[Item]:
        # Read before the generator starts, so changes between iter() and
        # the first next() are caught too.
        expected = self._modifications

        def guarded() -> Iterator[Item]:
            source = iter(items)
            while True:
                if self._modifications != expected:
                    raise RuntimeError("Inventory changed during iteration")
                try:
                    item = next(source)
                except StopIteration:
                    return
                yield item

        return guarded()

    # --- ItemListener interface -----------------------------------------------

    def property_change(self, event: PropertyChange) -> None:
        handler = self._handlers.get((event.phase, event.field))
        if handler is not None:
            handler(event)

    def _reject_taken_name(self, event: PropertyChange) -> None:
        if event.new_value in self._items_by_name:
            raise DuplicateNameError(event.new_value)

    def _reindex_name(self, event: PropertyChange) -> None:
        del self._items_by_name[event.old_value]
        self._discard_sorted_name(event.old_value)
        self._items_by_name[event.new_value] = event.source
        insort(self._sorted_names, event.new_value)
        self._modifications += 1

    def _apply_quantity_change(self, event: PropertyChange) -> None:
        item = event.source
        delta = event.new_value - event.old_value
        self._total_items_in_stock += delta
        self._total_wholesale_value += delta * item.wholesale_price
        self._total_retail_value += delta * item.retail_price

    def _apply_wholesale_price_change(self, event: PropertyChange) -> None:
        self._total_wholesale_value += event.source.quantity * (event.new_value - event.old_value)

    def _apply_retail_price_change(self, event: PropertyChange) -> None:
        self._total_retail_value += event.source.quantity * (event.new_value - event.old_value)

    # --- Internal helpers -----------------------------------------------------

    def _discard_sorted_name(self, name: str) -> None:
        index = bisect_left(self._sorted_names, name)
        del self._sorted_names[index]


class _NameOrderView:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def __iter__(self) -> Iterator[Item]:
        return self._inventory._iter_by_name()

    def __len__(self) -> int:
        return len(self._inventory)
