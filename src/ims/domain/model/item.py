"""Item entity: a priced, weighed good held in an inventory.

An item knows its own base values (name, weight, wholesale price,
quantity) and derives storage cost and retail price from them. Every
change goes through a setter that validates, notifies listeners, and
only then applies the value.
"""

from __future__ import annotations

import math

from ims.domain.exceptions import ValidationError
from ims.domain.model.events import ChangePhase, ItemField, ItemListener, PropertyChange

# ---------------------------------------------------------------------------
# Constants for pricing rules
# ---------------------------------------------------------------------------
STORAGE_RATE = 4.00  # dollars per pound
MARKUP_FACTOR = 1.85

_ATTRIBUTES = {
    ItemField.NAME: "_name",
    ItemField.WEIGHT: "_weight",
    ItemField.WHOLESALE_PRICE: "_wholesale_price",
    ItemField.QUANTITY: "_quantity",
    ItemField.STORAGE_COST: "_storage_cost",
    ItemField.RETAIL_PRICE: "_retail_price",
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def storage_cost_for(weight: float) -> float:
    return weight * STORAGE_RATE


def retail_price_for(wholesale_price: float, storage_cost: float) -> float:
    return wholesale_price * MARKUP_FACTOR + storage_cost


class Item:
    """A good tracked by an inventory.

    Items compare by identity: two items with the same values are still
    two different items. Read values through the properties and change
    them through the ``set_*`` methods only.
    """

    def __init__(
        self,
        name: str,
        weight: float,
        wholesale_price: float,
        quantity: int,
    ) -> None:
        self._name = self.validate_name(name)
        self._weight = self.validate_weight(weight)
        self._wholesale_price = self.validate_wholesale_price(wholesale_price)
        self._quantity = self.validate_quantity(quantity)
        self._storage_cost = storage_cost_for(self._weight)
        self._retail_price = retail_price_for(self._wholesale_price, self._storage_cost)
        self._listeners: list[ItemListener] = []

    # --- Read access ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def wholesale_price(self) -> float:
        return self._wholesale_price

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def storage_cost(self) -> float:
        """Cost of storing one unit, based on weight."""
        return self._storage_cost

    @property
    def retail_price(self) -> float:
        """Sale price of one unit: marked-up wholesale price plus storage."""
        return self._retail_price

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def validate_name(name: object) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(
                "Item name is required", field=ItemField.NAME.value, rejected_value=name
            )
        if "\n" in name or "\r" in name:
            raise ValidationError(
                "Item name cannot contain line breaks",
                field=ItemField.NAME.value,
                rejected_value=name,
            )
        return name

    @staticmethod
    def validate_weight(weight: object) -> float:
        if not _is_number(weight):
            raise ValidationError(
                f"Weight must be a number, got {type(weight).__name__}",
                field=ItemField.WEIGHT.value,
                rejected_value=weight,
            )
        if not weight > 0:
            raise ValidationError(
                "Weight cannot be less than or equal to 0",
                field=ItemField.WEIGHT.value,
                rejected_value=weight,
            )
        if not math.isfinite(weight):
            raise ValidationError(
                "Weight must be a finite number",
                field=ItemField.WEIGHT.value,
                rejected_value=weight,
            )
        return float(weight)

    @staticmethod
    def validate_wholesale_price(price: object) -> float:
        if not _is_number(price):
            raise ValidationError(
                f"Wholesale price must be a number, got {type(price).__name__}",
                field=ItemField.WHOLESALE_PRICE.value,
                rejected_value=price,
            )
        if not price >= 0:
            raise ValidationError(
                "Wholesale price cannot be negative",
                field=ItemField.WHOLESALE_PRICE.value,
                rejected_value=price,
            )
        if not math.isfinite(price):
            raise ValidationError(
                "Wholesale price must be a finite number",
                field=ItemField.WHOLESALE_PRICE.value,
                rejected_value=price,
            )
        return float(price)

    @staticmethod
    def validate_quantity(quantity: object) -> int:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}",
                field=ItemField.QUANTITY.value,
                rejected_value=quantity,
            )
        if quantity < 0:
            raise ValidationError(
                "Quantity cannot be negative",
                field=ItemField.QUANTITY.value,
                rejected_value=quantity,
            )
        return quantity

    # --- Mutation -------------------------------------------------------------

    def set_name(self, name: str) -> None:
        """Rename the item.

        A listening inventory rejects names already in use by raising
        DuplicateNameError before the name changes.
        """
        name = self.validate_name(name)
        if name == self._name:
            return
        self._change(ItemField.NAME, name)

    def set_weight(self, weight: float) -> None:
        """Change the weight; storage cost and retail price follow."""
        weight = self.validate_weight(weight)
        if weight == self._weight:
            return
        storage_cost = storage_cost_for(weight)
        self._change(
            ItemField.WEIGHT,
            weight,
            {
                ItemField.STORAGE_COST: storage_cost,
                ItemField.RETAIL_PRICE: retail_price_for(self._wholesale_price, storage_cost),
            },
        )

    def set_wholesale_price(self, price: float) -> None:
        """Change the wholesale price; retail price follows."""
        price = self.validate_wholesale_price(price)
        if price == self._wholesale_price:
            return
        self._change(
            ItemField.WHOLESALE_PRICE,
            price,
            {ItemField.RETAIL_PRICE: retail_price_for(price, self._storage_cost)},
        )

    def set_quantity(self, quantity: int) -> None:
        quantity = self.validate_quantity(quantity)
        if quantity == self._quantity:
            return
        self._change(ItemField.QUANTITY, quantity)

    # --- Listeners ------------------------------------------------------------

    @property
    def listeners(self) -> tuple[ItemListener, ...]:
        return tuple(self._listeners)

    def subscribe(self, listener: ItemListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ItemListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Display --------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Item(name={self._name!r}, weight={self._weight!r}, "
            f"wholesale_price={self._wholesale_price!r}, quantity={self._quantity!r})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _change(
        self,
        field: ItemField,
        value: object,
        derived: dict[ItemField, float] | None = None,
    ) -> None:
        """Notify, apply, notify.

        Every CHANGING event is delivered before anything is written, so a
        veto leaves the item untouched. CHANGED events go out once all
        values are in place: derived fields first, the primary field last.
        """
        changes = [(field, getattr(self, _ATTRIBUTES[field]), value)]
        for derived_field, new_value in (derived or {}).items():
            old_value = getattr(self, _ATTRIBUTES[derived_field])
            if new_value != old_value:
                changes.append((derived_field, old_value, new_value))

        for changed_field, old_value, new_value in changes:
            self._notify(ChangePhase.CHANGING, changed_field, old_value, new_value)

        for changed_field, _, new_value in changes:
            setattr(self, _ATTRIBUTES[changed_field], new_value)

        for changed_field, old_value, new_value in changes[1:] + changes[:1]:
            self._notify(ChangePhase.CHANGED, changed_field, old_value, new_value)

    def _notify(
        self,
        phase: ChangePhase,
        field: ItemField,
        old_value: object,
        new_value: object,
    ) -> None:
        event = PropertyChange(phase, self, field, old_value, new_value)
        for listener in list(self._listeners):
            listener.property_change(event)
