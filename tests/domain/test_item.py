"""Unit tests for the Item entity."""

import pytest

from ims.domain.exceptions import DomainException, ValidationError
from ims.domain.model.events import ChangePhase, ItemField
from ims.domain.model.item import MARKUP_FACTOR, STORAGE_RATE, Item
from tests.fakes import RecordingListener, VetoingListener


def _widget() -> Item:
    return Item(name="W", weight=2, wholesale_price=10, quantity=3)


# ── Construction ─────────────────────────────────────────────────────────────


class TestItemCreation:

    def test_derived_values(self):
        item = _widget()
        assert item.storage_cost == pytest.approx(8.00)
        assert item.retail_price == pytest.approx(26.50)

    def test_pricing_constants(self):
        assert STORAGE_RATE == 4.00
        assert MARKUP_FACTOR == 1.85

    def test_numbers_stored_as_floats(self):
        item = _widget()
        assert isinstance(item.weight, float)
        assert isinstance(item.wholesale_price, float)
        assert item.quantity == 3

    def test_zero_weight_rejected(self):
        with pytest.raises(ValidationError, match="less than or equal to 0") as info:
            Item("W", 0, 10, 3)
        assert info.value.field == "weight"
        assert info.value.rejected_value == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative") as info:
            Item("W", 1, -0.01, 3)
        assert info.value.field == "wholesale_price"

    def test_free_item_allowed(self):
        item = Item("Sample", 1, 0, 0)
        assert item.retail_price == pytest.approx(4.00)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative") as info:
            Item("W", 1, 1, -1)
        assert info.value.field == "quantity"
        assert info.value.rejected_value == -1

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Item("W", 1, 1, 2.5)

    def test_bool_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Item("W", 1, 1, True)

    def test_nan_weight_rejected(self):
        with pytest.raises(ValidationError):
            Item("W", float("nan"), 1, 1)

    def test_text_weight_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            Item("W", "2", 1, 1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Item("   ", 1, 1, 1)

    @pytest.mark.parametrize("name", ["a\nb", "a\rb", "trailing\n"])
    def test_name_with_line_break_rejected(self, name):
        with pytest.raises(ValidationError, match="line breaks") as exc_info:
            Item(name, 1, 1, 1)
        assert exc_info.value.field == "name"

    def test_infinite_weight_rejected(self):
        with pytest.raises(ValidationError, match="finite") as exc_info:
            Item("W", float("inf"), 1, 1)
        assert exc_info.value.field == "weight"

    def test_infinite_wholesale_price_rejected(self):
        with pytest.raises(ValidationError, match="finite") as exc_info:
            Item("W", 1, float("inf"), 1)
        assert exc_info.value.field == "wholesale_price"

    def test_items_compare_by_identity(self):
        assert _widget() != _widget()


# ── Setters ──────────────────────────────────────────────────────────────────


class TestItemSetters:

    def test_set_weight_updates_derived_values(self):
        item = _widget()
        item.set_weight(3)
        assert item.weight == 3.0
        assert item.storage_cost == pytest.approx(12.00)
        assert item.retail_price == pytest.approx(10 * 1.85 + 12.00)

    def test_set_wholesale_price_updates_retail_price(self):
        item = _widget()
        item.set_wholesale_price(20)
        assert item.storage_cost == pytest.approx(8.00)
        assert item.retail_price == pytest.approx(20 * 1.85 + 8.00)

    def test_set_quantity(self):
        item = _widget()
        item.set_quantity(0)
        assert item.quantity == 0

    def test_set_name(self):
        item = _widget()
        item.set_name("Widget")
        assert item.name == "Widget"

    def test_invalid_value_leaves_state_unchanged(self):
        item = _widget()
        with pytest.raises(ValidationError):
            item.set_weight(-1)
        with pytest.raises(ValidationError):
            item.set_wholesale_price(-1)
        with pytest.raises(ValidationError):
            item.set_quantity(-1)
        assert (item.weight, item.wholesale_price, item.quantity) == (2.0, 10.0, 3)
        assert item.retail_price == pytest.approx(26.50)

    def test_line_break_rename_leaves_name_unchanged(self):
        item = _widget()
        with pytest.raises(ValidationError):
            item.set_name("x\ny")
        assert item.name == "W"

    def test_infinite_values_leave_state_unchanged(self):
        item = _widget()
        with pytest.raises(ValidationError):
            item.set_weight(float("inf"))
        with pytest.raises(ValidationError):
            item.set_wholesale_price(float("inf"))
        assert (item.weight, item.wholesale_price) == (2.0, 10.0)
        assert item.retail_price == pytest.approx(26.50)


# ── Notifications ────────────────────────────────────────────────────────────


class TestItemNotifications:

    def test_quantity_change_emits_pair(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)

        item.set_quantity(5)

        assert listener.summary() == [("CHANGING", "quantity"), ("CHANGED", "quantity")]
        changed = listener.events[-1]
        assert changed.source is item
        assert (changed.old_value, changed.new_value) == (3, 5)

    def test_weight_change_cascades(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)

        item.set_weight(3)

        assert listener.summary() == [
            ("CHANGING", "weight"),
            ("CHANGING", "storage_cost"),
            ("CHANGING", "retail_price"),
            ("CHANGED", "storage_cost"),
            ("CHANGED", "retail_price"),
            ("CHANGED", "weight"),
        ]
        retail = listener.events[4]
        assert retail.old_value == pytest.approx(26.50)
        assert retail.new_value == pytest.approx(30.50)

    def test_wholesale_price_change_cascades_to_retail_only(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)

        item.set_wholesale_price(12)

        assert listener.summary() == [
            ("CHANGING", "wholesale_price"),
            ("CHANGING", "retail_price"),
            ("CHANGED", "retail_price"),
            ("CHANGED", "wholesale_price"),
        ]

    def test_all_pre_change_events_precede_post_change_events(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)

        item.set_weight(5)

        phases = [e.phase for e in listener.events]
        first_changed = phases.index(ChangePhase.CHANGED)
        assert ChangePhase.CHANGING not in phases[first_changed:]

    def test_values_not_applied_during_pre_change(self):
        item = _widget()
        seen = []

        class Peek(RecordingListener):
            def property_change(self, event):
                if event.phase is ChangePhase.CHANGING:
                    seen.append((item.weight, item.storage_cost))

        item.subscribe(Peek())
        item.set_weight(4)
        assert seen == [(2.0, 8.0)] * 3

    def test_derived_values_applied_before_post_change(self):
        item = _widget()
        seen = []

        class Peek(RecordingListener):
            def property_change(self, event):
                if event.phase is ChangePhase.CHANGED:
                    seen.append(item.retail_price)

        item.subscribe(Peek())
        item.set_weight(4)
        assert seen == [pytest.approx(34.50)] * 3

    def test_same_value_is_silent_noop(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)

        item.set_name("W")
        item.set_weight(2)
        item.set_wholesale_price(10.0)
        item.set_quantity(3)

        assert listener.events == []

    def test_invalid_value_emits_nothing(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)
        with pytest.raises(ValidationError):
            item.set_weight(0)
        assert listener.events == []

    def test_veto_aborts_change(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(VetoingListener(ItemField.WEIGHT))
        item.subscribe(listener)

        with pytest.raises(DomainException, match="locked"):
            item.set_weight(9)

        assert item.weight == 2.0
        assert item.storage_cost == pytest.approx(8.00)
        assert all(e.phase is ChangePhase.CHANGING for e in listener.events)

    def test_unsubscribe_stops_events(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)
        item.unsubscribe(listener)
        item.set_quantity(10)
        assert listener.events == []

    def test_subscribe_is_idempotent(self):
        item = _widget()
        listener = RecordingListener()
        item.subscribe(listener)
        item.subscribe(listener)
        assert item.listeners == (listener,)
