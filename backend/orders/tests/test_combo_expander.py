"""
Combo Expander Tests
"""
import uuid
from decimal import Decimal

import pytest

from catalog.models import ComboItem
from core_backend.exceptions import ComboEmpty, ComboNotFound, ItemNotFound
from orders.services import ComboExpander


@pytest.mark.django_db
class TestComboExpansion:

    def test_expands_price_and_constituents(self, combo_c1, food_f2):
        expansion = ComboExpander.expand(combo_c1.pk)

        assert expansion.combo_id == combo_c1.pk
        assert expansion.price == Decimal("5.00")
        assert len(expansion.constituents) == 1

        line = expansion.constituents[0]
        assert line.food_id == food_f2.pk
        assert line.quantity == 1
        # Constituents are priced at the food's catalog price, not the combo's
        assert line.unit_price == Decimal("3.00")

    def test_one_constituent_per_combo_item(self, combo_c1, food_f1):
        ComboItem.objects.create(combo=combo_c1, food=food_f1, quantity=2)

        expansion = ComboExpander.expand(combo_c1.pk)

        assert len(expansion.constituents) == 2
        assert sorted(line.quantity for line in expansion.constituents) == [1, 2]

    def test_unknown_combo(self):
        with pytest.raises(ComboNotFound):
            ComboExpander.expand(uuid.uuid4())

    def test_soft_deleted_combo(self, combo_c1):
        combo_c1.soft_delete()

        with pytest.raises(ComboNotFound):
            ComboExpander.expand(combo_c1.pk)

    def test_combo_without_items(self, empty_combo):
        with pytest.raises(ComboEmpty) as exc_info:
            ComboExpander.expand(empty_combo.pk)

        assert exc_info.value.kind == "NotFound"

    def test_soft_deleted_constituent_food(self, combo_c1, food_f2):
        food_f2.soft_delete()

        with pytest.raises(ItemNotFound) as exc_info:
            ComboExpander.expand(combo_c1.pk)

        assert exc_info.value.food_id == food_f2.pk
