"""
Pricing Calculator Tests

Totals are exact Decimal sums over the foods' current catalog prices.
"""
import uuid
from decimal import Decimal

import pytest

from catalog.models import Food
from core_backend.exceptions import AmountTooLarge, InvalidQuantity, ItemNotFound
from orders.services import PricingCalculator
from payments.money import MAX_AMOUNT


@pytest.mark.django_db
class TestCalculateTotal:
    """Test total calculation over (food, quantity) lines"""

    def test_single_line(self, food_f1):
        total = PricingCalculator.calculate_total([(food_f1.pk, 2)])

        assert total == Decimal("20.00")
        assert isinstance(total, Decimal)

    def test_multiple_lines_are_summed(self, food_f1, food_f2):
        total = PricingCalculator.calculate_total([(food_f1.pk, 1), (food_f2.pk, 3)])

        assert total == Decimal("19.00")

    def test_empty_sequence_totals_zero(self):
        assert PricingCalculator.calculate_total([]) == Decimal("0")

    def test_total_does_not_depend_on_line_order(self, food_f1, food_f2):
        forward = PricingCalculator.calculate_total([(food_f1.pk, 2), (food_f2.pk, 1)])
        backward = PricingCalculator.calculate_total([(food_f2.pk, 1), (food_f1.pk, 2)])

        assert forward == backward == Decimal("23.00")

    def test_fractional_prices_have_no_float_drift(self):
        """
        0.10 + 0.20 must be exactly 0.30, which float arithmetic does not give.
        """
        dime = Food.objects.create(name="Mint", price=Decimal("0.10"))
        two_dimes = Food.objects.create(name="Basil", price=Decimal("0.20"))

        total = PricingCalculator.calculate_total([(dime.pk, 1), (two_dimes.pk, 1)])

        assert total == Decimal("0.30")

    def test_same_food_on_two_lines(self, food_f1):
        total = PricingCalculator.calculate_total([(food_f1.pk, 1), (food_f1.pk, 4)])

        assert total == Decimal("50.00")


@pytest.mark.django_db
class TestPriceLines:
    """Test resolution of individual lines"""

    def test_lines_keep_input_order_and_unit_price(self, food_f1, food_f2):
        lines = PricingCalculator.price_lines([(food_f2.pk, 1), (food_f1.pk, 2)])

        assert [line.food_id for line in lines] == [food_f2.pk, food_f1.pk]
        assert [line.unit_price for line in lines] == [Decimal("3.00"), Decimal("10.00")]
        assert lines[1].line_total == Decimal("20.00")

    def test_catalog_is_read_in_one_query(self, food_f1, food_f2, django_assert_num_queries):
        with django_assert_num_queries(1):
            PricingCalculator.price_lines([(food_f1.pk, 1), (food_f2.pk, 1), (food_f1.pk, 2)])

    def test_unknown_food_raises_item_not_found(self, food_f1):
        missing = uuid.uuid4()

        with pytest.raises(ItemNotFound) as exc_info:
            PricingCalculator.price_lines([(food_f1.pk, 1), (missing, 1)])

        assert exc_info.value.food_id == missing
        assert exc_info.value.kind == "NotFound"

    def test_soft_deleted_food_raises_item_not_found(self, food_f1):
        food_f1.soft_delete()

        with pytest.raises(ItemNotFound):
            PricingCalculator.calculate_total([(food_f1.pk, 1)])

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_rejected(self, food_f1, quantity):
        with pytest.raises(InvalidQuantity) as exc_info:
            PricingCalculator.calculate_total([(food_f1.pk, quantity)])

        assert exc_info.value.kind == "Validation"


@pytest.mark.django_db
class TestAmountLimit:
    """Amounts must fit the 10-digit, 2-decimal money columns"""

    def test_oversized_line_is_rejected(self, food_f1):
        with pytest.raises(AmountTooLarge) as exc_info:
            PricingCalculator.price_lines([(food_f1.pk, 10**9)])

        assert exc_info.value.kind == "Validation"
        assert exc_info.value.amount == Decimal("10000000000.00")

    def test_lines_that_fit_but_sum_over_the_limit(self):
        luxury = Food.objects.create(name="Golden Lobster", price=Decimal("60000000.00"))

        lines = PricingCalculator.price_lines([(luxury.pk, 1), (luxury.pk, 1)])
        with pytest.raises(AmountTooLarge):
            PricingCalculator.sum_lines(lines)

    def test_total_at_the_limit_is_accepted(self):
        luxury = Food.objects.create(name="Golden Lobster", price=MAX_AMOUNT)

        assert PricingCalculator.calculate_total([(luxury.pk, 1)]) == MAX_AMOUNT
