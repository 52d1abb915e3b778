from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence, Tuple

from catalog.models import Food
from catalog.services import CatalogService
from core_backend.exceptions import AmountTooLarge, InvalidQuantity, ItemNotFound
from payments.money import MAX_AMOUNT, ZERO, line_total


@dataclass(frozen=True)
class PricedLine:
    """A requested (food, quantity) pair resolved against the catalog."""

    food: Food
    quantity: int
    unit_price: Decimal

    @property
    def food_id(self):
        return self.food.pk

    @property
    def line_total(self) -> Decimal:
        return line_total(self.unit_price, self.quantity)


class PricingCalculator:
    """
    Prices order lines at the foods' current catalog prices.

    All arithmetic is Decimal; the total starts from exactly zero and is a
    plain sum, so the result does not depend on the order of the lines.
    Line totals and sums are capped at MAX_AMOUNT, the largest value the
    money columns store.
    """

    @staticmethod
    def price_lines(lines: Sequence[Tuple[object, int]]) -> List[PricedLine]:
        """
        Resolve every (food_id, quantity) pair with one catalog read.

        Returns the priced lines in input order.

        Raises:
            InvalidQuantity: a quantity is not a positive integer
            ItemNotFound: a food id is unknown or soft-deleted
            AmountTooLarge: a line total exceeds MAX_AMOUNT
        """
        for food_id, quantity in lines:
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise InvalidQuantity(food_id, quantity)

        foods = CatalogService.find_foods(food_id for food_id, _ in lines)

        priced = []
        for food_id, quantity in lines:
            food = foods.get(str(food_id))
            if food is None:
                raise ItemNotFound(food_id)
            line = PricedLine(food=food, quantity=quantity, unit_price=food.price)
            PricingCalculator.check_amount(line.line_total)
            priced.append(line)
        return priced

    @staticmethod
    def check_amount(amount: Decimal) -> Decimal:
        """
        Raises:
            AmountTooLarge: ``amount`` does not fit a money column
        """
        if amount > MAX_AMOUNT:
            raise AmountTooLarge(amount, MAX_AMOUNT)
        return amount

    @staticmethod
    def sum_lines(priced_lines: Iterable[PricedLine]) -> Decimal:
        total = ZERO
        for line in priced_lines:
            total += line.line_total
        return PricingCalculator.check_amount(total)

    @staticmethod
    def calculate_total(lines: Sequence[Tuple[object, int]]) -> Decimal:
        """Σ quantity × unit price over ``lines``; an empty sequence totals 0."""
        return PricingCalculator.sum_lines(PricingCalculator.price_lines(lines))
