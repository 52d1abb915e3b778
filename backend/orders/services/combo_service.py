from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from catalog.services import CatalogService
from core_backend.exceptions import ComboEmpty, ItemNotFound
from .pricing_service import PricedLine


@dataclass(frozen=True)
class ComboExpansion:
    combo_id: object
    price: Decimal
    constituents: List[PricedLine] = field(default_factory=list)


class ComboExpander:
    """Turns a combo into its price and the order lines it contributes."""

    @staticmethod
    def expand(combo_id) -> ComboExpansion:
        """
        Resolve the combo and validate every constituent food.

        Each constituent is priced at its food's current catalog price. The
        combo price itself is charged once by the caller.

        Raises:
            ComboNotFound: combo missing or soft-deleted
            ComboEmpty: combo has no items
            ItemNotFound: a constituent food is missing or soft-deleted
        """
        combo = CatalogService.get_combo(combo_id)

        items = CatalogService.find_combo_items(combo.pk)
        if not items:
            raise ComboEmpty(combo_id)

        constituents = []
        for item in items:
            if item.food.is_deleted:
                raise ItemNotFound(
                    item.food_id, f"Not found any food of combo item ID {item.pk}"
                )
            constituents.append(
                PricedLine(food=item.food, quantity=item.quantity, unit_price=item.food.price)
            )

        return ComboExpansion(combo_id=combo.pk, price=combo.price, constituents=constituents)
