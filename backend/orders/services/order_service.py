import logging
from typing import Sequence, Tuple

from django.db import DatabaseError, transaction

from core_backend.exceptions import CustomerNotFound, EmptyOrder, PersistenceFailure
from orders.models import Order, OrderDetail
from payments.models import Transaction
from payments.services import TransactionService
from users.models import Customer
from .combo_service import ComboExpander
from .pricing_service import PricingCalculator

logger = logging.getLogger(__name__)


class OrderService:
    """Creates orders: header, lines and payment transaction as one unit."""

    @staticmethod
    def create_order(
        customer_id,
        delivery_info: dict,
        order_details: Sequence[Tuple[object, int]],
        combo_id=None,
        payment_method: str = Transaction.PaymentMethod.CASH,
    ) -> Order:
        """
        Price and persist a new order.

        ``delivery_info`` holds ``address``, ``phone_number`` and
        ``customer_name``; ``order_details`` is a sequence of
        (food_id, quantity) pairs. When ``combo_id`` is given the combo price
        is added to the total once and every combo item becomes an extra
        order line priced at its food's current price.

        Nothing is written unless every step succeeds.

        Raises:
            EmptyOrder: no order details and no combo
            CustomerNotFound, ItemNotFound, ComboNotFound, ComboEmpty, InvalidQuantity
            AmountTooLarge: a line or the order total does not fit a money column
            PersistenceFailure: the database rejected a write
        """
        if not order_details and combo_id is None:
            raise EmptyOrder()

        try:
            with transaction.atomic():
                order = OrderService._create_order(
                    customer_id, delivery_info, order_details, combo_id, payment_method
                )
        except DatabaseError as exc:
            logger.error(f"Order creation for customer {customer_id} rolled back: {exc}", exc_info=True)
            raise PersistenceFailure() from exc

        logger.info(
            f"Created order {order.pk} for customer {customer_id}: "
            f"{len(order_details)} line(s), combo={combo_id}, total={order.total_price}"
        )
        return (
            Order.objects.select_related("transaction")
            .prefetch_related("details__food")
            .get(pk=order.pk)
        )

    @staticmethod
    def _create_order(customer_id, delivery_info, order_details, combo_id, payment_method) -> Order:
        customer = Customer.objects.filter(pk=customer_id).first()
        if customer is None:
            raise CustomerNotFound(customer_id)

        priced_lines = PricingCalculator.price_lines(order_details)
        total = PricingCalculator.sum_lines(priced_lines)

        if combo_id is not None:
            expansion = ComboExpander.expand(combo_id)
            total = PricingCalculator.check_amount(total + expansion.price)
            priced_lines += expansion.constituents

        order = Order.objects.create(
            customer=customer,
            address=delivery_info.get("address", ""),
            phone_number=delivery_info.get("phone_number", ""),
            customer_name=delivery_info.get("customer_name", ""),
            total_price=total,
            status=Order.OrderStatus.PENDING,
        )

        OrderDetail.objects.bulk_create(
            [
                OrderDetail(
                    order=order,
                    food=line.food,
                    quantity=line.quantity,
                    price=line.unit_price,
                    line_number=position,
                )
                for position, line in enumerate(priced_lines)
            ]
        )

        TransactionService.create_for_order(order, amount=total, payment_method=payment_method)
        return order

