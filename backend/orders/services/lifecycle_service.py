import logging

from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils import timezone

from core_backend.exceptions import (
    ConcurrentUpdate,
    OrderClosed,
    OrderNotFound,
    PersistenceFailure,
    ValidationFailed,
)
from orders.models import Order, OrderDetail
from payments.services import TransactionService

logger = logging.getLogger(__name__)


class OrderLifecycleService:
    """
    Status transitions, delivery-info edits and soft deletion of orders.

    An order's transaction changes in the same atomic block as the order, so
    the two never disagree about the order's status.
    """

    # Valid status transitions for the order state machine
    VALID_STATUS_TRANSITIONS = {
        Order.OrderStatus.PENDING: [
            Order.OrderStatus.PENDING,
            Order.OrderStatus.FINISHED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.FINISHED: [],
        Order.OrderStatus.CANCELLED: [],
    }

    EDITABLE_FIELDS = ("address", "phone_number", "customer_name")

    @staticmethod
    def get_order(order_id) -> Order:
        """
        Raises:
            OrderNotFound: unknown or soft-deleted order
        """
        order = Order.objects.filter(pk=order_id).select_related("customer").first()
        if order is None:
            raise OrderNotFound(order_id)
        return order

    @staticmethod
    def validate_transition(current_status: str, new_status: str):
        if current_status not in OrderLifecycleService.VALID_STATUS_TRANSITIONS:
            raise ValidationFailed(f"'{current_status}' is not a valid order status.")
        if new_status not in Order.OrderStatus.values:
            raise ValidationFailed(f"'{new_status}' is not a valid order status.")
        if not OrderLifecycleService.VALID_STATUS_TRANSITIONS[current_status]:
            raise OrderClosed()
        if new_status not in OrderLifecycleService.VALID_STATUS_TRANSITIONS[current_status]:
            raise ValidationFailed(f"Cannot transition order from {current_status} to {new_status}.")

    @staticmethod
    def update_order(order_id, changes: dict) -> Order:
        """
        Edit delivery info, payment method and/or status of an open order.

        ``changes`` may hold ``address``, ``phone_number``, ``customer_name``,
        ``payment_method``, ``order_status`` and ``version``. Omitted fields
        keep their current values; the status only changes when
        ``order_status`` is given. The transaction's status is set to mirror
        the order's (Finished and Cancelled carry over, anything else is
        Pending).

        The write is conditional on the order's ``version``: if another
        request updated the order after it was read (or the caller's
        ``version`` is stale) nothing is written.

        Raises:
            OrderNotFound: unknown or soft-deleted order
            OrderClosed: the order is Finished or Cancelled
            ConcurrentUpdate: the order's version moved on
            TransactionNotFound: the order has no transaction; nothing is written
            PersistenceFailure: the database rejected a write
        """
        try:
            with transaction.atomic():
                order = OrderLifecycleService._update_order(order_id, changes)
        except DatabaseError as exc:
            logger.error(f"Update of order {order_id} rolled back: {exc}", exc_info=True)
            raise PersistenceFailure() from exc
        return order

    @staticmethod
    def _update_order(order_id, changes: dict) -> Order:
        order = OrderLifecycleService.get_order(order_id)

        if order.is_closed:
            raise OrderClosed()

        expected_version = changes.get("version")
        if expected_version is not None and expected_version != order.version:
            raise ConcurrentUpdate(order_id)

        new_status = changes.get("order_status") or order.status
        OrderLifecycleService.validate_transition(order.status, new_status)

        values = {"status": new_status}
        for field in OrderLifecycleService.EDITABLE_FIELDS:
            value = changes.get(field)
            values[field] = getattr(order, field) if value is None else value

        updated = Order.objects.filter(
            pk=order.pk, version=order.version, status=order.status
        ).update(
            **values,
            version=F("version") + 1,
            updated_at=timezone.now(),
        )
        if updated == 0:
            raise ConcurrentUpdate(order_id)

        # Raises TransactionNotFound and rolls the order update back with it
        TransactionService.sync_with_order(
            order.pk, new_status, payment_method=changes.get("payment_method")
        )

        if new_status != order.status:
            logger.info(f"Order {order.pk} moved from {order.status} to {new_status}")
        else:
            logger.info(f"Order {order.pk} updated")

        return Order.objects.select_related("transaction").get(pk=order.pk)

    @staticmethod
    def soft_delete_order(order_id) -> Order:
        """
        Soft-delete an order together with its details and transaction.

        Foods and combos referenced by the order are not touched.

        Raises:
            OrderNotFound: unknown or already deleted order
            PersistenceFailure: the database rejected a write
        """
        try:
            with transaction.atomic():
                order = Order.objects.select_for_update().filter(pk=order_id).first()
                if order is None:
                    raise OrderNotFound(order_id)

                details = OrderDetail.objects.filter(order_id=order.pk).soft_delete()
                TransactionService.soft_delete_for_order(order.pk)
                order.soft_delete()
        except DatabaseError as exc:
            logger.error(f"Soft delete of order {order_id} rolled back: {exc}", exc_info=True)
            raise PersistenceFailure() from exc

        logger.info(f"Soft-deleted order {order.pk} with {details} detail(s)")
        return order
