import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from core_backend.exceptions import TransactionNotFound
from .models import Transaction

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Writes to an order's payment transaction.

    Each method expects to run inside the caller's atomic block, so the
    transaction row always changes together with its order.
    """

    # Order status -> transaction status; anything else maps to Pending
    STATUS_FOR_ORDER_STATUS = {
        "Finished": Transaction.TransactionStatus.FINISHED,
        "Cancelled": Transaction.TransactionStatus.CANCELLED,
    }

    @staticmethod
    def status_for_order_status(order_status: str) -> str:
        return TransactionService.STATUS_FOR_ORDER_STATUS.get(
            order_status, Transaction.TransactionStatus.PENDING
        )

    @staticmethod
    @transaction.atomic
    def create_for_order(order, amount: Decimal, payment_method: str) -> Transaction:
        txn = Transaction.objects.create(
            order=order,
            payment_method=payment_method,
            amount=amount,
            status=Transaction.TransactionStatus.PENDING,
            transaction_date=timezone.now(),
        )
        logger.info(f"Created transaction {txn.pk} for order {order.pk}: {amount} via {payment_method}")
        return txn

    @staticmethod
    def get_for_order(order_id, for_update: bool = False) -> Transaction:
        """
        Return the live transaction of an order.

        Raises:
            TransactionNotFound: the order has no (non-deleted) transaction
        """
        queryset = Transaction.objects.filter(order_id=order_id)
        if for_update:
            queryset = queryset.select_for_update()
        txn = queryset.first()
        if txn is None:
            raise TransactionNotFound(order_id)
        return txn

    @staticmethod
    @transaction.atomic
    def sync_with_order(order_id, order_status: str, payment_method: str = None) -> Transaction:
        """
        Mirror the order status onto its transaction and update the payment method.

        Raises:
            TransactionNotFound: the caller's atomic block is rolled back
        """
        txn = TransactionService.get_for_order(order_id, for_update=True)

        txn.status = TransactionService.status_for_order_status(order_status)
        update_fields = ["status", "updated_at"]
        if payment_method is not None:
            txn.payment_method = payment_method
            update_fields.append("payment_method")

        txn.save(update_fields=update_fields)
        return txn

    @staticmethod
    @transaction.atomic
    def soft_delete_for_order(order_id) -> int:
        """Soft-delete the order's transaction. Returns the number of rows flagged."""
        return Transaction.objects.filter(order_id=order_id).soft_delete()
