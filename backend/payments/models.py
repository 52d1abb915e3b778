import uuid

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core_backend.utils.archiving import SoftDeleteMixin


class Transaction(SoftDeleteMixin):
    """
    The payment record of a single Order.

    Created together with its order; ``amount`` equals the order total at
    that moment. Its status follows the order's status.
    """

    class PaymentMethod(models.TextChoices):
        CASH = "CASH", _("Cash")
        CARD = "CARD", _("Card")
        E_WALLET = "E_WALLET", _("E-Wallet")

    class TransactionStatus(models.TextChoices):
        PENDING = "Pending", _("Pending")
        FINISHED = "Finished", _("Finished")
        CANCELLED = "Cancelled", _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.OneToOneField(
        "orders.Order", on_delete=models.CASCADE, related_name="transaction"
    )
    payment_method = models.CharField(
        max_length=20, choices=PaymentMethod.choices, default=PaymentMethod.CASH
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Order total at the time the transaction was created."),
    )
    status = models.CharField(
        max_length=10,
        choices=TransactionStatus.choices,
        default=TransactionStatus.PENDING,
    )
    transaction_date = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-transaction_date"]
        verbose_name = _("Transaction")
        verbose_name_plural = _("Transactions")

    def __str__(self):
        return f"Transaction {self.pk} for order {self.order_id} - {self.status}"
