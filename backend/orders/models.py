import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.utils.archiving import SoftDeleteMixin


class Order(SoftDeleteMixin):
    """
    A customer's order header.

    ``total_price`` is derived from the order lines (plus a combo price, if
    one was ordered) when the order is created and never recomputed.
    Orders are only ever soft-deleted.
    """

    class OrderStatus(models.TextChoices):
        PENDING = "Pending", _("Pending")  # Placed, awaiting fulfilment
        FINISHED = "Finished", _("Finished")  # Delivered and paid
        CANCELLED = "Cancelled", _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        "users.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )

    # --- Delivery info ---
    address = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=20)
    customer_name = models.CharField(max_length=255)

    total_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text=_("Sum of all order lines plus the combo price, fixed at creation."),
    )
    status = models.CharField(
        max_length=10, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )
    version = models.PositiveIntegerField(
        default=1,
        help_text=_("Incremented on every update; used to detect concurrent edits."),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        indexes = [
            models.Index(fields=["customer", "is_deleted"], name="order_cust_deleted_idx"),
            models.Index(fields=["status", "created_at"], name="order_stat_created_idx"),
        ]

    def __str__(self):
        return f"Order {self.pk} - {self.status}"

    @property
    def is_closed(self):
        return self.status in (self.OrderStatus.FINISHED, self.OrderStatus.CANCELLED)


class OrderDetail(SoftDeleteMixin):
    """
    One line of an order. ``price`` is the food's unit price at the moment
    the order was placed; later catalog changes do not touch it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="details")
    food = models.ForeignKey(
        "catalog.Food", on_delete=models.PROTECT, related_name="order_details"
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Unit price snapshot taken when the order was created."),
    )
    line_number = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["order", "line_number"]

    def __str__(self):
        return f"{self.quantity} x {self.food_id} @ {self.price}"

    @property
    def line_total(self):
        return self.quantity * self.price
