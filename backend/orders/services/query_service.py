from django.db.models import OuterRef, Subquery

from core_backend.exceptions import NotFoundError
from orders.filters import filter_orders
from orders.models import Order, OrderDetail
from payments.models import Transaction
from users.models import Customer
from .lifecycle_service import OrderLifecycleService


class OrderQueryService:
    """Read side of orders: listings with keyword search, and order lines."""

    @staticmethod
    def base_queryset():
        """Live orders annotated with the payment method of their transaction."""
        payment_method = Transaction.objects.filter(order_id=OuterRef("pk")).values("payment_method")[:1]
        return Order.objects.annotate(payment_method=Subquery(payment_method))

    @staticmethod
    def list_orders(params=None):
        """
        Raises:
            NotFoundError: nothing matches
        """
        queryset = filter_orders(OrderQueryService.base_queryset(), params or {})
        if not queryset.exists():
            raise NotFoundError("No orders found")
        return queryset

    @staticmethod
    def list_customer_orders(customer_id, params=None):
        """
        Raises:
            NotFoundError: the customer has no matching orders
        """
        queryset = filter_orders(
            OrderQueryService.base_queryset().filter(customer_id=customer_id), params or {}
        )
        if not queryset.exists():
            customer = Customer.objects.filter(pk=customer_id).first()
            name = customer.full_name if customer else None
            raise NotFoundError(f"Current user {name} doesn't have any orders")
        return queryset

    @staticmethod
    def get_order_details(order_id) -> list:
        """
        Order lines with the ordered food's info and the price paid per unit.

        Raises:
            OrderNotFound: unknown or soft-deleted order
        """
        order = OrderLifecycleService.get_order(order_id)
        details = OrderDetail.objects.filter(order=order).select_related("food")
        return [
            {
                "foodID": detail.food_id,
                "name": detail.food.name,
                "price": detail.price,
                "calories": detail.food.calories,
                "description": detail.food.description,
                "image": detail.food.image,
                "quantity": detail.quantity,
            }
            for detail in details
        ]
