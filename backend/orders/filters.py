import django_filters
from rest_framework.exceptions import ValidationError

from core_backend.base.filters import KeywordFilterSet
from .models import Order


class OrderFilter(KeywordFilterSet):
    """
    ``?keyword=`` matches the order id or the customer name; ``?status=``
    narrows to one status.
    """

    keyword_fields = ("id", "customer_name")

    status = django_filters.ChoiceFilter(choices=Order.OrderStatus.choices)

    class Meta:
        model = Order
        fields = ["status"]


def filter_orders(queryset, params):
    """Apply OrderFilter to ``queryset`` using query parameters ``params``."""
    filterset = OrderFilter(params, queryset=queryset)
    if not filterset.is_valid():
        raise ValidationError(filterset.errors)
    return filterset.qs
