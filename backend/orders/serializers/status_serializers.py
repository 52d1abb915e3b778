from rest_framework import serializers

from orders.models import Order
from payments.models import Transaction


class OrderUpdateSerializer(serializers.Serializer):
    """
    Request body of ``PATCH /api/orders/{id}/``.

    Every field is optional; omitted fields keep their current values.
    ``version`` asserts the version the client last read.
    """

    address = serializers.CharField(max_length=255, required=False)
    phoneNumber = serializers.CharField(source="phone_number", max_length=20, required=False)
    customerName = serializers.CharField(source="customer_name", max_length=255, required=False)
    paymentMethod = serializers.ChoiceField(
        source="payment_method", choices=Transaction.PaymentMethod.choices, required=False
    )
    orderStatus = serializers.ChoiceField(
        source="order_status", choices=Order.OrderStatus.choices, required=False
    )
    version = serializers.IntegerField(min_value=1, required=False)
