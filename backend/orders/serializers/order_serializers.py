from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import Order, OrderDetail
from payments.models import Transaction

# Upper bound for a single order line
MAX_LINE_QUANTITY = 1000


class OrderDetailInputSerializer(serializers.Serializer):
    foodID = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY)


class OrderCreateSerializer(serializers.Serializer):
    """
    Request body of ``POST /api/orders/``.

    ``orderDetails`` may only be empty when ``comboID`` is given.
    """

    orderDetails = OrderDetailInputSerializer(many=True, required=False, default=list)
    comboID = serializers.UUIDField(required=False, allow_null=True, default=None)
    paymentMethod = serializers.ChoiceField(choices=Transaction.PaymentMethod.choices)
    address = serializers.CharField(max_length=255)
    phoneNumber = serializers.CharField(max_length=20)
    customerName = serializers.CharField(max_length=255)

    def to_service_kwargs(self):
        """Map the validated camelCase body onto OrderService.create_order arguments."""
        data = self.validated_data
        return {
            "delivery_info": {
                "address": data["address"],
                "phone_number": data["phoneNumber"],
                "customer_name": data["customerName"],
            },
            "order_details": [
                (detail["foodID"], detail["quantity"]) for detail in data["orderDetails"]
            ],
            "combo_id": data["comboID"],
            "payment_method": data["paymentMethod"],
        }


class OrderDetailSerializer(BaseModelSerializer):
    foodID = serializers.UUIDField(source="food_id", read_only=True)
    name = serializers.CharField(source="food.name", read_only=True)

    class Meta:
        model = OrderDetail
        fields = ["id", "foodID", "name", "quantity", "price"]
        read_only_fields = fields


class OrderLineSerializer(serializers.Serializer):
    """One entry of ``GET /api/orders/{id}/details/``."""

    foodID = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    calories = serializers.IntegerField()
    description = serializers.CharField()
    image = serializers.CharField()
    quantity = serializers.IntegerField()


class OrderSerializer(BaseModelSerializer):
    """
    Read representation of an order.

    ``paymentMethod`` comes from the ``payment_method`` annotation of listing
    querysets, from a transaction loaded with ``select_related``, or from a
    transaction lookup otherwise.
    """

    customerID = serializers.UUIDField(source="customer_id", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)
    customerName = serializers.CharField(source="customer_name", read_only=True)
    totalPrice = serializers.DecimalField(
        source="total_price", max_digits=10, decimal_places=2, read_only=True
    )
    orderStatus = serializers.CharField(source="status", read_only=True)
    paymentMethod = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customerID",
            "address",
            "phoneNumber",
            "customerName",
            "totalPrice",
            "orderStatus",
            "paymentMethod",
            "version",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields

    def get_paymentMethod(self, obj):
        if hasattr(obj, "payment_method"):
            return obj.payment_method
        if Order.transaction.is_cached(obj):
            txn = getattr(obj, "transaction", None)
        else:
            txn = Transaction.objects.filter(order_id=obj.pk).first()
        return txn.payment_method if txn else None


class OrderWithDetailsSerializer(OrderSerializer):
    details = OrderDetailSerializer(many=True, read_only=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["details"]
        read_only_fields = fields
        prefetch_related_fields = ["details__food"]
