"""
Orders serializers package - modular serializer layer.
"""

# Order serializers
from .order_serializers import (
    OrderDetailInputSerializer,
    OrderCreateSerializer,
    OrderDetailSerializer,
    OrderLineSerializer,
    OrderSerializer,
    OrderWithDetailsSerializer,
)

# Status serializers
from .status_serializers import OrderUpdateSerializer

__all__ = [
    # Orders
    'OrderDetailInputSerializer',
    'OrderCreateSerializer',
    'OrderDetailSerializer',
    'OrderLineSerializer',
    'OrderSerializer',
    'OrderWithDetailsSerializer',
    # Status
    'OrderUpdateSerializer',
]
