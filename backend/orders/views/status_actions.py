from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import OrderSerializer, OrderUpdateSerializer
from orders.services import OrderLifecycleService


class StatusActionsMixin:
    """
    Mixin for order edits, status transitions and soft deletion.

    Both actions check object permissions against the live order first, so a
    customer can only touch their own orders.
    """

    def partial_update(self, request: Request, pk=None) -> Response:
        """
        Edits delivery info, payment method and/or status of an open order.
        The linked transaction follows the new status in the same commit.
        """
        self.get_object()
        serializer = OrderUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderLifecycleService.update_order(pk, serializer.validated_data)
        return Response(
            {
                "message": "Update order successfully",
                "order": OrderSerializer(order, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_200_OK,
        )

    def destroy(self, request: Request, pk=None) -> Response:
        """Soft-deletes the order along with its details and transaction."""
        self.get_object()
        OrderLifecycleService.soft_delete_order(pk)
        return Response({"message": f"Order ID {pk} is removed"}, status=status.HTTP_200_OK)
