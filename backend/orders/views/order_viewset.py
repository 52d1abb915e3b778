import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseViewSet, IsOwnerOrStaff, IsStaffRole
from core_backend.pagination import StandardPagination
from orders.models import Order
from orders.serializers import (
    OrderCreateSerializer,
    OrderLineSerializer,
    OrderSerializer,
    OrderWithDetailsSerializer,
)
from orders.services import OrderQueryService, OrderService
from .status_actions import StatusActionsMixin

logger = logging.getLogger(__name__)


class OrderPagination(StandardPagination):
    results_key = "orders"


class OrderViewSet(StatusActionsMixin, BaseViewSet):
    """
    ViewSet for placing and managing orders.

    Customers see and edit only their own orders; staff and admins see all.
    Status edits and deletion live in StatusActionsMixin.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    permission_classes = [IsOwnerOrStaff]
    pagination_class = OrderPagination
    # Keyword/status filtering is applied by OrderQueryService
    filter_backends = []
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_owner_id(self, obj):
        return obj.customer_id

    def get_permissions(self):
        if self.action == "list":
            return [IsStaffRole()]
        return super().get_permissions()

    def get_serializer_class(self):
        if self.action == "create":
            return OrderCreateSerializer
        if self.action == "retrieve":
            return OrderWithDetailsSerializer
        return OrderSerializer

    def _paginated(self, queryset) -> Response:
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(OrderSerializer(page, many=True).data)
        return Response(OrderSerializer(queryset, many=True).data)

    def list(self, request: Request, *args, **kwargs) -> Response:
        """All orders; staff and admin only."""
        return self._paginated(OrderQueryService.list_orders(request.query_params))

    @action(detail=False, methods=["get"])
    def mine(self, request: Request) -> Response:
        """Orders placed by the signed-in customer."""
        return self._paginated(
            OrderQueryService.list_customer_orders(request.user.pk, request.query_params)
        )

    def retrieve(self, request: Request, pk=None) -> Response:
        order = self.get_object()
        serializer = OrderWithDetailsSerializer(order, context=self.get_serializer_context())
        return Response(serializer.data)

    def create(self, request: Request, *args, **kwargs) -> Response:
        """
        Places an order for the signed-in customer. The customer id always
        comes from the access token, never from the body.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderService.create_order(customer_id=request.user.pk, **serializer.to_service_kwargs())

        response_serializer = OrderWithDetailsSerializer(order, context=self.get_serializer_context())
        return Response(
            {"message": "Create order successfully", "order": response_serializer.data},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["get"])
    def details(self, request: Request, pk=None) -> Response:
        """Order lines with food info and the unit price charged."""
        self.get_object()
        lines = OrderQueryService.get_order_details(pk)
        return Response(OrderLineSerializer(lines, many=True).data)
