from rest_framework import permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response

from core_backend.base import BaseViewSet, ReadOnlyBaseViewSet, IsStaffOrReadOnly
from core_backend.base.serializers import optimize_queryset
from .models import Food, Combo, Ingredient
from .serializers import (
    FoodSerializer,
    ComboSerializer,
    IngredientSerializer,
    IngredientUpdateSerializer,
    FoodIngredientSerializer,
)
from .services import IngredientService


class FoodViewSet(ReadOnlyBaseViewSet):
    """
    Public menu of dishes.
    """

    queryset = Food.objects.all()
    serializer_class = FoodSerializer
    permission_classes = [permissions.AllowAny]

    @action(detail=True, methods=["get"])
    def ingredients(self, request, pk=None):
        ingredients = IngredientService.find_ingredients_by_food(pk)
        return Response(FoodIngredientSerializer(ingredients, many=True).data)


class ComboViewSet(ReadOnlyBaseViewSet):
    queryset = Combo.objects.all()
    serializer_class = ComboSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        return optimize_queryset(super().get_queryset(), self.serializer_class)


class IngredientViewSet(BaseViewSet):
    """
    Ingredient CRUD. Anyone may read; only staff/admin may write.

    Deleting an ingredient soft-deletes it.
    """

    queryset = Ingredient.objects.all()
    serializer_class = IngredientSerializer
    permission_classes = [IsStaffOrReadOnly]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(IngredientService.list_ingredients())
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(self.get_serializer(page, many=True).data)
        return Response(self.get_serializer(queryset, many=True).data)

    def retrieve(self, request, pk=None):
        ingredient = IngredientService.get_ingredient(pk)
        return Response(self.get_serializer(ingredient).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ingredient = IngredientService.create_ingredient(**serializer.validated_data)
        return Response(
            {
                "message": "Create ingredient successfully",
                "ingredient": self.get_serializer(ingredient).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def partial_update(self, request, pk=None):
        serializer = IngredientUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ingredient = IngredientService.update_ingredient(pk, **serializer.validated_data)
        return Response(
            {
                "message": "Update ingredient successfully",
                "ingredient": self.get_serializer(ingredient).data,
            }
        )

    def destroy(self, request, pk=None):
        IngredientService.delete_ingredient(pk)
        return Response({"message": "Ingredient deleted"}, status=status.HTTP_200_OK)
