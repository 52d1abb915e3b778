from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from .models import Food, Combo, ComboItem, Ingredient


class FoodSerializer(BaseModelSerializer):
    class Meta:
        model = Food
        fields = [
            "id",
            "name",
            "description",
            "price",
            "calories",
            "image",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ComboItemSerializer(BaseModelSerializer):
    foodID = serializers.UUIDField(source="food_id", read_only=True)
    name = serializers.CharField(source="food.name", read_only=True)
    price = serializers.DecimalField(source="food.price", max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = ComboItem
        fields = ["id", "foodID", "name", "price", "quantity"]
        read_only_fields = fields


class ComboSerializer(BaseModelSerializer):
    items = ComboItemSerializer(many=True, read_only=True)

    class Meta:
        model = Combo
        fields = [
            "id",
            "name",
            "description",
            "price",
            "image",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
        prefetch_related_fields = ["items__food"]


class IngredientSerializer(BaseModelSerializer):
    class Meta:
        model = Ingredient
        fields = [
            "id",
            "name",
            "description",
            "price",
            "calories",
            "image",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {
            "description": {"required": False, "allow_blank": True},
            "image": {"required": False, "allow_blank": True},
        }


class IngredientUpdateSerializer(serializers.Serializer):
    """Partial update; omitted or null fields keep their stored values."""

    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    calories = serializers.IntegerField(min_value=0, required=False)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)


class FoodIngredientSerializer(serializers.Serializer):
    ingredientID = serializers.UUIDField()
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    description = serializers.CharField()
    calories = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
