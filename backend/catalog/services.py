import logging
from typing import Dict, Iterable, List

from django.db import transaction

from core_backend.exceptions import (
    ComboNotFound,
    FoodNotFound,
    IngredientNotFound,
    NotFoundError,
)
from .models import Food, Combo, ComboItem, Ingredient, FoodIngredient

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Read access to foods and combos.

    Soft-deleted rows are invisible to every method here; callers that need
    them for audit go through ``Model.all_objects`` directly.
    """

    @staticmethod
    def find_foods(food_ids: Iterable) -> Dict[str, Food]:
        """
        Resolve many foods in a single query.

        Returns a mapping keyed by ``str(food.pk)``; ids that are missing or
        soft-deleted are simply absent from the result.
        """
        ids = {str(food_id) for food_id in food_ids}
        if not ids:
            return {}
        return {str(food.pk): food for food in Food.objects.filter(pk__in=ids)}

    @staticmethod
    def find_combo(combo_id):
        """Return the live combo or None."""
        return Combo.objects.filter(pk=combo_id).first()

    @staticmethod
    def get_combo(combo_id) -> Combo:
        combo = CatalogService.find_combo(combo_id)
        if combo is None:
            raise ComboNotFound(combo_id)
        return combo

    @staticmethod
    def find_combo_items(combo_id) -> List[ComboItem]:
        """Return the combo's items in a stable order, with their foods loaded."""
        # Deleted foods are kept here; the combo expander rejects them
        return list(
            ComboItem.objects.filter(combo_id=combo_id)
            .select_related("food")
            .order_by("id")
        )


class IngredientService:
    """Ingredient CRUD and the per-food ingredient listing."""

    @staticmethod
    @transaction.atomic
    def create_ingredient(**data) -> Ingredient:
        data.setdefault("description", "")
        data.setdefault("image", "")
        ingredient = Ingredient.objects.create(**data)
        logger.info(f"Created ingredient {ingredient.pk} ({ingredient.name})")
        return ingredient

    @staticmethod
    def list_ingredients():
        queryset = Ingredient.objects.all()
        if not queryset.exists():
            raise NotFoundError("Not found any ingredients")
        return queryset

    @staticmethod
    def get_ingredient(ingredient_id) -> Ingredient:
        ingredient = Ingredient.objects.filter(pk=ingredient_id).first()
        if ingredient is None:
            raise IngredientNotFound(ingredient_id, f"Not found ingredient ID {ingredient_id}")
        return ingredient

    @staticmethod
    @transaction.atomic
    def update_ingredient(ingredient_id, **changes) -> Ingredient:
        """
        Apply a partial update.

        Omitted (or null) fields keep their current values.
        """
        ingredient = IngredientService.get_ingredient(ingredient_id)

        update_fields = []
        for field in ("name", "description", "price", "calories", "image"):
            value = changes.get(field)
            if value is None:
                continue
            setattr(ingredient, field, value)
            update_fields.append(field)

        if update_fields:
            update_fields.append("updated_at")
            ingredient.save(update_fields=update_fields)
            logger.info(f"Updated ingredient {ingredient.pk}: {', '.join(update_fields[:-1])}")
        return ingredient

    @staticmethod
    @transaction.atomic
    def delete_ingredient(ingredient_id) -> Ingredient:
        ingredient = IngredientService.get_ingredient(ingredient_id)
        ingredient.soft_delete()
        logger.info(f"Soft-deleted ingredient {ingredient.pk}")
        return ingredient

    @staticmethod
    def find_ingredients_by_food(food_id) -> List[dict]:
        """
        List the ingredients a dish is made of, with the amount each takes.

        Raises:
            FoodNotFound: the food is unknown or has no live ingredient links
        """
        links = list(
            FoodIngredient.objects.filter(food_id=food_id, food__is_deleted=False)
            .select_related("ingredient")
            .order_by("ingredient__name")
        )
        if not links:
            raise FoodNotFound(food_id)

        return [
            {
                "ingredientID": link.ingredient_id,
                "name": link.ingredient.name,
                "quantity": link.quantity,
                "description": link.ingredient.description,
                "calories": link.ingredient.calories,
                "price": link.ingredient.price,
            }
            for link in links
        ]
