from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import FoodViewSet, ComboViewSet, IngredientViewSet

app_name = "catalog"

router = DefaultRouter()
router.register(r"foods", FoodViewSet, basename="food")
router.register(r"combos", ComboViewSet, basename="combo")
router.register(r"ingredients", IngredientViewSet, basename="ingredient")

urlpatterns = [
    path("", include(router.urls)),
]
