"""
Soft delete and pagination behaviour shared by every app.
"""
from decimal import Decimal

import pytest
from rest_framework.test import APIRequestFactory
from rest_framework.request import Request

from catalog.models import Food
from core_backend.pagination import StandardPagination


@pytest.mark.django_db
class TestSoftDeleteMixin:

    def test_soft_delete_hides_row_from_default_manager(self, food_f1):
        food_f1.soft_delete()

        assert not Food.objects.filter(pk=food_f1.pk).exists()
        food = Food.all_objects.get(pk=food_f1.pk)
        assert food.is_deleted
        assert food.deleted_at is not None

    def test_delete_is_soft(self, food_f1):
        food_f1.delete()

        assert Food.all_objects.filter(pk=food_f1.pk).exists()

    def test_force_delete_removes_row(self):
        food = Food.objects.create(name="Temporary", price=Decimal("1.00"))

        food.force_delete()

        assert not Food.all_objects.filter(pk=food.pk).exists()

    def test_queryset_soft_delete_returns_row_count(self, food_f1, food_f2):
        assert Food.objects.all().soft_delete() == 2
        assert Food.objects.count() == 0
        assert Food.all_objects.deleted().count() == 2

    def test_with_deleted(self, food_f1, food_f2):
        food_f2.soft_delete()

        assert Food.objects.with_deleted().count() == 2
        assert list(Food.all_objects.alive()) == [food_f1]


@pytest.mark.django_db
class TestStandardPagination:

    def paginate(self, query, queryset):
        request = Request(APIRequestFactory().get("/api/foods/", query))
        paginator = StandardPagination()
        page = paginator.paginate_queryset(queryset, request)
        return paginator.get_paginated_response([food.name for food in page]).data

    def test_page_size_and_index(self, food_f1, food_f2):
        data = self.paginate({"pageIndex": 2, "pageSize": 1}, Food.objects.order_by("name"))

        assert data["results"] == ["Spring Roll"]
        assert data["pagination"] == {"pageIndex": 2, "pageSize": 1, "totalPages": 2}

    def test_defaults(self, food_f1):
        data = self.paginate({}, Food.objects.all())

        assert data["pagination"] == {"pageIndex": 1, "pageSize": 10, "totalPages": 1}
