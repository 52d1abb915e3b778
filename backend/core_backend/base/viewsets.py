from rest_framework import viewsets
from django_filters.rest_framework import DjangoFilterBackend
from ..pagination import StandardPagination

# Primary keys are UUIDs; anything else never reaches the database
UUID_PATTERN = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


class BaseViewSet(viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Standard pagination (?pageIndex=&pageSize=) and django-filter backend
    - destroy() soft-deletes through SoftDeleteMixin.delete()
    - Default manager already hides soft-deleted rows

    Usage:
        class IngredientViewSet(BaseViewSet):
            queryset = Ingredient.objects.all()
            serializer_class = IngredientSerializer
    """

    pagination_class = StandardPagination
    filter_backends = [DjangoFilterBackend]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        """
        Re-evaluate the class-level queryset at request time so rows
        soft-deleted by earlier requests are never served from a cached
        queryset.
        """
        if getattr(self, 'queryset', None) is not None:
            return self.queryset.model.objects.all()
        return super().get_queryset()


class ReadOnlyBaseViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Base ViewSet for read-only endpoints.
    """

    pagination_class = StandardPagination
    filter_backends = [DjangoFilterBackend]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        """Re-evaluate queryset at request time"""
        if getattr(self, 'queryset', None) is not None:
            return self.queryset.model.objects.all()
        return super().get_queryset()
