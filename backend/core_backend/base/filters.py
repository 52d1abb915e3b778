import django_filters
from django.db.models import Q


class BaseFilterSet(django_filters.FilterSet):
    """
    Base filter set with common filtering patterns.
    """

    created_after = django_filters.IsoDateTimeFilter(field_name='created_at', lookup_expr='gte')
    created_before = django_filters.IsoDateTimeFilter(field_name='created_at', lookup_expr='lte')

    class Meta:
        abstract = True


class KeywordFilterSet(BaseFilterSet):
    """
    Adds ``?keyword=`` matching any of ``keyword_fields`` (case-insensitive contains).

    Subclasses list the lookups to search in ``keyword_fields``.
    """

    keyword_fields = ()

    keyword = django_filters.CharFilter(method='filter_keyword')

    def filter_keyword(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset

        condition = Q()
        for field in self.keyword_fields:
            condition |= Q(**{f"{field}__icontains": value})
        return queryset.filter(condition)

    class Meta:
        abstract = True
