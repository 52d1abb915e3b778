from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer that provides common functionality.

    Features:
    - Optimization hints (select_related_fields / prefetch_related_fields)
      that list views apply to their querysets
    - Project-wide validation hook
    """

    class Meta:
        # Default optimization fields (can be overridden)
        select_related_fields = []
        prefetch_related_fields = []

    def validate(self, data):
        """
        Base validation that can be extended by child classes.
        """
        data = super().validate(data)

        # Add any project-wide validation logic here

        return data


def optimize_queryset(queryset, serializer_class):
    """
    Apply the serializer's Meta optimization hints to a queryset.
    """
    meta = getattr(serializer_class, "Meta", None)
    if meta is None:
        return queryset

    select_related = getattr(meta, "select_related_fields", [])
    prefetch_related = getattr(meta, "prefetch_related_fields", [])

    if select_related:
        queryset = queryset.select_related(*select_related)
    if prefetch_related:
        queryset = queryset.prefetch_related(*prefetch_related)
    return queryset
