"""
Core backend base components.

Foundational classes shared by every app's API layer.
"""

from .viewsets import BaseViewSet, ReadOnlyBaseViewSet
from .serializers import BaseModelSerializer
from .filters import BaseFilterSet, KeywordFilterSet
from .permissions import IsStaffRole, IsStaffOrReadOnly, IsOwnerOrStaff

__all__ = [
    # ViewSets
    'BaseViewSet',
    'ReadOnlyBaseViewSet',

    # Serializers
    'BaseModelSerializer',

    # Filters
    'BaseFilterSet',
    'KeywordFilterSet',

    # Permissions
    'IsStaffRole',
    'IsStaffOrReadOnly',
    'IsOwnerOrStaff',
]
