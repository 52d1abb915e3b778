"""
URL configuration for core_backend project.

Every app mounts its routes under the /api/ prefix.
"""

from django.http import JsonResponse
from django.urls import path, include


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("api/auth/", include("users.urls")),
    path("api/", include("catalog.urls")),
    # The orders app registers its base endpoint as 'orders'.
    path("api/", include("orders.urls")),
]
