"""
Utility functions for core_backend.
"""


def get_client_ip(group, request):
    """
    Extract the client IP used as the rate-limit key.

    Args:
        group: The rate limit group (required by django-ratelimit but unused)
        request: The Django request object

    Uses the LAST X-Forwarded-For entry (the one appended by our own proxy)
    and falls back to REMOTE_ADDR.
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[-1].strip()

    return request.META.get("REMOTE_ADDR")
