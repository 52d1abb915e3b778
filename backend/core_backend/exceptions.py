"""
Domain error taxonomy and the project-wide DRF exception handler.

Services raise subclasses of DomainError. Each class carries a stable ``kind``
and the HTTP status it maps to, so views never translate errors by hand.
"""
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for business-rule failures."""

    kind = "DomainError"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- NotFound ---

class NotFoundError(DomainError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class OrderNotFound(NotFoundError):
    def __init__(self, order_id, message=None):
        self.order_id = order_id
        super().__init__(message or f"Order {order_id} not found")


class ItemNotFound(NotFoundError):
    """Raised when a food referenced by an order or combo does not resolve."""

    def __init__(self, food_id, message=None):
        self.food_id = food_id
        super().__init__(message or f"Food {food_id} not found")


class ComboNotFound(NotFoundError):
    def __init__(self, combo_id, message=None):
        self.combo_id = combo_id
        super().__init__(message or f"Not found combo ID {combo_id}")


class ComboEmpty(NotFoundError):
    def __init__(self, combo_id, message=None):
        self.combo_id = combo_id
        super().__init__(message or f"Not found any items of combo ID {combo_id}")


class TransactionNotFound(NotFoundError):
    def __init__(self, order_id, message=None):
        self.order_id = order_id
        super().__init__(message or "Transaction not found for this order")


class CustomerNotFound(NotFoundError):
    def __init__(self, customer_id, message=None):
        self.customer_id = customer_id
        super().__init__(message or f"Customer {customer_id} not found")


class FoodNotFound(NotFoundError):
    """Raised by catalog reads; order pricing uses ItemNotFound instead."""

    def __init__(self, food_id, message=None):
        self.food_id = food_id
        super().__init__(message or "Food not found or has no ingredients.")


class IngredientNotFound(NotFoundError):
    def __init__(self, ingredient_id=None, message=None):
        self.ingredient_id = ingredient_id
        super().__init__(message or "Ingredient not found")


# --- Validation ---

class ValidationFailed(DomainError):
    kind = "Validation"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class EmptyOrder(ValidationFailed):
    default_message = "Missing order details"


class InvalidQuantity(ValidationFailed):
    def __init__(self, food_id, quantity, message=None):
        self.food_id = food_id
        self.quantity = quantity
        super().__init__(message or f"Quantity for food {food_id} must be positive, got {quantity}")


class AmountTooLarge(ValidationFailed):
    def __init__(self, amount, limit, message=None):
        self.amount = amount
        self.limit = limit
        super().__init__(message or f"Order amount {amount} exceeds the maximum of {limit}")


# --- Conflict ---

class ConflictError(DomainError):
    kind = "Conflict"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Request conflicts with the current state"


class ConcurrentUpdate(ConflictError):
    def __init__(self, order_id, message=None):
        self.order_id = order_id
        super().__init__(message or f"Order {order_id} was modified by another request, reload and retry")


class DuplicateCredentials(ConflictError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Credentials incorrect"


# --- StateConflict ---

class StateConflict(DomainError):
    kind = "StateConflict"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation not allowed in the current state"


class OrderClosed(StateConflict):
    default_message = "Cannot edit closed order"


# --- Auth ---

class AccessDenied(DomainError):
    kind = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access Denied"


# --- Storage ---

class PersistenceFailure(DomainError):
    kind = "PersistenceFailure"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage operation failed"


# Kinds for DRF's own exceptions
API_EXCEPTION_KINDS = (
    (exceptions.ValidationError, "Validation"),
    (exceptions.ParseError, "Validation"),
    (exceptions.NotAuthenticated, "Unauthorized"),
    (exceptions.AuthenticationFailed, "Unauthorized"),
    (exceptions.PermissionDenied, "Forbidden"),
    (exceptions.NotFound, "NotFound"),
    (exceptions.MethodNotAllowed, "MethodNotAllowed"),
    (exceptions.Throttled, "Throttled"),
)


def _api_exception_kind(exc):
    for exc_class, kind in API_EXCEPTION_KINDS:
        if isinstance(exc, exc_class):
            return kind
    return "Error"


def api_exception_handler(exc, context):
    """
    Render every failure as ``{"kind": ..., "message": ...}``.

    DomainErrors map through their class attributes, DRF exceptions keep their
    status code, and anything else becomes an opaque 500.
    """
    request = context.get("request")
    path = getattr(request, "path", "")

    if isinstance(exc, DomainError):
        if exc.status_code >= 500:
            logger.error(f"{exc.kind} on {path}: {exc.message}", exc_info=exc)
        return Response({"kind": exc.kind, "message": exc.message}, status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        # Raised by model fields, e.g. a malformed UUID in a filter
        return Response(
            {"kind": "Validation", "message": "Invalid request data", "errors": exc.messages},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, DatabaseError):
        logger.exception(f"Database error on {path}")
        failure = PersistenceFailure()
        return Response({"kind": failure.kind, "message": failure.message}, status=failure.status_code)

    # Http404 / Django PermissionDenied are converted by DRF's handler
    response = exception_handler(exc, context)
    if response is None:
        logger.exception(f"Unhandled error on {path}")
        return Response(
            {"kind": "InternalError", "message": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, Http404):
        kind = "NotFound"
    elif isinstance(exc, DjangoPermissionDenied):
        kind = "Forbidden"
    else:
        kind = _api_exception_kind(exc)

    body = {"kind": kind}
    if isinstance(exc, exceptions.ValidationError):
        body["message"] = "Invalid request data"
        body["errors"] = response.data
    elif isinstance(response.data, dict) and "detail" in response.data:
        body["message"] = str(response.data["detail"])
    else:
        body["message"] = str(response.data)
    response.data = body
    return response
