"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from decimal import Decimal
from django.core.cache import cache


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def clear_cache_after_test():
    """
    Clear cache after each test to prevent cache pollution.

    Rate-limit counters live in the cache, so this also resets them.
    """
    yield  # Run the test
    cache.clear()  # Clear all cache keys


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/foods/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


def _bearer_client(user):
    from rest_framework.test import APIClient
    from users.services import AuthService

    tokens = AuthService.generate_tokens_for_user(user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access_token']}")
    return client


@pytest.fixture
def authenticated_client(customer_user):
    """
    Provide an API client signed in as ``customer_user``.

    Usage:
        def test_place_order(authenticated_client):
            response = authenticated_client.post('/api/orders/', {...})
    """
    return _bearer_client(customer_user)


@pytest.fixture
def other_customer_client(other_customer_user):
    return _bearer_client(other_customer_user)


@pytest.fixture
def admin_client(admin_user):
    """API client signed in as an admin account."""
    return _bearer_client(admin_user)


# ============================================================================
# USER FIXTURES
# ============================================================================

def _create_customer(email, username, password="Str0ngPass!"):
    from users.models import User, Customer

    user = User.objects.create_user(
        email=email,
        password=password,
        username=username,
        phone_number="0900000000",
        address="1 Main Street",
    )
    Customer.objects.create(
        user=user,
        full_name=username,
        email=email,
        address=user.address,
        phone_number=user.phone_number,
    )
    return user


@pytest.fixture
def customer_user(db):
    """A customer account with its Customer profile."""
    return _create_customer("alice@example.com", "Alice")


@pytest.fixture
def other_customer_user(db):
    return _create_customer("bob@example.com", "Bob")


@pytest.fixture
def admin_user(db):
    """An admin account (no Customer profile)."""
    from users.models import User

    return User.objects.create_superuser(
        email="admin@example.com",
        password="Adm1nPass!",
        username="admin",
    )


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def food_f1(db):
    """Dish priced at 10.00."""
    from catalog.models import Food
    return Food.objects.create(name="Pho", price=Decimal("10.00"), calories=450)


@pytest.fixture
def food_f2(db):
    """Dish priced at 3.00."""
    from catalog.models import Food
    return Food.objects.create(name="Spring Roll", price=Decimal("3.00"), calories=120)


@pytest.fixture
def combo_c1(db, food_f2):
    """Combo priced at 5.00 holding one food_f2."""
    from catalog.models import Combo, ComboItem

    combo = Combo.objects.create(name="Lunch Combo", price=Decimal("5.00"))
    ComboItem.objects.create(combo=combo, food=food_f2, quantity=1)
    return combo


@pytest.fixture
def empty_combo(db):
    from catalog.models import Combo
    return Combo.objects.create(name="Empty Combo", price=Decimal("4.00"))


@pytest.fixture
def ingredient(db):
    from catalog.models import Ingredient
    return Ingredient.objects.create(
        name="Rice Noodles",
        description="Flat rice noodles",
        price=Decimal("1.50"),
        calories=200,
    )


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def pending_order(customer_user, food_f1):
    """A Pending order of 2 x food_f1 (total 20.00) paid in cash."""
    from orders.services import OrderService

    return OrderService.create_order(
        customer_id=customer_user.pk,
        delivery_info={
            "address": "1 Main Street",
            "phone_number": "0900000000",
            "customer_name": "Alice",
        },
        order_details=[(food_f1.pk, 2)],
        payment_method="CASH",
    )
