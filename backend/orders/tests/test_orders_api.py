"""
Orders API Integration Tests

Exercise the HTTP layer end to end: authentication, ownership checks,
request validation and the structured error body.
"""
import uuid
from decimal import Decimal

import pytest
from rest_framework import status

from catalog.models import Food
from orders.models import Order
from payments.models import Transaction

ORDERS_URL = "/api/orders/"


def order_url(order_id):
    return f"/api/orders/{order_id}/"


def create_payload(food, quantity=2, **extra):
    payload = {
        "orderDetails": [{"foodID": str(food.pk), "quantity": quantity}],
        "paymentMethod": "CASH",
        "address": "1 Main Street",
        "phoneNumber": "0900000000",
        "customerName": "Alice",
    }
    payload.update(extra)
    return payload


@pytest.mark.django_db
class TestCreateOrderAPI:

    def test_create_order(self, authenticated_client, customer_user, food_f1):
        response = authenticated_client.post(ORDERS_URL, create_payload(food_f1), format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["message"] == "Create order successfully"
        order = response.data["order"]
        assert order["totalPrice"] == "20.00"
        assert order["orderStatus"] == "Pending"
        assert order["paymentMethod"] == "CASH"
        assert order["customerID"] == str(customer_user.pk)
        assert len(order["details"]) == 1
        assert order["details"][0]["price"] == "10.00"

    def test_create_order_with_combo(self, authenticated_client, food_f1, combo_c1):
        payload = create_payload(food_f1, comboID=str(combo_c1.pk))

        response = authenticated_client.post(ORDERS_URL, payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["order"]["totalPrice"] == "25.00"
        assert len(response.data["order"]["details"]) == 2

    def test_customer_id_comes_from_token(self, authenticated_client, customer_user, other_customer_user, food_f1):
        payload = create_payload(food_f1, customerID=str(other_customer_user.pk))

        response = authenticated_client.post(ORDERS_URL, payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert Order.objects.get().customer_id == customer_user.pk

    def test_requires_authentication(self, api_client, food_f1):
        response = api_client.post(ORDERS_URL, create_payload(food_f1), format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["kind"] == "Unauthorized"

    def test_empty_order_is_rejected(self, authenticated_client, food_f1):
        payload = create_payload(food_f1)
        payload["orderDetails"] = []

        response = authenticated_client.post(ORDERS_URL, payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"kind": "Validation", "message": "Missing order details"}

    def test_zero_quantity_is_rejected(self, authenticated_client, food_f1):
        response = authenticated_client.post(ORDERS_URL, create_payload(food_f1, quantity=0), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["kind"] == "Validation"
        assert "orderDetails" in response.data["errors"]
        assert Order.all_objects.count() == 0

    def test_oversized_quantity_is_rejected(self, authenticated_client, food_f1):
        response = authenticated_client.post(
            ORDERS_URL, create_payload(food_f1, quantity=10**9), format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["kind"] == "Validation"
        assert "orderDetails" in response.data["errors"]
        assert Order.all_objects.count() == 0

    def test_total_over_the_money_limit_is_rejected(self, authenticated_client):
        luxury = Food.objects.create(name="Golden Lobster", price=Decimal("99999999.99"))

        response = authenticated_client.post(
            ORDERS_URL, create_payload(luxury, quantity=2), format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["kind"] == "Validation"
        assert Order.all_objects.count() == 0
        assert Transaction.all_objects.count() == 0

        # Listings stay readable
        response = authenticated_client.get(f"{ORDERS_URL}mine/")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_food_is_not_found(self, authenticated_client, food_f1):
        payload = create_payload(food_f1)
        payload["orderDetails"].append({"foodID": str(uuid.uuid4()), "quantity": 1})

        response = authenticated_client.post(ORDERS_URL, payload, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["kind"] == "NotFound"
        assert Order.all_objects.count() == 0
        assert Transaction.all_objects.count() == 0

    def test_unknown_combo_is_not_found(self, authenticated_client, food_f1):
        combo_id = uuid.uuid4()
        payload = create_payload(food_f1, comboID=str(combo_id))

        response = authenticated_client.post(ORDERS_URL, payload, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == f"Not found combo ID {combo_id}"

    def test_invalid_payment_method(self, authenticated_client, food_f1):
        response = authenticated_client.post(
            ORDERS_URL, create_payload(food_f1, paymentMethod="BITCOIN"), format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "paymentMethod" in response.data["errors"]


@pytest.mark.django_db
class TestReadOrdersAPI:

    def test_owner_can_retrieve_order(self, authenticated_client, pending_order):
        response = authenticated_client.get(order_url(pending_order.pk))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == str(pending_order.pk)
        assert response.data["paymentMethod"] == "CASH"

    def test_other_customer_cannot_retrieve_order(self, other_customer_client, pending_order):
        response = other_customer_client.get(order_url(pending_order.pk))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["kind"] == "Forbidden"

    def test_admin_can_retrieve_any_order(self, admin_client, pending_order):
        response = admin_client.get(order_url(pending_order.pk))

        assert response.status_code == status.HTTP_200_OK

    def test_unknown_order_is_not_found(self, authenticated_client):
        response = authenticated_client.get(order_url(uuid.uuid4()))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["kind"] == "NotFound"

    def test_order_details(self, authenticated_client, pending_order, food_f1):
        response = authenticated_client.get(f"{order_url(pending_order.pk)}details/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == [
            {
                "foodID": str(food_f1.pk),
                "name": "Pho",
                "price": "10.00",
                "calories": 450,
                "description": "",
                "image": "",
                "quantity": 2,
            }
        ]

    def test_list_all_orders_is_staff_only(self, authenticated_client, pending_order):
        response = authenticated_client.get(ORDERS_URL)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["kind"] == "Forbidden"

    def test_list_all_orders_requires_authentication(self, api_client, pending_order):
        response = api_client.get(ORDERS_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_lists_orders_with_pagination(self, admin_client, pending_order):
        response = admin_client.get(ORDERS_URL, {"pageIndex": 1, "pageSize": 5})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data["orders"]) == 1
        assert response.data["orders"][0]["paymentMethod"] == "CASH"
        assert response.data["pagination"] == {"pageIndex": 1, "pageSize": 5, "totalPages": 1}

    def test_keyword_matches_customer_name(self, admin_client, pending_order):
        response = admin_client.get(ORDERS_URL, {"keyword": "ali"})

        assert response.status_code == status.HTTP_200_OK
        assert [o["id"] for o in response.data["orders"]] == [str(pending_order.pk)]

    def test_no_matching_orders_is_not_found(self, admin_client, pending_order):
        response = admin_client.get(ORDERS_URL, {"keyword": "nobody"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "No orders found"

    def test_my_orders(self, authenticated_client, pending_order):
        response = authenticated_client.get(f"{ORDERS_URL}mine/")

        assert response.status_code == status.HTTP_200_OK
        assert [o["id"] for o in response.data["orders"]] == [str(pending_order.pk)]

    def test_my_orders_when_there_are_none(self, other_customer_client, pending_order):
        response = other_customer_client.get(f"{ORDERS_URL}mine/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "Current user Bob doesn't have any orders"


@pytest.mark.django_db
class TestUpdateOrderAPI:

    def test_finish_order(self, authenticated_client, pending_order):
        response = authenticated_client.patch(
            order_url(pending_order.pk), {"orderStatus": "Finished"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["order"]["orderStatus"] == "Finished"
        assert Transaction.objects.get(order_id=pending_order.pk).status == "Finished"

    def test_closed_order_returns_400(self, authenticated_client, pending_order):
        authenticated_client.patch(order_url(pending_order.pk), {"orderStatus": "Cancelled"}, format="json")

        response = authenticated_client.patch(
            order_url(pending_order.pk), {"address": "Elsewhere"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"kind": "StateConflict", "message": "Cannot edit closed order"}

    def test_stale_version_returns_409(self, authenticated_client, pending_order):
        authenticated_client.patch(order_url(pending_order.pk), {"address": "2 Side Road"}, format="json")

        response = authenticated_client.patch(
            order_url(pending_order.pk), {"orderStatus": "Finished", "version": 1}, format="json"
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data["kind"] == "Conflict"

    def test_other_customer_cannot_update(self, other_customer_client, pending_order):
        response = other_customer_client.patch(
            order_url(pending_order.pk), {"orderStatus": "Cancelled"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        pending_order.refresh_from_db()
        assert pending_order.status == "Pending"

    def test_put_is_not_allowed(self, authenticated_client, pending_order):
        response = authenticated_client.put(order_url(pending_order.pk), {}, format="json")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestDeleteOrderAPI:

    def test_delete_order(self, authenticated_client, pending_order):
        response = authenticated_client.delete(order_url(pending_order.pk))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == f"Order ID {pending_order.pk} is removed"
        assert Order.all_objects.get(pk=pending_order.pk).is_deleted

        response = authenticated_client.get(order_url(pending_order.pk))
        assert response.status_code == status.HTTP_404_NOT_FOUND
