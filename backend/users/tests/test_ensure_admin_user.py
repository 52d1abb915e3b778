"""
Tests for the ensure_admin_user bootstrap command.
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from users.models import User


@pytest.mark.django_db
class TestEnsureAdminUser:

    def test_creates_admin(self):
        out = StringIO()

        call_command("ensure_admin_user", email="root@example.com", password="R00tPass!", stdout=out)

        user = User.objects.get(email="root@example.com")
        assert user.role == User.Role.ADMIN
        assert user.is_superuser
        assert "Created admin user" in out.getvalue()

    def test_is_idempotent(self, admin_user):
        out = StringIO()

        call_command("ensure_admin_user", email=admin_user.email, stdout=out)

        assert User.objects.filter(email=admin_user.email).count() == 1
        assert "already exists" in out.getvalue()

    def test_promotes_existing_customer(self, customer_user):
        call_command("ensure_admin_user", email=customer_user.email, stdout=StringIO())

        customer_user.refresh_from_db()
        assert customer_user.role == User.Role.ADMIN
        assert customer_user.is_superuser

    def test_password_required_for_creation(self):
        with pytest.raises(CommandError):
            call_command("ensure_admin_user", email="new@example.com", password=None, stdout=StringIO())
