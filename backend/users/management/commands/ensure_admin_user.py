"""
Management command to ensure an admin account exists.

Idempotent bootstrap command to run after migrations in the deployment
process (entrypoint, CI/CD, etc.).

Usage:
    python manage.py ensure_admin_user --email admin@example.com --password secret
    ADMIN_EMAIL=... ADMIN_PASSWORD=... python manage.py ensure_admin_user
"""
import os

from django.core.management.base import BaseCommand, CommandError

from users.models import User


class Command(BaseCommand):
    help = "Ensure an admin user exists (idempotent bootstrap command)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--email",
            type=str,
            default=os.environ.get("ADMIN_EMAIL"),
            help="Admin email (defaults to ADMIN_EMAIL)",
        )
        parser.add_argument(
            "--password",
            type=str,
            default=os.environ.get("ADMIN_PASSWORD"),
            help="Admin password (defaults to ADMIN_PASSWORD), only used on creation",
        )
        parser.add_argument(
            "--username",
            type=str,
            default="admin",
            help="Display username for a newly created admin",
        )

    def handle(self, *args, **options):
        email = options["email"]
        password = options["password"]
        if not email:
            raise CommandError("--email or ADMIN_EMAIL is required")

        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            if not password:
                raise CommandError("--password or ADMIN_PASSWORD is required to create the admin")
            user = User.objects.create_superuser(
                email=email, password=password, username=options["username"]
            )
            self.stdout.write(self.style.SUCCESS(f"Created admin user: {user.email} ({user.pk})"))
            return

        if user.role != User.Role.ADMIN or not user.is_superuser:
            user.role = User.Role.ADMIN
            user.is_superuser = True
            user.save(update_fields=["role", "is_superuser", "updated_at"])
            self.stdout.write(self.style.WARNING(f"Promoted existing user to admin: {user.email}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Admin user already exists: {user.email}"))
