import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from core_backend.exceptions import AccessDenied, DuplicateCredentials
from .models import User, Customer

logger = logging.getLogger(__name__)


class AuthService:
    """Account registration and JWT issuance for the ordering API."""

    @staticmethod
    def generate_tokens_for_user(user: User) -> dict:
        """
        Issue a fresh access/refresh pair.

        Every refresh token issued earlier for this user is blacklisted first,
        so only the newest refresh token stays usable.
        """
        AuthService.revoke_refresh_tokens(user)

        refresh = RefreshToken.for_user(user)
        refresh["email"] = user.email
        refresh["role"] = user.role
        access = refresh.access_token

        return {
            "access_token": str(access),
            "refresh_token": str(refresh),
        }

    @staticmethod
    def revoke_refresh_tokens(user: User) -> int:
        """Blacklist every outstanding refresh token of ``user``."""
        revoked = 0
        outstanding = OutstandingToken.objects.filter(user=user).exclude(
            id__in=BlacklistedToken.objects.values("token_id")
        )
        for token in outstanding:
            BlacklistedToken.objects.get_or_create(token=token)
            revoked += 1
        return revoked

    @staticmethod
    @transaction.atomic
    def signup(email: str, username: str, password: str, phone_number: str = "", address: str = "") -> dict:
        """
        Create a customer account (user + customer profile) and sign it in.

        Raises:
            DuplicateCredentials: the email is already registered
        """
        if User.objects.filter(email__iexact=email).exists():
            raise DuplicateCredentials()

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    username=username,
                    phone_number=phone_number,
                    address=address,
                    role=User.Role.CUSTOMER,
                )
        except IntegrityError:
            # Concurrent signup with the same email won the unique constraint
            raise DuplicateCredentials()

        Customer.objects.create(
            user=user,
            full_name=username,
            email=user.email,
            address=address,
            phone_number=phone_number,
        )
        logger.info(f"Registered customer account {user.pk}")

        return AuthService.generate_tokens_for_user(user)

    @staticmethod
    def signin(email: str, password: str) -> dict:
        """
        Raises:
            AccessDenied: unknown email, wrong password or inactive account
        """
        user = authenticate(email=email, password=password)
        if user is None:
            logger.info("Rejected sign-in attempt")
            raise AccessDenied()

        return AuthService.generate_tokens_for_user(user)

    @staticmethod
    def refresh(refresh_token: str, user_id=None) -> dict:
        """
        Exchange a live refresh token for a new token pair.

        Raises:
            AccessDenied: token invalid, expired, revoked, or issued to another user
        """
        try:
            token = RefreshToken(refresh_token)
        except TokenError:
            raise AccessDenied()

        token_user_id = token.get("sub")
        if user_id is not None and str(user_id) != str(token_user_id):
            raise AccessDenied()

        user = User.objects.filter(pk=token_user_id, is_active=True).first()
        if user is None:
            raise AccessDenied()

        return AuthService.generate_tokens_for_user(user)

    @staticmethod
    def logout(user: User) -> bool:
        revoked = AuthService.revoke_refresh_tokens(user)
        logger.info(f"User {user.pk} logged out, revoked {revoked} refresh token(s)")
        return True

    @staticmethod
    def get_user_by_id(user_id):
        """Return the user or None."""
        return User.objects.filter(pk=user_id).select_related("customer").first()
