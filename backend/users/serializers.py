from rest_framework import serializers
from core_backend.base import BaseModelSerializer
from .models import User, Customer


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, min_length=6)
    phoneNumber = serializers.CharField(
        source="phone_number", max_length=20, required=False, allow_blank=True, default=""
    )
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class SigninSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class RefreshSerializer(serializers.Serializer):
    refreshToken = serializers.CharField(source="refresh_token")
    userId = serializers.UUIDField(source="user_id", required=False)


class TokensSerializer(serializers.Serializer):
    access_token = serializers.CharField()
    refresh_token = serializers.CharField()


class CustomerSerializer(BaseModelSerializer):
    class Meta:
        model = Customer
        fields = ["full_name", "email", "address", "phone_number"]


class CurrentUserSerializer(BaseModelSerializer):
    """
    Public view of the signed-in account; credentials are never serialized.
    """

    customer = CustomerSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "phone_number",
            "address",
            "role",
            "date_joined",
            "customer",
        ]
        read_only_fields = fields
        select_related_fields = ["customer"]
