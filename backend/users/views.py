from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core_backend.utils import get_client_ip
from .serializers import (
    SignupSerializer,
    SigninSerializer,
    RefreshSerializer,
    TokensSerializer,
    CurrentUserSerializer,
)
from .services import AuthService


@method_decorator(
    ratelimit(key=get_client_ip, rate="5/m", method="POST", block=True), name="post"
)
class SignupView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tokens = AuthService.signup(**serializer.validated_data)
        return Response(TokensSerializer(tokens).data, status=status.HTTP_201_CREATED)


@method_decorator(
    ratelimit(key=get_client_ip, rate="5/m", method="POST", block=True), name="post"
)
class SigninView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = SigninSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tokens = AuthService.signin(**serializer.validated_data)
        return Response(TokensSerializer(tokens).data, status=status.HTTP_200_OK)


class RefreshView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tokens = AuthService.refresh(**serializer.validated_data)
        return Response(TokensSerializer(tokens).data, status=status.HTTP_200_OK)


class LogoutView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, *args, **kwargs):
        return Response(AuthService.logout(request.user), status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, *args, **kwargs):
        user = AuthService.get_user_by_id(request.user.pk)
        return Response(CurrentUserSerializer(user).data)
