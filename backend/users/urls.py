from django.urls import path
from .views import (
    SignupView,
    SigninView,
    RefreshView,
    LogoutView,
    CurrentUserView,
)

app_name = "users"

urlpatterns = [
    path("local/signup", SignupView.as_view(), name="signup"),
    path("local/signin", SigninView.as_view(), name="signin"),
    path("refresh", RefreshView.as_view(), name="refresh"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("local/getCurrentUser", CurrentUserView.as_view(), name="current-user"),
]
