# apps/accounts/urls.py
from django.urls import path
from . import api

urlpatterns = [
    path("login/", api.SignUpOrLoginAPI.as_view(), name="auth-login"),
    path("token/refresh/", api.TokenRefreshAPI.as_view(), name="auth-token-refresh"),
    path("logout/", api.LogoutAPI.as_view(), name="auth-logout"),
]
