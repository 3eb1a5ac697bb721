"""
URL patterns for the accounts API (mounted at api/v1/auth/).
"""

from django.urls import path

from .views import CurrentUserView, LoginView, LogoutView

app_name = "accounts-api"

urlpatterns = [
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("me/", CurrentUserView.as_view(), name="me"),
]
