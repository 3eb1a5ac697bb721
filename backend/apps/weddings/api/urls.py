"""
URL patterns for the weddings API (mounted at api/v1/weddings/).
"""

from django.urls import path

from .views import WeddingDetailView, WeddingListCreateView

app_name = "weddings-api"

urlpatterns = [
    path("", WeddingListCreateView.as_view(), name="wedding-list"),
    path("<slug:slug>/", WeddingDetailView.as_view(), name="wedding-detail"),
]
