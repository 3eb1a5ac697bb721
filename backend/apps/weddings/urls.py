"""
URL patterns for the owner dashboard and the public pages.

The catch-all ``<slug>`` route must stay last in the project URLconf.
"""

from django.urls import path

from .views import dashboard, public_site

app_name = "weddings"

urlpatterns = [
    path("moje-weby", dashboard, name="dashboard"),
    path("<slug:slug>", public_site, name="public-site"),
]
