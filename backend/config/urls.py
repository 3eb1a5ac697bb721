"""
URL configuration for the wedding site project.
"""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from apps.weddings.views import home

urlpatterns = [
    path('', home, name='home'),
    path('admin/', admin.site.urls),

    # Account pages
    path('account/', include('apps.accounts.urls')),

    # API v1
    path('api/v1/auth/', include('apps.accounts.api.urls')),
    path('api/v1/weddings/', include('apps.weddings.api.urls')),

    # API Schema & Docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path(
        'api/schema/swagger/',
        SpectacularSwaggerView.as_view(url_name='schema'),
        name='swagger-ui',
    ),
    path(
        'api/schema/redoc/',
        SpectacularRedocView.as_view(url_name='schema'),
        name='redoc',
    ),
]

# Include Django Debug Toolbar URLs when in DEBUG and debug_toolbar is installed
if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    urlpatterns = [path('__debug__/', include('debug_toolbar.urls'))] + urlpatterns

# Dashboard and the public /<slug> pages; the slug catch-all must come last.
urlpatterns += [
    path('', include('apps.weddings.urls')),
]
