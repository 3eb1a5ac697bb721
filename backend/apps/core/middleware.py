"""
Custom middleware for the wedding site project.

ServiceErrorMiddleware — converts service errors raised by HTML views into
login redirects, 404s, or plain status responses.
"""

import logging

from django.contrib.auth.views import redirect_to_login
from django.http import Http404, HttpResponse

from apps.core.exceptions import (
    AuthenticationRequiredError,
    NotFoundError,
    ServiceError,
)

logger = logging.getLogger(__name__)


class ServiceErrorMiddleware:
    """Recover service errors at the HTML request boundary.

    Unauthenticated access to owner-scoped pages redirects to ``LOGIN_URL``
    with a ``next`` parameter, unknown resources become the regular 404
    page, and any other ServiceError becomes a plain-text response carrying
    its status code. API paths are exempt because DRF has its own handler.
    """

    EXEMPT_PREFIXES = (
        "/api/",
        "/admin/",
    )

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, ServiceError) or self._is_exempt(request.path):
            return None

        if isinstance(exception, AuthenticationRequiredError):
            return redirect_to_login(request.get_full_path())

        if isinstance(exception, NotFoundError):
            raise Http404(exception.message)

        logger.info("Unhandled %s on %s: %s", exception.code, request.path, exception.message)
        return HttpResponse(
            exception.message,
            status=exception.status_code,
            content_type="text/plain; charset=utf-8",
        )

    def _is_exempt(self, path):
        """Return True if *path* is handled by another error boundary."""
        return any(path.startswith(prefix) for prefix in self.EXEMPT_PREFIXES)
