"""
DRF exception handler that renders service errors as structured JSON.
"""

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.core.exceptions import ServiceError

logger = logging.getLogger(__name__)


def service_exception_handler(exc, context):
    """Map ServiceError subclasses to ``{"error", "detail", "fields"}`` bodies.

    Anything else falls through to DRF's default handler.
    """
    if isinstance(exc, ServiceError):
        view = context.get("view")
        logger.info(
            "%s in %s: %s",
            exc.code,
            view.__class__.__name__ if view else "api",
            exc.message,
        )
        return Response(exc.as_dict(), status=exc.status_code)

    return exception_handler(exc, context)
