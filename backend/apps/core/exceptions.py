"""
Error taxonomy shared by the services and the request boundaries.

Services raise these; ``apps.core.api.exception_handler`` turns them into
JSON for the REST API and ``apps.core.middleware.ServiceErrorMiddleware``
turns them into redirects or status responses for HTML views.
"""

from django.core.exceptions import ImproperlyConfigured


class ServiceError(Exception):
    """Base class for errors recovered at the request boundary."""

    status_code = 400
    code = "error"
    default_message = "The request could not be completed."

    def __init__(self, message=None, *, errors=None):
        self.message = message or self.default_message
        self.errors = errors or {}
        super().__init__(self.message)

    def as_dict(self):
        data = {"error": self.code, "detail": self.message}
        if self.errors:
            data["fields"] = self.errors
        return data


class ValidationError(ServiceError):
    status_code = 400
    code = "validation_error"
    default_message = "Invalid input."


class ConflictError(ServiceError):
    status_code = 409
    code = "conflict"
    default_message = "The resource already exists."


class NotFoundError(ServiceError):
    status_code = 404
    code = "not_found"
    default_message = "Not found."


class AuthenticationError(ServiceError):
    status_code = 401
    code = "authentication_failed"
    default_message = "Invalid credentials."


class AuthenticationRequiredError(ServiceError):
    status_code = 401
    code = "authentication_required"
    default_message = "Authentication is required."


class ConfigurationError(ImproperlyConfigured):
    """A required startup setting is missing or malformed."""
