"""
Identity provider: a thin capability layer over Django auth and sessions.

Password hashing, session storage and cookie issuance stay inside
``django.contrib.auth`` / ``django.contrib.sessions``; this module only
exposes the operations the views need:

    verify(email, password)       -> User | None
    create_session(request, user) -> session key
    current_identity(request)     -> User | None
    end_session(request)
"""

import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import IntegrityError, transaction

from apps.core.exceptions import AuthenticationError, ConflictError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Neplatné přihlašovací údaje."
EMAIL_TAKEN_MESSAGE = "Účet s tímto e-mailem již existuje."


class IdentityProvider:
    """Django-backed implementation of the identity capability."""

    def verify(self, email, password, request=None):
        """Return the active user matching *email*/*password*, or None."""
        if not email or not password:
            return None

        User = get_user_model()
        try:
            candidate = User.objects.get_by_email(email)
        except User.DoesNotExist:
            return None

        # Django's backend checks the password hash and ``is_active``.
        return authenticate(request, username=candidate.get_username(), password=password)

    def create_session(self, request, user):
        """Bind *user* to the request's session and return the session key."""
        login(request, user)
        return request.session.session_key

    def current_identity(self, request):
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return user

    def end_session(self, request):
        user = self.current_identity(request)
        logout(request)
        if user is not None:
            logger.info("User %s signed out", user.email)

    def sign_in(self, request, email, password):
        """Verify credentials and open a session.

        Raises:
            AuthenticationError: when the credentials do not match an
                active identity. No session is created in that case.
        """
        user = self.verify(email, password, request=request)
        if user is None:
            logger.info("Failed sign-in attempt for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        self.create_session(request, user)
        logger.info("User %s signed in", user.email)
        return user

    def register(self, request, email, password):
        """Create an identity in the ``User`` role and sign it in."""
        User = get_user_model()
        if User.objects.email_taken(email):
            raise ConflictError(EMAIL_TAKEN_MESSAGE, errors={"email": [EMAIL_TAKEN_MESSAGE]})

        try:
            with transaction.atomic():
                user = User.objects.create_member(email, password, role=User.Role.USER)
        except IntegrityError as exc:
            # Another registration for the same email committed first.
            logger.info("Email %s was registered concurrently", email)
            raise ConflictError(EMAIL_TAKEN_MESSAGE, errors={"email": [EMAIL_TAKEN_MESSAGE]}) from exc

        logger.info("Registered user %s", user.email)
        self.create_session(request, user)
        return user


identity_provider = IdentityProvider()
