"""
API views for session login/logout.

Unlike the HTML endpoints these return structured results; failures are
raised as service errors and rendered by the project exception handler.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.services.identity import identity_provider
from apps.core.exceptions import AuthenticationRequiredError, ValidationError

from .serializers import LoginSerializer, UserSerializer


class LoginView(APIView):
    """POST: verify credentials and open a session."""

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(errors=serializer.errors)

        user = identity_provider.sign_in(
            request._request,
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )
        return Response(
            {"authenticated": True, "user": UserSerializer(user).data},
            status=status.HTTP_200_OK,
        )


class LogoutView(APIView):
    """POST: end the current session, if any."""

    permission_classes = [AllowAny]

    def post(self, request):
        identity_provider.end_session(request._request)
        return Response({"authenticated": False}, status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    """GET: the identity bound to the current session."""

    permission_classes = [AllowAny]

    def get(self, request):
        user = identity_provider.current_identity(request)
        if user is None:
            raise AuthenticationRequiredError()
        return Response(UserSerializer(user).data)
