"""
API views for wedding sites.
"""

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.exceptions import ValidationError
from apps.weddings.models import Wedding
from apps.weddings.services import registry

from .serializers import (
    WeddingCreateSerializer,
    WeddingListSerializer,
    WeddingPublicSerializer,
)


class WeddingListCreateView(generics.ListAPIView):
    """GET: list the caller's sites. POST: create a new site.

    Authentication is checked by the registry, which raises
    AuthenticationRequiredError (401) for anonymous callers.
    """

    queryset = Wedding.objects.none()
    permission_classes = [AllowAny]
    serializer_class = WeddingListSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ["slug"]
    search_fields = ["title", "slug"]
    ordering_fields = ["created_at", "title", "slug"]

    def get_queryset(self):
        return registry.owner_sites(self.request.user)

    def post(self, request, *args, **kwargs):
        serializer = WeddingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(errors=serializer.errors)

        site = registry.create_site(
            request.user,
            serializer.validated_data["title"],
            serializer.validated_data["slug"],
        )
        response_serializer = WeddingListSerializer(site, context={"request": request})
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class WeddingDetailView(APIView):
    """GET: public details of a site by slug."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, slug):
        site = registry.get_site_by_slug(slug)
        return Response(WeddingPublicSerializer(site).data)
