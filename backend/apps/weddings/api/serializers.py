"""
DRF serializers for the weddings app.
"""

from rest_framework import serializers

from apps.weddings.models import Wedding


class WeddingListSerializer(serializers.ModelSerializer):
    """Read-only serializer for an owner's site listing."""

    url = serializers.SerializerMethodField()

    class Meta:
        model = Wedding
        fields = [
            "id",
            "slug",
            "title",
            "owner_id",
            "url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_url(self, obj):
        request = self.context.get("request")
        path = obj.get_absolute_url()
        return request.build_absolute_uri(path) if request else path


class WeddingPublicSerializer(serializers.ModelSerializer):
    """What anyone may see about a site."""

    class Meta:
        model = Wedding
        fields = ["slug", "title", "owner_id"]
        read_only_fields = fields


class WeddingCreateSerializer(serializers.Serializer):
    """Input for creating a site.

    Only shape is checked here; length, slug alphabet, reserved names and
    uniqueness are enforced by the registry so the HTML and API paths share
    one set of rules.
    """

    title = serializers.CharField(allow_blank=True, trim_whitespace=True)
    slug = serializers.CharField(allow_blank=True, trim_whitespace=True)
