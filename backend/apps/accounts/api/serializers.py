"""
DRF serializers for the accounts API.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)


class UserSerializer(serializers.ModelSerializer):
    """Read-only view of the signed-in identity."""

    roles = serializers.SerializerMethodField()

    class Meta:
        model = get_user_model()
        fields = ["id", "email", "roles"]
        read_only_fields = fields

    def get_roles(self, obj):
        return sorted(group.name for group in obj.groups.all())
