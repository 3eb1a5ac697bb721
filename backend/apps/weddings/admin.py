"""
Admin configuration for the Wedding model.
"""

from django.contrib import admin
from django.utils.html import format_html

from apps.weddings.models import Wedding


@admin.register(Wedding)
class WeddingAdmin(admin.ModelAdmin):
    """Admin interface for Wedding model."""

    list_display = ("slug", "title", "owner", "public_link", "created_at")
    list_filter = ("created_at",)
    search_fields = ("slug", "title", "owner__email")
    readonly_fields = ("id", "created_at", "updated_at")
    raw_id_fields = ("owner",)
    fieldsets = (
        ("Site Info", {"fields": ("id", "slug", "title")}),
        ("Ownership", {"fields": ("owner",)}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("owner")

    def public_link(self, obj):
        return format_html('<a href="{}" target="_blank">/{}</a>', obj.get_absolute_url(), obj.slug)
    public_link.short_description = "Page"
