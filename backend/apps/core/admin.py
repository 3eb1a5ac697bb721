"""
Admin configuration for the custom User model.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm as BaseUserChangeForm
from django.contrib.auth.forms import UserCreationForm as BaseUserCreationForm

from apps.core.models import User


class UserCreationForm(BaseUserCreationForm):
    class Meta(BaseUserCreationForm.Meta):
        model = User
        fields = ("username", "email")


class UserChangeForm(BaseUserChangeForm):
    class Meta(BaseUserChangeForm.Meta):
        model = User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    form = UserChangeForm
    add_form = UserCreationForm
    list_display = ("email", "username", "role_names", "is_staff", "is_active", "created_at")
    list_filter = ("groups", "is_staff", "is_active")
    search_fields = ("email", "username")
    ordering = ("email",)
    readonly_fields = ("created_at", "updated_at")

    fieldsets = BaseUserAdmin.fieldsets + (
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("username", "email", "password1", "password2"),
            },
        ),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("groups")

    def role_names(self, obj):
        return ", ".join(group.name for group in obj.groups.all()) or "-"
    role_names.short_description = "Roles"
