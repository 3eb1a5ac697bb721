"""
Core models — shared timestamp base and the custom User identity.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models.functions import Lower

from apps.core.managers import UserManager


class TimeStampedModel(models.Model):
    """An abstract base class that provides created_at and updated_at."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class User(AbstractUser, TimeStampedModel):
    """Custom user model. The email doubles as the username for our own accounts.

    Roles are plain Django groups; ``Role`` only names the ones the platform
    knows about.
    """

    class Role(models.TextChoices):
        ADMIN = "Admin", "Admin"
        USER = "User", "User"

    email = models.EmailField("email address", unique=True)

    objects = UserManager()

    class Meta:
        db_table = "users"
        constraints = [
            models.UniqueConstraint(Lower("email"), name="unique_user_email_ci"),
        ]

    def __str__(self):
        return self.email or self.username

    def has_role(self, role):
        return self.groups.filter(name=role).exists()

    @property
    def is_admin(self):
        return self.has_role(self.Role.ADMIN)
