"""
Custom model managers for core models.
"""

from django.contrib.auth.models import Group
from django.contrib.auth.models import UserManager as DjangoUserManager


class UserManager(DjangoUserManager):
    """User manager that keys our own accounts by email."""

    def get_by_email(self, email):
        return self.get(email__iexact=email.strip())

    def email_taken(self, email):
        return self.filter(email__iexact=email.strip()).exists()

    def create_member(self, email, password, role="User", **extra_fields):
        """Create a user whose username is its email and attach it to *role*.

        Args:
            email: Login email, stored lower-cased.
            password: Plain password, hashed by Django's hasher.
            role: Name of the group the new user joins.

        Returns:
            The newly created User instance.
        """
        email = self.normalize_email(email.strip()).lower()
        user = self.create_user(
            username=email, email=email, password=password, **extra_fields
        )
        group, _ = Group.objects.get_or_create(name=role)
        user.groups.add(group)
        return user
