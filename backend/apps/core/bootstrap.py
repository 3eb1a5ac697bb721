"""
Startup seed for roles and the administrative account.

Runs on every process start (see ``config/wsgi.py``) and from the
``seed_roles_and_admin`` management command. Every step checks for
existing rows first, so repeated runs leave the database unchanged.
"""

import logging
from dataclasses import dataclass, field

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import IntegrityError, transaction

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "admin"


@dataclass
class SeedResult:
    created_roles: list = field(default_factory=list)
    admin_created: bool = False

    @property
    def changed(self):
        return bool(self.created_roles) or self.admin_created


def ensure_roles(result):
    User = get_user_model()
    for role in User.Role.values:
        _, created = Group.objects.get_or_create(name=role)
        if created:
            result.created_roles.append(role)
            logger.info("Created role %s", role)


def ensure_admin(result, email=None, password=None):
    User = get_user_model()
    email = email or settings.ADMIN_EMAIL
    password = password or settings.ADMIN_PASSWORD

    if User.objects.email_taken(email):
        logger.debug("Admin account %s already exists", email)
        return

    if password == DEFAULT_ADMIN_PASSWORD:
        logger.warning(
            "Seeding admin account %s with the well-known default password; "
            "set ADMIN_PASSWORD outside of development.",
            email,
        )

    try:
        with transaction.atomic():
            User.objects.create_member(
                email,
                password,
                role=User.Role.ADMIN,
                is_staff=True,
                is_superuser=True,
            )
    except IntegrityError:
        # Another process seeded the same account first.
        logger.info("Admin account %s was created concurrently", email)
        return

    result.admin_created = True
    logger.info("Created admin account %s", email)


def seed_roles_and_admin(email=None, password=None):
    """Ensure the Admin/User roles and the admin account exist.

    Args:
        email: Admin login, defaults to ``settings.ADMIN_EMAIL``.
        password: Admin password, defaults to ``settings.ADMIN_PASSWORD``.

    Returns:
        A SeedResult describing what had to be created.
    """
    result = SeedResult()
    ensure_roles(result)
    ensure_admin(result, email=email, password=password)
    return result
