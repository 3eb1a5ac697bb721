import pytest
from django.contrib.auth import get_user_model
from django.db import IntegrityError

from apps.core.tests.factories import UserFactory

pytestmark = pytest.mark.django_db

User = get_user_model()


def test_create_member_uses_email_as_username():
    user = User.objects.create_member("Jana@Example.CZ", "heslo")

    assert user.username == user.email == "jana@example.cz"
    assert user.check_password("heslo")
    assert user.has_role(User.Role.USER)
    assert not user.is_admin


def test_email_lookup_is_case_insensitive():
    user = UserFactory(email="petr@example.cz")

    assert User.objects.get_by_email("  PETR@example.cz ") == user
    assert User.objects.email_taken("Petr@Example.cz")
    assert not User.objects.email_taken("nikdo@example.cz")


def test_email_is_unique():
    UserFactory(email="dup@example.cz", username="first")
    with pytest.raises(IntegrityError):
        User.objects.create_user(username="second", email="dup@example.cz", password="x")


def test_admin_role_flag():
    admin = UserFactory(roles=["Admin"])

    assert admin.is_admin
    assert str(admin) == admin.email


def test_email_is_unique_regardless_of_case():
    UserFactory(email="jana@example.cz")
    with pytest.raises(IntegrityError):
        User.objects.create_user(username="second", email="Jana@example.cz", password="x")
