import pytest
from rest_framework.test import APIClient

from apps.core.tests.factories import DEFAULT_PASSWORD, UserFactory


@pytest.fixture
def password():
    return DEFAULT_PASSWORD


@pytest.fixture
def user(db):
    return UserFactory(email="u1@example.cz")


@pytest.fixture
def other_user(db):
    return UserFactory(email="u2@example.cz")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def logged_in_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def logged_in_api_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
