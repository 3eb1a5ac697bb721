from unittest import mock

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.core.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from apps.core.tests.factories import UserFactory, WeddingFactory
from apps.weddings.models import Wedding
from apps.weddings.services import registry

pytestmark = pytest.mark.django_db


def test_create_and_fetch_by_slug(user):
    registry.create_site(user, "Jana & Petr", "trnkovi")

    site = registry.get_site_by_slug("trnkovi")

    assert site.title == "Jana & Petr"
    assert site.owner_id == user.pk


def test_duplicate_slug_conflicts_and_keeps_original(user, other_user):
    registry.create_site(user, "Jana & Petr", "trnkovi")

    with pytest.raises(ConflictError) as excinfo:
        registry.create_site(other_user, "Jiní Trnkovi", "trnkovi")

    assert "slug" in excinfo.value.errors
    sites = Wedding.objects.filter(slug="trnkovi")
    assert sites.count() == 1
    assert sites.get().owner_id == user.pk


def test_slug_is_case_insensitive(user, other_user):
    registry.create_site(user, "Jana & Petr", "Trnkovi")

    with pytest.raises(ConflictError):
        registry.create_site(other_user, "Kopie", "TRNKOVI")

    assert registry.get_site_by_slug("TrnKovi").slug == "trnkovi"


def test_concurrent_insert_is_reported_as_conflict(user, other_user):
    registry.create_site(other_user, "Jana & Petr", "trnkovi")
    no_match = Wedding.objects.none()

    # The exists-check misses the row, so the INSERT hits the unique constraint.
    with mock.patch.object(Wedding.objects, "by_slug", return_value=no_match):
        with pytest.raises(ConflictError):
            registry.create_site(user, "Kopie", "trnkovi")

    site = Wedding.objects.get(slug="trnkovi")
    assert site.owner_id == other_user.pk
    assert Wedding.objects.count() == 1


@pytest.mark.parametrize(
    "title, slug, field",
    [
        ("", "trnkovi", "title"),
        ("   ", "trnkovi", "title"),
        ("x" * 201, "trnkovi", "title"),
        ("Jana & Petr", "", "slug"),
        ("Jana & Petr", "s" * 101, "slug"),
        ("Jana & Petr", "jana a petr", "slug"),
        ("Jana & Petr", "moje-weby", "slug"),
        ("Jana & Petr", "admin", "slug"),
    ],
)
def test_invalid_input_raises_validation_error(user, title, slug, field):
    with pytest.raises(ValidationError) as excinfo:
        registry.create_site(user, title, slug)

    assert field in excinfo.value.errors
    assert not Wedding.objects.exists()


def test_limits_are_inclusive(user):
    site = registry.create_site(user, "x" * 200, "s" * 100)

    assert len(site.title) == 200
    assert len(site.slug) == 100


def test_create_requires_authenticated_owner():
    with pytest.raises(AuthenticationRequiredError):
        registry.create_site(AnonymousUser(), "Jana & Petr", "trnkovi")
    with pytest.raises(AuthenticationRequiredError):
        registry.create_site(None, "Jana & Petr", "trnkovi")


def test_unknown_slug_is_not_found():
    with pytest.raises(NotFoundError):
        registry.get_site_by_slug("neexistuje")
    with pytest.raises(NotFoundError):
        registry.get_site_by_slug("")


def test_listing_contains_only_own_sites(user, other_user):
    mine = {WeddingFactory(owner=user).pk for _ in range(3)}
    WeddingFactory.create_batch(2, owner=other_user)

    listing = registry.list_sites_for_owner(user)

    assert {site.pk for site in listing} == mine
    assert all(site.owner_id == user.pk for site in listing)


def test_listing_is_empty_for_new_owner(user):
    listing = registry.list_sites_for_owner(user)

    assert list(listing) == []
    assert len(listing) == 0
    assert not listing


def test_listing_requires_authentication():
    with pytest.raises(AuthenticationRequiredError):
        registry.list_sites_for_owner(AnonymousUser())
    with pytest.raises(AuthenticationRequiredError):
        registry.list_sites_for_owner(None)


def test_listing_is_bounded(user):
    WeddingFactory.create_batch(5, owner=user)

    listing = registry.list_sites_for_owner(user, limit=3)

    assert len(listing) == 3
    assert len(list(listing)) == 3


def test_listing_is_lazy_and_restartable(user, django_assert_num_queries):
    with django_assert_num_queries(0):
        listing = registry.list_sites_for_owner(user)

    WeddingFactory(owner=user, slug="prvni")
    assert [site.slug for site in listing] == ["prvni"]

    WeddingFactory(owner=user, slug="druhy")
    assert {site.slug for site in listing} == {"prvni", "druhy"}


def test_lookup_owner(user):
    site = registry.create_site(user, "Jana & Petr", "trnkovi")

    assert registry.lookup_owner(site) == user


def test_listing_default_limit_comes_from_settings(user, settings):
    settings.WEDDING_SITES_LIST_LIMIT = 2
    WeddingFactory.create_batch(3, owner=user)

    assert len(registry.list_sites_for_owner(user)) == 2


def test_scenario_two_owners_one_slug():
    u1 = UserFactory(email="u1@example.cz")
    u2 = UserFactory(email="u2@example.cz")

    registry.create_site(u1, "Jana & Petr", "trnkovi")
    site = registry.get_site_by_slug("trnkovi")
    assert (site.title, site.owner_id) == ("Jana & Petr", u1.pk)

    with pytest.raises(ConflictError):
        registry.create_site(u2, "Jana & Petr", "trnkovi")

    assert Wedding.objects.filter(slug="trnkovi").count() == 1
    assert registry.get_site_by_slug("trnkovi").owner_id == u1.pk
