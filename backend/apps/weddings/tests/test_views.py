from urllib.parse import urlsplit

import pytest

from apps.core.tests.factories import WeddingFactory
from apps.weddings.models import Wedding

pytestmark = pytest.mark.django_db


def test_home_page(client):
    response = client.get("/")

    assert response.status_code == 200


def test_public_page_renders_title(client):
    WeddingFactory(slug="trnkovi", title="Jana & Petr")

    response = client.get("/trnkovi")

    assert response.status_code == 200
    assert "Jana &amp; Petr" in response.content.decode()


def test_public_page_is_case_insensitive(client):
    WeddingFactory(slug="trnkovi", title="Jana & Petr")

    assert client.get("/Trnkovi").status_code == 200


def test_unknown_slug_is_404(client):
    assert client.get("/neexistuje").status_code == 404


def test_public_page_does_not_need_login(client):
    WeddingFactory(slug="trnkovi")
    client.logout()

    assert client.get("/trnkovi").status_code == 200


def test_dashboard_redirects_anonymous_to_login(client):
    response = client.get("/moje-weby")

    assert response.status_code == 302
    location = urlsplit(response["Location"])
    assert location.path == "/account/login"
    assert "next=/moje-weby" in location.query


def test_dashboard_create_requires_login(client):
    response = client.post("/moje-weby", {"title": "Jana & Petr", "slug": "trnkovi"})

    assert urlsplit(response["Location"]).path == "/account/login"
    assert not Wedding.objects.exists()


def test_dashboard_lists_only_own_sites(logged_in_client, user, other_user):
    WeddingFactory(owner=user, title="Moje svatba")
    WeddingFactory(owner=other_user, title="Cizí svatba")

    response = logged_in_client.get("/moje-weby")

    content = response.content.decode()
    assert response.status_code == 200
    assert "Moje svatba" in content
    assert "Cizí svatba" not in content


def test_dashboard_creates_site(logged_in_client, user):
    response = logged_in_client.post("/moje-weby", {"title": "Jana & Petr", "slug": "trnkovi"})

    assert response.status_code == 302
    assert response["Location"] == "/moje-weby"
    site = Wedding.objects.get(slug="trnkovi")
    assert site.owner == user


def test_dashboard_duplicate_slug_is_409(logged_in_client, other_user):
    WeddingFactory(owner=other_user, slug="trnkovi")

    response = logged_in_client.post("/moje-weby", {"title": "Jana & Petr", "slug": "trnkovi"})

    assert response.status_code == 409
    assert "Tato adresa je již obsazená." in response.content.decode()
    assert Wedding.objects.filter(slug="trnkovi").count() == 1


@pytest.mark.parametrize(
    "data",
    [
        {"title": "", "slug": "trnkovi"},
        {"title": "Jana & Petr", "slug": "jana a petr"},
        {"title": "Jana & Petr", "slug": "api"},
    ],
)
def test_dashboard_invalid_input_is_400(logged_in_client, data):
    response = logged_in_client.post("/moje-weby", data)

    assert response.status_code == 400
    assert not Wedding.objects.exists()


def test_full_flow_login_create_view(client, user, password):
    client.post("/account/login", {"email": user.email, "password": password})
    client.post("/moje-weby", {"title": "Jana & Petr", "slug": "trnkovi"})
    client.post("/account/logout")

    response = client.get("/trnkovi")

    assert response.status_code == 200
    assert "Jana &amp; Petr" in response.content.decode()
