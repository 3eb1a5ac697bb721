"""
Site registry: owner-scoped creation and listing of wedding sites, and
public lookup by slug.

All failures are raised as ``apps.core.exceptions`` errors; the HTML
middleware and the DRF exception handler decide how they reach the client.
"""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from apps.core.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from apps.weddings.models import Wedding

logger = logging.getLogger(__name__)

SLUG_TAKEN_MESSAGE = "Tato adresa je již obsazená."


def _require_owner(owner):
    if owner is None or not getattr(owner, "is_authenticated", False):
        raise AuthenticationRequiredError()
    return owner


class SiteListing:
    """Lazy, bounded view over one owner's sites.

    Nothing is fetched until the listing is iterated, and every iteration
    runs a fresh query, so the same listing can be walked more than once.
    At most ``limit`` records are produced.
    """

    def __init__(self, queryset, limit, chunk_size=50):
        self._queryset = queryset
        self.limit = limit
        self.chunk_size = chunk_size

    def _bounded(self):
        return self._queryset[: self.limit]

    def __iter__(self):
        return self._bounded().iterator(chunk_size=self.chunk_size)

    def __len__(self):
        return self._bounded().count()

    def __bool__(self):
        return self.limit > 0 and self._queryset.exists()

    def __repr__(self):
        return f"<SiteListing limit={self.limit}>"


def owner_sites(owner):
    """Return the owner's sites as a queryset, newest first."""
    owner = _require_owner(owner)
    return Wedding.objects.for_owner(owner).order_by("-created_at", "id")


def list_sites_for_owner(owner, *, limit=None):
    """Return a SiteListing over the sites owned by *owner*.

    Raises:
        AuthenticationRequiredError: if *owner* is missing or anonymous.
    """
    if limit is None:
        limit = settings.WEDDING_SITES_LIST_LIMIT
    return SiteListing(owner_sites(owner), limit=limit)


def create_site(owner, title, slug):
    """Persist a new wedding site for *owner*.

    Args:
        owner: The authenticated user creating the site.
        title: Page heading, 1-200 characters.
        slug: Public URL segment, 1-100 slug characters, case-insensitive.

    Returns:
        The saved Wedding.

    Raises:
        AuthenticationRequiredError: if *owner* is missing or anonymous.
        ValidationError: if a field is empty, too long, malformed or reserved.
        ConflictError: if another site already uses the slug.
    """
    owner = _require_owner(owner)
    site = Wedding(
        owner=owner,
        title=(title or "").strip(),
        slug=Wedding.normalize_slug(slug),
    )

    try:
        site.full_clean(validate_unique=False, validate_constraints=False)
    except DjangoValidationError as exc:
        raise ValidationError(errors=exc.message_dict) from exc

    try:
        with transaction.atomic():
            if Wedding.objects.by_slug(site.slug).exists():
                logger.info("Rejected duplicate slug %r for user %s", site.slug, owner.pk)
                raise ConflictError(SLUG_TAKEN_MESSAGE, errors={"slug": [SLUG_TAKEN_MESSAGE]})
            site.save(force_insert=True)
    except IntegrityError as exc:
        # Lost a race against a concurrent insert of the same slug.
        logger.info("Slug %r was taken concurrently", site.slug)
        raise ConflictError(SLUG_TAKEN_MESSAGE, errors={"slug": [SLUG_TAKEN_MESSAGE]}) from exc

    logger.info("Created wedding site /%s for user %s", site.slug, owner.pk)
    return site


def get_site_by_slug(slug):
    """Public lookup of a site by its slug.

    Raises:
        NotFoundError: if no site uses *slug*.
    """
    normalized = Wedding.normalize_slug(slug)
    if not normalized:
        raise NotFoundError("Stránka nenalezena.")
    try:
        return Wedding.objects.by_slug(normalized).get()
    except Wedding.DoesNotExist:
        raise NotFoundError("Stránka nenalezena.")


def lookup_owner(site):
    """Resolve the identity that owns *site*."""
    return get_user_model().objects.get(pk=site.owner_id)
