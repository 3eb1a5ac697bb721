"""
Wedding model — one public wedding website, addressed by its slug.
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import CASCADE
from django.urls import reverse

from apps.core.models import TimeStampedModel

RESERVED_SLUGS = frozenset(
    {
        "account",
        "admin",
        "api",
        "media",
        "moje-weby",
        "static",
    }
)


class WeddingQuerySet(models.QuerySet):
    def for_owner(self, owner):
        return self.filter(owner_id=owner.pk)

    def by_slug(self, slug):
        return self.filter(slug=Wedding.normalize_slug(slug))


class Wedding(TimeStampedModel):
    """A wedding website created by a user.

    The slug is the public URL segment (``/trnkovi``) and is unique across
    all records. ``owner`` is a plain foreign key; resolve the identity with
    ``registry.lookup_owner`` rather than traversing it in hot paths.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(
        max_length=100,
        help_text="URL segment of the public page, e.g. 'trnkovi'",
    )
    title = models.CharField(
        max_length=200,
        help_text="Heading shown on the public page",
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=CASCADE,
        related_name="weddings",
    )

    objects = WeddingQuerySet.as_manager()

    class Meta:
        db_table = "weddings"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["slug"], name="unique_wedding_slug")
        ]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="idx_wedding_owner_created"),
        ]

    def __str__(self):
        return f"{self.title} (/{self.slug})"

    @staticmethod
    def normalize_slug(slug):
        return (slug or "").strip().lower()

    def clean(self):
        super().clean()
        if self.slug in RESERVED_SLUGS:
            raise ValidationError({"slug": "Tato adresa je rezervovaná."})

    def save(self, *args, **kwargs):
        self.slug = self.normalize_slug(self.slug)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("weddings:public-site", kwargs={"slug": self.slug})
