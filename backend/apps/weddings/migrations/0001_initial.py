# Generated migration for the Wedding model
import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Wedding",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "slug",
                    models.SlugField(
                        max_length=100, help_text="URL segment of the public page, e.g. 'trnkovi'"
                    ),
                ),
                (
                    "title",
                    models.CharField(max_length=200, help_text="Heading shown on the public page"),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="weddings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "weddings",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="wedding",
            constraint=models.UniqueConstraint(fields=["slug"], name="unique_wedding_slug"),
        ),
        migrations.AddIndex(
            model_name="wedding",
            index=models.Index(fields=["owner", "created_at"], name="idx_wedding_owner_created"),
        ),
    ]
