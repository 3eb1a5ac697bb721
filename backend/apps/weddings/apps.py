from django.apps import AppConfig


class WeddingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.weddings"
    label = "weddings"
    verbose_name = "Wedding sites"
