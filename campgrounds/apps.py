from django.apps import AppConfig


class CampgroundsConfig(AppConfig):
    """App configuration for campground listings, their reviews and error pages."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "campgrounds"
