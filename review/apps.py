from django.apps import AppConfig


class ReviewConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "review"
    verbose_name = "Review scheduler"

    def ready(self):
        from studyhub.logging import configure_logging

        configure_logging()
