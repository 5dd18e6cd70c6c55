from django.apps import AppConfig


class TimelinesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'timelines'

    def ready(self):
        from . import signals  # noqa: F401
