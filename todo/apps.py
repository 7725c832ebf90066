from django.apps import AppConfig


class TodoConfig(AppConfig):
    """App configuration for the todo tracker (tasks, addresses, appointments)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "todo"
