from django.apps import AppConfig

class AutoTitleConfig(AppConfig):
  default_auto_field = "django.db.models.BigAutoField"
  name = "autotitle"
  label = "autotitle"
  verbose_name = "Automatic titles"

  def ready(self) -> None:
    # Import signal handlers to connect them
    from . import signals  # noqa: F401
