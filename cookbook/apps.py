from django.apps import AppConfig

class CookbookConfig(AppConfig):
    """Django app config for the cookbook; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cookbook'

    def ready(self):
        """Import signal modules to register handlers."""
        import cookbook.signals  # noqa: F401
