from django.apps import AppConfig

class ConnectionsConfig(AppConfig):
    """Django app config for accounts, onboarding and friend requests."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'connections'
