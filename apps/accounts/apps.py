from django.apps import AppConfig


class AccountsConfig(AppConfig):
    name = 'apps.accounts'

    def ready(self):
        # Registers the bearer scheme with drf-spectacular
        from . import schema  # noqa: F401
