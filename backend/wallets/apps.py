from django.apps import AppConfig


class WalletsConfig(AppConfig):
    """
    Wallets app configuration.
    Owns the WalletAddress model and the trade types endpoint.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'wallets'
    verbose_name = 'Wallet Addresses'
