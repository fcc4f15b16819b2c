"""
Enums for the wallets application.
Contains all enumeration types used across wallet-related models and logic.
"""
from django.db import models


class WalletStatus(models.IntegerChoices):
    """
    Enum for wallet address status.
    Only ENABLE addresses are eligible for active use.
    """
    DISABLE = 0, 'Disabled'
    ENABLE = 1, 'Enabled'


class OtherNotify(models.IntegerChoices):
    """
    Enum for notifications on transfers not tied to an order.
    """
    DISABLE = 0, 'Disabled'
    ENABLE = 1, 'Enabled'
