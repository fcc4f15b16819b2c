"""
WalletAddress model for the payment wallets the gateway receives funds on.
Each row binds one address to one trade type (blockchain / payment network).
"""
from django.db import models

from wallets.Constants import ADDRESS_MAX_LENGTH, REMARK_MAX_LENGTH, TRADE_TYPE_MAX_LENGTH
from wallets.enums import OtherNotify, WalletStatus


class WalletAddress(models.Model):

    id = models.AutoField(primary_key=True)

    trade_type = models.CharField(
        max_length=TRADE_TYPE_MAX_LENGTH,
        db_index=True,
        help_text="Network identifier (usdt.trc20, TRC20, ERC20, etc.)"
    )

    address = models.CharField(
        max_length=ADDRESS_MAX_LENGTH,
        db_index=True,
        help_text="Blockchain wallet address"
    )

    # Status
    status = models.SmallIntegerField(
        choices=WalletStatus.choices,
        default=WalletStatus.ENABLE,
        db_index=True,
        help_text="0=disabled, 1=enabled"
    )

    other_notify = models.SmallIntegerField(
        choices=OtherNotify.choices,
        default=OtherNotify.DISABLE,
        help_text="Notify on transfers not tied to an order"
    )

    remark = models.CharField(
        max_length=REMARK_MAX_LENGTH,
        blank=True,
        default='',
        help_text="Operator note"
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the address was registered"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Last update timestamp"
    )

    class Meta:
        """Model metadata"""
        db_table = 'wallet_address'
        verbose_name = 'Wallet Address'
        verbose_name_plural = 'Wallet Addresses'
        ordering = ['-updated_at']
        unique_together = [('trade_type', 'address')]

    @property
    def isEnabled(self) -> bool:
        return self.status == WalletStatus.ENABLE

    def __str__(self):
        return f"{self.trade_type}:{self.address}"
