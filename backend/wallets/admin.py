"""
Django admin configuration for WalletAddress.
"""
from django.contrib import admin
from .models import WalletAddress


@admin.register(WalletAddress)
class WalletAddressAdmin(admin.ModelAdmin):
    """Admin interface for WalletAddress model"""

    list_display = [
        'id',
        'trade_type',
        'address',
        'is_enabled_bool',
        'other_notify',
        'updated_at',
    ]

    list_filter = [
        'trade_type',
        'status',
    ]

    search_fields = [
        'address',
        'remark',
    ]

    ordering = ['-updated_at']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Wallet Information', {
            'fields': ('trade_type', 'address', 'remark')
        }),
        ('Status', {
            'fields': ('status', 'other_notify')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    list_per_page = 50

    @admin.display(boolean=True, description='Enabled', ordering='status')
    def is_enabled_bool(self, obj):
        return obj.isEnabled
