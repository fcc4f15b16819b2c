"""
Pytest fixtures for wallet trade types tests. pytest-django provides the test
database; DJANGO_SETTINGS_MODULE is set in pyproject.toml.
"""
import pytest
from rest_framework.test import APIClient

from wallets.enums import WalletStatus
from wallets.models import WalletAddress


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_wallet_address():
    """Create a WalletAddress row; address defaults to a unique value per call."""
    counter = {'n': 0}

    def _make(tradeType, status=WalletStatus.ENABLE, address=None):
        counter['n'] += 1
        return WalletAddress.objects.create(
            trade_type=tradeType,
            address=address or f"T{counter['n']:033d}",
            status=status,
        )

    return _make


@pytest.fixture
def mixed_wallet_addresses(make_wallet_address):
    """Enabled TRC20 x2 and ERC20, disabled BEP20."""
    make_wallet_address('TRC20')
    make_wallet_address('TRC20')
    make_wallet_address('ERC20')
    make_wallet_address('BEP20', status=WalletStatus.DISABLE)


@pytest.fixture
def broken_wallet_table(monkeypatch):
    """Point the WalletAddress model at a table that does not exist."""
    monkeypatch.setattr(WalletAddress._meta, 'db_table', 'wallet_address_missing')


@pytest.fixture
def failing_wallet_query(monkeypatch):
    """Make the WalletAddress ORM query raise the given database exception."""
    def _fail(error):
        def _raise(*args, **kwargs):
            raise error
        monkeypatch.setattr(WalletAddress.objects, 'filter', _raise)

    return _fail
