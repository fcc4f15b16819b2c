"""
Pytest tests for WalletAddressQueryHandler against the test database.
"""
import pytest
from django.db import DatabaseError, InterfaceError

from wallets.enums import WalletStatus
from wallets.handlers.WalletAddressQueryHandler import TradeTypeQueryError, WalletAddressQueryHandler

pytestmark = pytest.mark.django_db


def test_fetch_distinct_enabled(mixed_wallet_addresses):
    tradeTypes = WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE)

    assert sorted(tradeTypes) == ['ERC20', 'TRC20']


def test_fetch_distinct_disabled(mixed_wallet_addresses):
    tradeTypes = WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.DISABLE)

    assert tradeTypes == ['BEP20']


def test_default_ordering_does_not_break_distinct(make_wallet_address):
    # rows of one trade type with different updated_at values
    for _ in range(3):
        make_wallet_address('usdt.erc20')

    assert WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE) == ['usdt.erc20']


def test_same_address_on_two_networks(make_wallet_address):
    make_wallet_address('usdt.erc20', address='0xabc')
    make_wallet_address('usdt.polygon', address='0xabc')

    tradeTypes = WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE)

    assert sorted(tradeTypes) == ['usdt.erc20', 'usdt.polygon']


def test_database_error_is_wrapped(broken_wallet_table):
    with pytest.raises(TradeTypeQueryError) as excinfo:
        WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE)

    assert excinfo.value.KIND == 'persistence_query_failure'
    assert isinstance(excinfo.value.cause, DatabaseError)


def test_interface_error_is_wrapped(failing_wallet_query):
    failing_wallet_query(InterfaceError("connection already closed"))

    with pytest.raises(TradeTypeQueryError) as excinfo:
        WalletAddressQueryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE)

    assert isinstance(excinfo.value.cause, InterfaceError)
    assert str(excinfo.value) == "connection already closed"
