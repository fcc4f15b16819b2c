"""
Handler for read-only wallet address queries.
"""
from typing import List

from django.db import Error as DBError

from wallets.models import WalletAddress


class TradeTypeQueryError(Exception):
    """Wraps a database failure raised while reading trade types."""

    KIND = "persistence_query_failure"

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause


class WalletAddressQueryHandler:

    @staticmethod
    def fetchDistinctTradeTypes(status: int) -> List[str]:
        """
        Distinct trade_type values of wallet addresses with the given status.

        order_by() clears Meta.ordering, otherwise the ordering column ends up in
        the SELECT DISTINCT and duplicates come back.

        Raises:
            TradeTypeQueryError: on any database error, including
                InterfaceError from a stale reused connection
        """
        try:
            return list(
                WalletAddress.objects
                .filter(status=status)
                .order_by()
                .values_list('trade_type', flat=True)
                .distinct()
            )
        except DBError as e:
            raise TradeTypeQueryError(e) from e
