"""
Trade type query service.

Reads the distinct trade types of enabled wallet addresses. The persistence
capability is injected so tests and callers can substitute their own; any
object with fetchDistinctTradeTypes(status) -> List[str] will do.

Database failures are logged once and absorbed into the result. Whether the
caller sees them as an error is decided by strictErrors
(settings.TRADE_TYPES_STRICT_ERRORS by default).
"""
import logging
from typing import Optional

from django.conf import settings

from wallets.Constants import GET_TRADE_TYPES
from wallets.enums import WalletStatus
from wallets.handlers.WalletAddressQueryHandler import TradeTypeQueryError, WalletAddressQueryHandler
from wallets.pojos.TradeTypeQueryResult import TradeTypeQueryResult

logger = logging.getLogger(__name__)


class TradeTypeQueryService:

    def __init__(self, queryHandler=None, strictErrors: Optional[bool] = None):
        self.queryHandler = queryHandler if queryHandler is not None else WalletAddressQueryHandler()
        if strictErrors is None:
            strictErrors = getattr(settings, 'TRADE_TYPES_STRICT_ERRORS', False)
        self.strictErrors = strictErrors

    def getEnabledTradeTypes(self) -> TradeTypeQueryResult:
        logger.info("%s :: getTradeTypes called", GET_TRADE_TYPES)

        try:
            tradeTypes = self.queryHandler.fetchDistinctTradeTypes(WalletStatus.ENABLE)
            result = TradeTypeQueryResult(tradeTypes=list(tradeTypes))
        except TradeTypeQueryError as e:
            logger.error("%s :: DB error: %s", GET_TRADE_TYPES, str(e))
            result = TradeTypeQueryResult.failed(errorMessage=str(e), errorKind=TradeTypeQueryError.KIND)

        logger.info("%s :: result: %s", GET_TRADE_TYPES, result.tradeTypes)
        return result
