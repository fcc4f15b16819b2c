"""
POJO for the trade types query result.
Carries the response envelope for GET /api/wallets/trade_types.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wallets.Constants import RESPONSE_MESSAGE_ERROR, RESPONSE_MESSAGE_SUCCESS


@dataclass
class TradeTypeQueryResult:
    """
    Result of querying the distinct trade types of enabled wallet addresses.

    tradeTypes holds whatever was produced before a failure, so it is empty
    when success is False.
    """
    tradeTypes: List[str] = field(default_factory=list)
    success: bool = True
    errorMessage: Optional[str] = None
    errorKind: Optional[str] = None

    def toDict(self) -> Dict[str, Any]:
        """Success envelope. Used for every response in compatibility mode."""
        return {
            'status_code': 200,
            'message': RESPONSE_MESSAGE_SUCCESS,
            'data': {
                'trade_types': list(self.tradeTypes),
            }
        }

    def toErrorDict(self) -> Dict[str, Any]:
        """Error envelope for strict mode."""
        return {
            'status_code': 500,
            'message': RESPONSE_MESSAGE_ERROR,
            'error_kind': self.errorKind,
            'data': {
                'trade_types': list(self.tradeTypes),
            }
        }

    @classmethod
    def failed(cls, errorMessage: str, errorKind: str) -> 'TradeTypeQueryResult':
        """Factory method for a failed query."""
        return cls(tradeTypes=[], success=False, errorMessage=errorMessage, errorKind=errorKind)
