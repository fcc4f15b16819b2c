"""
Wallets API Views - read-only endpoints over wallet address records.
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request

from wallets.services.TradeTypeQueryService import TradeTypeQueryService


@api_view(['GET'])
def getTradeTypes(request: Request) -> Response:
    """
    List the distinct trade types of enabled wallet addresses.

    Endpoint: GET /api/wallets/trade_types

    Response:
        Success (200):
        {
            "status_code": 200,
            "message": "success",
            "data": {
                "trade_types": ["usdt.trc20", "usdt.erc20"]
            }
        }

        A database error is logged and still answers 200 with the success
        envelope (trade_types empty), unless TRADE_TYPES_STRICT_ERRORS is on:

        Error (500):
        {
            "status_code": 500,
            "message": "error",
            "error_kind": "persistence_query_failure",
            "data": {"trade_types": []}
        }
    """
    service = TradeTypeQueryService()
    result = service.getEnabledTradeTypes()

    if not result.success and service.strictErrors:
        return Response(result.toErrorDict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(result.toDict(), status=status.HTTP_200_OK)
