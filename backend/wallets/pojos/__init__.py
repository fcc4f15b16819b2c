"""
POJOs (Plain Old Java Objects - Python equivalent: dataclasses) package.
"""

from .TradeTypeQueryResult import TradeTypeQueryResult

__all__ = [
    'TradeTypeQueryResult',
]
