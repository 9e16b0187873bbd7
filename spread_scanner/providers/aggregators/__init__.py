"""DEX aggregator quote adapters."""
from __future__ import annotations

from .cow import CowQuoteProvider
from .oneinch import OneInchQuoteProvider
from .paraswap import ParaswapQuoteProvider
from .zerox import ZeroExQuoteProvider

__all__ = [
    "CowQuoteProvider",
    "OneInchQuoteProvider",
    "ParaswapQuoteProvider",
    "ZeroExQuoteProvider",
]
