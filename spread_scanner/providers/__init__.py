"""
Provider architecture for DEX aggregator quotes.

One adapter per aggregator (0x, 1inch, ParaSwap, CoW), resolved through a
registry keyed by ProviderKind, wrapped in bounded retry at call time.
"""

from __future__ import annotations

from .base import ProviderKind, Quote, QuoteProvider, UsdPriceProvider
from .registry import ProviderRegistry
from .resilience import RetryConfig, decorate_error, resilient_call

__all__ = [
    "ProviderKind",
    "ProviderRegistry",
    "Quote",
    "QuoteProvider",
    "RetryConfig",
    "UsdPriceProvider",
    "decorate_error",
    "resilient_call",
]
