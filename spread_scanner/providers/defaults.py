"""
Default provider registry configuration.

Registers the built-in aggregator adapters. To add an aggregator, add a
ProviderKind member and register its adapter here.
"""
from __future__ import annotations

from typing import Optional

from .aggregators import (
    CowQuoteProvider,
    OneInchQuoteProvider,
    ParaswapQuoteProvider,
    ZeroExQuoteProvider,
)
from .aggregators.zerox import HTTP_TIMEOUT_S
from .base import ProviderKind
from .pricing import CoinGeckoPriceProvider, UsdPriceCache
from .pricing.coingecko import COINGECKO_BASE_URL
from .registry import ProviderRegistry


def create_default_registry(timeout_s: float = HTTP_TIMEOUT_S) -> ProviderRegistry:
    """Create a registry with all built-in aggregator adapters."""
    registry = ProviderRegistry()
    registry.register(ProviderKind.ZEROX, ZeroExQuoteProvider(timeout_s=timeout_s))
    registry.register(ProviderKind.ONEINCH, OneInchQuoteProvider(timeout_s=timeout_s))
    registry.register(ProviderKind.PARASWAP, ParaswapQuoteProvider(timeout_s=timeout_s))
    registry.register(ProviderKind.COW, CowQuoteProvider(timeout_s=timeout_s))
    return registry


def create_price_cache(
    timeout_s: float = HTTP_TIMEOUT_S,
    base_url: Optional[str] = None,
) -> UsdPriceCache:
    """Fresh per-run USD price cache backed by CoinGecko."""
    provider = CoinGeckoPriceProvider(timeout_s=timeout_s, base_url=base_url or COINGECKO_BASE_URL)
    return UsdPriceCache(provider)
