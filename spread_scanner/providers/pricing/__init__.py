"""USD price lookups used to size probe trades."""
from __future__ import annotations

from .cache import UsdPriceCache
from .coingecko import CoinGeckoPriceProvider

__all__ = ["CoinGeckoPriceProvider", "UsdPriceCache"]
