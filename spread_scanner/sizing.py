"""
Sell sizing: how much of the sell token to probe each pair with.

Priority: fixed token amount, else a USD target converted through the
looked-up USD price, else a small deterministic fallback. Never raises.
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Optional

from .core.errors import PriceLookupUnavailable
from .models import Chain, Pair, SellSizing
from .providers.pricing import UsdPriceCache

logger = logging.getLogger(__name__)

DEFAULT_USD_SELL = 10.0
FALLBACK_USD_DIVISOR = 1000


def to_raw_amount(amount: float, decimals: int) -> int:
    """floor(amount * 10^decimals) with exact decimal arithmetic."""
    try:
        scaled = Decimal(str(amount)) * (Decimal(10) ** int(decimals))
        return int(scaled.to_integral_value(rounding=ROUND_FLOOR))
    except (InvalidOperation, ValueError, OverflowError):
        return 0


def usd_target_for(pair: Pair, chain: Chain) -> float:
    return float(pair.usd_sell_target or chain.default_usd_sell or DEFAULT_USD_SELL)


def fallback_sizing(usd_target: float, decimals: int) -> SellSizing:
    tokens = max(1.0, usd_target / FALLBACK_USD_DIVISOR)
    return SellSizing(raw_amount=str(to_raw_amount(tokens, decimals)), human_amount=tokens)


def compute_sell_size(
    pair: Pair,
    chain: Chain,
    prices: Optional[UsdPriceCache] = None,
) -> SellSizing:
    if pair.fixed_sell_amount:
        raw = to_raw_amount(pair.fixed_sell_amount, pair.from_decimals)
        return SellSizing(raw_amount=str(raw), human_amount=float(pair.fixed_sell_amount))

    usd_target = usd_target_for(pair, chain)
    price: Optional[float] = None
    if prices is not None:
        try:
            price = prices.lookup(pair.price_lookup_id)
        except PriceLookupUnavailable as exc:
            logger.debug("%s: sizing fallback (%s)", pair.name, exc)

    if price is not None and math.isfinite(price) and price > 0:
        tokens = usd_target / price
        raw = max(1, to_raw_amount(tokens, pair.from_decimals))
        return SellSizing(raw_amount=str(raw), human_amount=tokens)

    return fallback_sizing(usd_target, pair.from_decimals)
