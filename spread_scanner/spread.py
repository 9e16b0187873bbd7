"""
Spread and liquidity evaluation over one pair's quote set.

Only quotes with a finite positive price take part in the spread. Ties on the
extreme price resolve to the first quote in provider configuration order.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .models import Spread
from .providers.base import Quote

MIN_VALID_QUOTES = 2


def compute_spread(quotes: Sequence[Quote]) -> Optional[Spread]:
    valid = [q for q in quotes if q.is_valid()]
    if len(valid) < MIN_VALID_QUOTES:
        return None

    best = valid[0]
    worst = valid[0]
    for q in valid[1:]:
        if q.price > best.price:
            best = q
        if q.price < worst.price:
            worst = q

    spread_pct = (best.price - worst.price) / worst.price * 100
    return Spread(spread_percent=spread_pct, best=best.source, worst=worst.source)


def best_buy_amount(quotes: Sequence[Quote]) -> float:
    """Largest human buy amount over every quote; missing amounts count as zero."""
    return max((q.buy_amount_human or 0.0 for q in quotes), default=0.0)


def liquidity_flag(quotes: Sequence[Quote], min_buy_amount: Optional[float]) -> Optional[str]:
    if not min_buy_amount:
        return None
    best = best_buy_amount(quotes)
    if best < min_buy_amount:
        return f"best buy {best:.4f} < min {min_buy_amount:g}"
    return None
