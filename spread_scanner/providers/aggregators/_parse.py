"""Response parsing helpers shared by the aggregator adapters."""
from __future__ import annotations

import math
from typing import Any, Dict, Optional

from ...core.errors import MalformedResponseError


def to_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def amount_str(x: Any) -> Optional[str]:
    """Raw token amounts are kept as the provider's integer string."""
    if x is None or x == "":
        return None
    return str(x)


def ratio_price(buy_amount: Any, sell_amount: Any) -> Optional[float]:
    """buy/sell in raw units; None when either side is missing or the sell side is zero."""
    buy = to_float(buy_amount)
    sell = to_float(sell_amount)
    if buy is None or sell is None or sell == 0:
        return None
    return buy / sell


def require_object(data: Any, provider_name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Unexpected {provider_name} response type: {type(data).__name__}"
        )
    return data
