"""
ParaSwap quote provider (GET with decimals and side).

  GET https://api.paraswap.io/prices/?fromToken=..&toToken=..&amount=..
      &srcDecimals=..&destDecimals=..&side=SELL&network={chain}

Amounts normally sit under `priceRoute`; older/alternate envelopes return them
flat at the top level. Anything else is a MalformedResponseError.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

import requests

from ...core.errors import MalformedResponseError
from ..base import Quote
from ._parse import amount_str, ratio_price, require_object

if TYPE_CHECKING:
    from ...models import Pair

PARASWAP_BASE_URL = "https://api.paraswap.io"
HTTP_TIMEOUT_S = 12.0

_ROUTE_KEYS = ("srcAmount", "destAmount")


def _pick_route(data: Dict[str, Any]) -> Dict[str, Any]:
    """Nested `priceRoute` first, then the flat shape."""
    route = data.get("priceRoute")
    if isinstance(route, dict):
        return route
    if any(k in data for k in _ROUTE_KEYS):
        return data
    raise MalformedResponseError(
        f"Unexpected paraswap response shape. Keys: {sorted(data.keys())}"
    )


class ParaswapQuoteProvider:
    """Fetch SELL-side price routes from the ParaSwap API."""

    def __init__(self, timeout_s: float = HTTP_TIMEOUT_S, base_url: str = PARASWAP_BASE_URL) -> None:
        self._timeout_s = timeout_s
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "paraswap"

    def get_quote(self, chain_id: int, pair: "Pair", sell_amount: str) -> Quote:
        resp = requests.get(
            f"{self._base_url}/prices/",
            params={
                "fromToken": pair.from_address,
                "toToken": pair.to_address,
                "amount": sell_amount,
                "srcDecimals": pair.from_decimals,
                "destDecimals": pair.to_decimals,
                "side": "SELL",
                "network": chain_id,
            },
            timeout=self._timeout_s,
        )
        resp.raise_for_status()
        data = require_object(resp.json(), self.provider_name)
        route = _pick_route(data)

        buy = route.get("destAmount")
        sell = route.get("srcAmount")
        return Quote(
            source=self.provider_name,
            price=ratio_price(buy, sell),
            buy_amount_raw=amount_str(buy),
            sell_amount_raw=amount_str(sell),
            raw=data,
        )
