"""
CoW Swap quote provider (POST order intent).

  POST {host}/api/v1/quote

No order is placed, so sender/receiver are a burn placeholder and appData is
the zero hash. The quote may be nested under `quote` or returned flat.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import requests

from ...core.errors import UnsupportedChainError
from ..base import Quote
from ._parse import amount_str, ratio_price, require_object

if TYPE_CHECKING:
    from ...models import Pair

HTTP_TIMEOUT_S = 12.0

COW_HOSTS: Dict[int, str] = {
    1: "https://api.cow.fi/mainnet",
}

PLACEHOLDER_ADDRESS = "0x000000000000000000000000000000000000dead"
EMPTY_APP_DATA = "0x" + "0" * 64


def build_order_intent(pair: "Pair", sell_amount: str) -> Dict[str, Any]:
    return {
        "sellToken": pair.from_address,
        "buyToken": pair.to_address,
        "receiver": PLACEHOLDER_ADDRESS,
        "from": PLACEHOLDER_ADDRESS,
        "appData": EMPTY_APP_DATA,
        "partiallyFillable": False,
        "kind": "sell",
        "sellAmountBeforeFee": sell_amount,
    }


class CowQuoteProvider:
    """Fetch sell quotes from the CoW Protocol order book API."""

    def __init__(
        self,
        timeout_s: float = HTTP_TIMEOUT_S,
        hosts: Optional[Dict[int, str]] = None,
    ) -> None:
        self._timeout_s = timeout_s
        self._hosts = dict(COW_HOSTS if hosts is None else hosts)

    @property
    def provider_name(self) -> str:
        return "cow"

    def get_quote(self, chain_id: int, pair: "Pair", sell_amount: str) -> Quote:
        host = self._hosts.get(chain_id)
        if not host:
            raise UnsupportedChainError(self.provider_name, chain_id)

        resp = requests.post(
            f"{host}/api/v1/quote",
            json=build_order_intent(pair, sell_amount),
            headers={"Content-Type": "application/json"},
            timeout=self._timeout_s,
        )
        resp.raise_for_status()
        data = require_object(resp.json(), self.provider_name)

        quote = data.get("quote")
        if not isinstance(quote, dict):
            quote = data
        buy = quote.get("buyAmount")
        sell = quote.get("sellAmount")
        return Quote(
            source=self.provider_name,
            price=ratio_price(buy, sell),
            buy_amount_raw=amount_str(buy),
            sell_amount_raw=amount_str(sell),
            raw=data,
        )
