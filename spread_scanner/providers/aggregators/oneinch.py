"""
1inch quote provider (amounts-only GET).

  GET https://api.1inch.io/v5.0/{chain}/quote?fromTokenAddress=..&toTokenAddress=..&amount=..

No price field: price = toTokenAmount / fromTokenAmount.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from ..base import Quote
from ._parse import amount_str, ratio_price, require_object

if TYPE_CHECKING:
    from ...models import Pair

ONEINCH_BASE_URL = "https://api.1inch.io/v5.0"
HTTP_TIMEOUT_S = 12.0


class OneInchQuoteProvider:
    """Fetch quotes from the 1inch aggregation API."""

    def __init__(self, timeout_s: float = HTTP_TIMEOUT_S, base_url: str = ONEINCH_BASE_URL) -> None:
        self._timeout_s = timeout_s
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "1inch"

    def get_quote(self, chain_id: int, pair: "Pair", sell_amount: str) -> Quote:
        resp = requests.get(
            f"{self._base_url}/{chain_id}/quote",
            params={
                "fromTokenAddress": pair.from_address,
                "toTokenAddress": pair.to_address,
                "amount": sell_amount,
            },
            timeout=self._timeout_s,
        )
        resp.raise_for_status()
        data = require_object(resp.json(), self.provider_name)

        buy = data.get("toTokenAmount")
        sell = data.get("fromTokenAmount")
        return Quote(
            source=self.provider_name,
            price=ratio_price(buy, sell),
            buy_amount_raw=amount_str(buy),
            sell_amount_raw=amount_str(sell),
            raw=data,
        )
