"""
0x quote provider (price-inclusive GET).

  GET {host}/swap/v1/price?sellToken=..&buyToken=..&sellAmount=..

The response already carries `price` plus raw `buyAmount` / `sellAmount`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

import requests

from ...core.errors import UnsupportedChainError
from ..base import Quote
from ._parse import amount_str, require_object, to_float

if TYPE_CHECKING:
    from ...models import Pair

HTTP_TIMEOUT_S = 12.0

ZEROX_HOSTS: Dict[int, str] = {
    1: "https://api.0x.org",
    56: "https://bsc.api.0x.org",
    137: "https://polygon.api.0x.org",
}


class ZeroExQuoteProvider:
    """Fetch sell-side price quotes from the 0x swap API."""

    def __init__(
        self,
        timeout_s: float = HTTP_TIMEOUT_S,
        hosts: Optional[Dict[int, str]] = None,
    ) -> None:
        self._timeout_s = timeout_s
        self._hosts = dict(ZEROX_HOSTS if hosts is None else hosts)

    @property
    def provider_name(self) -> str:
        return "0x"

    def get_quote(self, chain_id: int, pair: "Pair", sell_amount: str) -> Quote:
        host = self._hosts.get(chain_id)
        if not host:
            raise UnsupportedChainError(self.provider_name, chain_id)

        resp = requests.get(
            f"{host}/swap/v1/price",
            params={
                "sellToken": pair.from_address,
                "buyToken": pair.to_address,
                "sellAmount": sell_amount,
            },
            timeout=self._timeout_s,
        )
        resp.raise_for_status()
        data = require_object(resp.json(), self.provider_name)

        return Quote(
            source=self.provider_name,
            price=to_float(data.get("price")),
            buy_amount_raw=amount_str(data.get("buyAmount")),
            sell_amount_raw=amount_str(data.get("sellAmount")),
            raw=data,
        )
