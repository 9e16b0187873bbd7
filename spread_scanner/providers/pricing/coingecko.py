"""
CoinGecko USD price provider.

Uses the public CoinGecko API (no authentication required):
  GET https://api.coingecko.com/api/v3/simple/price?ids={id}&vs_currencies=usd
"""
from __future__ import annotations

from typing import Optional

import requests

from ..aggregators._parse import to_float

COINGECKO_BASE_URL = "https://api.coingecko.com"
HTTP_TIMEOUT_S = 12.0


class CoinGeckoPriceProvider:
    """Fetch USD unit prices by CoinGecko coin id."""

    def __init__(self, timeout_s: float = HTTP_TIMEOUT_S, base_url: str = COINGECKO_BASE_URL) -> None:
        self._timeout_s = timeout_s
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "coingecko"

    def get_usd_price(self, lookup_id: str) -> Optional[float]:
        resp = requests.get(
            f"{self._base_url}/api/v3/simple/price",
            params={"ids": lookup_id, "vs_currencies": "usd"},
            timeout=self._timeout_s,
        )
        if resp.status_code == 429:
            raise RuntimeError("CoinGecko rate limit (HTTP 429)")
        resp.raise_for_status()

        data = resp.json()
        if not isinstance(data, dict):
            return None
        entry = data.get(lookup_id)
        if not isinstance(entry, dict):
            return None
        price = to_float(entry.get("usd"))
        return price if price is not None and price > 0 else None
