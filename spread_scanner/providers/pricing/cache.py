"""
Per-run USD price cache.

One instance is created per scan so repeated runs (and tests) start clean.
Only positive prices are cached; misses and failures are retried on the next
lookup. Check-then-insert runs under a lock so concurrent pair evaluation
cannot issue duplicate lookups for the same id.
"""
from __future__ import annotations

import logging
import math
import threading
from typing import Dict, Optional

from ...core.errors import PriceLookupUnavailable
from ..base import UsdPriceProvider

logger = logging.getLogger(__name__)


class UsdPriceCache:
    def __init__(self, provider: Optional[UsdPriceProvider] = None) -> None:
        self._provider = provider
        self._store: Dict[str, float] = {}
        self._lock = threading.Lock()
        self.lookups = 0

    def get(self, lookup_id: str) -> Optional[float]:
        """Cached price for `lookup_id`, without triggering a lookup."""
        return self._store.get(lookup_id)

    def put(self, lookup_id: str, price: float) -> None:
        with self._lock:
            self._store[lookup_id] = price

    def lookup(self, lookup_id: Optional[str]) -> float:
        """
        Return the USD price for `lookup_id`, fetching it at most once per run.

        Raises PriceLookupUnavailable when there is no id, no provider, the
        provider fails, or it returns no positive price.
        """
        if not lookup_id:
            raise PriceLookupUnavailable("no price lookup id configured")
        with self._lock:
            cached = self._store.get(lookup_id)
            if cached is not None:
                return cached
            if self._provider is None:
                raise PriceLookupUnavailable("no USD price provider configured")
            self.lookups += 1
            try:
                price = self._provider.get_usd_price(lookup_id)
            except Exception as exc:
                raise PriceLookupUnavailable(
                    f"{self._provider.provider_name} lookup for {lookup_id} failed: {exc}"
                ) from exc
            if price is None or not math.isfinite(price) or price <= 0:
                raise PriceLookupUnavailable(f"no USD price for {lookup_id}")
            self._store[lookup_id] = price
            logger.debug("USD price %s = %s", lookup_id, price)
            return price
