"""
Fake quote and USD price providers for tests: deterministic data,
fail-N-then-succeed, always-fail.

No live network; used by collector, scanner and resilience tests.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Dict, Iterable, Optional

from spread_scanner.models import Chain, Pair
from spread_scanner.providers.base import ProviderKind, Quote
from spread_scanner.providers.registry import ProviderRegistry

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


def make_pair(**overrides: Any) -> Pair:
    fields: Dict[str, Any] = dict(
        name="WETH/USDC",
        from_symbol="WETH",
        to_symbol="USDC",
        from_address=WETH,
        to_address=USDC,
        from_decimals=18,
        to_decimals=6,
    )
    fields.update(overrides)
    return Pair(**fields)


def make_chain(
    providers: Iterable[ProviderKind] = (ProviderKind.ZEROX, ProviderKind.ONEINCH),
    pairs: Iterable[Pair] = (),
    **overrides: Any,
) -> Chain:
    fields: Dict[str, Any] = dict(id=1, name="ethereum", default_usd_sell=None)
    fields.update(overrides)
    return Chain(providers=tuple(providers), pairs=tuple(pairs), **fields)


def make_registry(providers: Dict[ProviderKind, Any]) -> ProviderRegistry:
    registry = ProviderRegistry()
    for kind, provider in providers.items():
        registry.register(kind, provider)
    return registry


# ---------------------------------------------------------------------------
# Quotes: always succeed with deterministic data
# ---------------------------------------------------------------------------


class FakeQuoteProvider:
    """Quote provider that always returns the same quote. No network."""

    def __init__(
        self,
        name: str,
        price: Optional[float] = 1.0,
        *,
        buy_amount: Optional[str] = "1000000",
        sell_amount: Optional[str] = "1000000000000000000",
        delay_s: float = 0.0,
        barrier: Optional[threading.Barrier] = None,
    ):
        self._name = name
        self._price = price
        self._buy_amount = buy_amount
        self._sell_amount = sell_amount
        self._delay_s = delay_s
        self._barrier = barrier
        self.call_count = 0
        self.calls: list = []

    @property
    def provider_name(self) -> str:
        return self._name

    def get_quote(self, chain_id: int, pair: Pair, sell_amount: str) -> Quote:
        self.call_count += 1
        self.calls.append((chain_id, pair.name, sell_amount))
        if self._barrier is not None:
            self._barrier.wait()
        if self._delay_s:
            time.sleep(self._delay_s)
        return Quote(
            source=self._name,
            price=self._price,
            buy_amount_raw=self._buy_amount,
            sell_amount_raw=self._sell_amount,
            raw={"fake": True},
        )


# ---------------------------------------------------------------------------
# Quotes: fail N times then succeed
# ---------------------------------------------------------------------------


class FakeQuoteProviderFailNThenSucceed(FakeQuoteProvider):
    """Quote provider that fails the first N calls, then returns a deterministic quote."""

    def __init__(self, name: str, fail_times: int, price: Optional[float] = 1.0, **kwargs: Any):
        super().__init__(name, price, **kwargs)
        self._fail_times = fail_times

    def get_quote(self, chain_id: int, pair: Pair, sell_amount: str) -> Quote:
        if self.call_count < self._fail_times:
            self.call_count += 1
            raise RuntimeError(f"{self._name} simulated failure #{self.call_count}")
        return super().get_quote(chain_id, pair, sell_amount)


# ---------------------------------------------------------------------------
# Quotes: always fail
# ---------------------------------------------------------------------------


class FakeQuoteProviderAlwaysFail:
    """Quote provider that always raises. No network."""

    def __init__(self, name: str = "fake_fail", exc: Optional[Exception] = None):
        self._name = name
        self._exc = exc
        self.call_count = 0

    @property
    def provider_name(self) -> str:
        return self._name

    def get_quote(self, chain_id: int, pair: Pair, sell_amount: str) -> Quote:
        self.call_count += 1
        if self._exc is not None:
            raise self._exc
        raise RuntimeError(f"{self._name} always fails")


# ---------------------------------------------------------------------------
# USD prices
# ---------------------------------------------------------------------------


class FakeUsdPriceProvider:
    """USD price provider backed by a dict; unknown ids return None, `fail=True` raises."""

    def __init__(self, prices: Optional[Dict[str, Optional[float]]] = None, fail: bool = False):
        self._prices = dict(prices or {})
        self._fail = fail
        self.call_count = 0

    @property
    def provider_name(self) -> str:
        return "fake_prices"

    def get_usd_price(self, lookup_id: str) -> Optional[float]:
        self.call_count += 1
        if self._fail:
            raise RuntimeError("price service down")
        return self._prices.get(lookup_id)
