"""
Tests for fake providers: deterministic data, fail-N-then-succeed, always-fail behavior.

No live network; validates that fakes behave as the collector and scanner tests require.
"""

from __future__ import annotations

import pytest

from spread_scanner.providers.base import ProviderKind, QuoteProvider, UsdPriceProvider
from spread_scanner.providers.resilience import RetryConfig, resilient_call

from .providers import (
    FakeQuoteProvider,
    FakeQuoteProviderAlwaysFail,
    FakeQuoteProviderFailNThenSucceed,
    FakeUsdPriceProvider,
    make_chain,
    make_pair,
)


class TestFakeQuoteProvider:
    """Always-succeed fake returns deterministic data."""

    def test_deterministic_quotes(self):
        p = FakeQuoteProvider("0x", 1.02, buy_amount="1020000")
        pair = make_pair()
        q1 = p.get_quote(1, pair, "1000000000000000000")
        q2 = p.get_quote(1, pair, "1000000000000000000")
        assert q1.source == "0x"
        assert q1.price == 1.02
        assert q1.buy_amount_raw == "1020000"
        assert q2 == q1
        assert p.call_count == 2
        assert p.calls[0] == (1, "WETH/USDC", "1000000000000000000")

    def test_satisfies_protocol(self):
        assert isinstance(FakeQuoteProvider("0x"), QuoteProvider)
        assert isinstance(FakeUsdPriceProvider(), UsdPriceProvider)


class TestFakeQuoteProviderFailNThenSucceed:
    def test_fails_then_succeeds(self):
        p = FakeQuoteProviderFailNThenSucceed("1inch", fail_times=2, price=0.98)
        pair = make_pair()
        with pytest.raises(RuntimeError, match="simulated failure"):
            p.get_quote(1, pair, "1")
        with pytest.raises(RuntimeError, match="simulated failure"):
            p.get_quote(1, pair, "1")
        q = p.get_quote(1, pair, "1")
        assert q.price == 0.98
        assert p.call_count == 3

    def test_retry_absorbs_failures(self):
        p = FakeQuoteProviderFailNThenSucceed("1inch", fail_times=2, price=0.98)
        q = resilient_call(
            p.get_quote, 1, make_pair(), "1",
            label="1inch WETH/USDC",
            retry_config=RetryConfig(max_retries=2, base_delay_s=0.0),
        )
        assert q.price == 0.98
        assert p.call_count == 3


class TestFakeQuoteProviderAlwaysFail:
    def test_always_raises(self):
        p = FakeQuoteProviderAlwaysFail("cow")
        for _ in range(3):
            with pytest.raises(RuntimeError, match="always fails"):
                p.get_quote(1, make_pair(), "1")
        assert p.call_count == 3


class TestFakeUsdPriceProvider:
    def test_known_and_unknown_ids(self):
        p = FakeUsdPriceProvider({"weth": 3000.0})
        assert p.get_usd_price("weth") == 3000.0
        assert p.get_usd_price("nope") is None

    def test_fail(self):
        with pytest.raises(RuntimeError, match="price service down"):
            FakeUsdPriceProvider(fail=True).get_usd_price("weth")


def test_make_chain_defaults():
    chain = make_chain(pairs=[make_pair()])
    assert chain.id == 1
    assert chain.providers == (ProviderKind.ZEROX, ProviderKind.ONEINCH)
    assert chain.pairs[0].name == "WETH/USDC"
