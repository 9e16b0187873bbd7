"""Fake providers and fixtures for provider and scan tests (no live network)."""

from .providers import (
    FakeQuoteProvider,
    FakeQuoteProviderAlwaysFail,
    FakeQuoteProviderFailNThenSucceed,
    FakeUsdPriceProvider,
    make_chain,
    make_pair,
    make_registry,
)

__all__ = [
    "FakeQuoteProvider",
    "FakeQuoteProviderAlwaysFail",
    "FakeQuoteProviderFailNThenSucceed",
    "FakeUsdPriceProvider",
    "make_chain",
    "make_pair",
    "make_registry",
]
