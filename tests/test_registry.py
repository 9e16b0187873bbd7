"""Provider registry: lazy adapter instantiation keyed by ProviderKind."""
from __future__ import annotations

import pytest

from spread_scanner.providers.base import ProviderKind
from spread_scanner.providers.defaults import create_default_registry
from spread_scanner.providers.registry import ProviderRegistry
from tests.fakes import FakeQuoteProvider


class _CountingProvider(FakeQuoteProvider):
    created = 0

    def __init__(self):
        super().__init__("0x")
        type(self).created += 1


def test_class_factory_instantiated_once():
    _CountingProvider.created = 0
    registry = ProviderRegistry()
    registry.register(ProviderKind.ZEROX, _CountingProvider)
    assert _CountingProvider.created == 0
    first = registry.get(ProviderKind.ZEROX)
    assert registry.get(ProviderKind.ZEROX) is first
    assert _CountingProvider.created == 1


def test_register_replaces_instance():
    registry = ProviderRegistry()
    registry.register(ProviderKind.COW, FakeQuoteProvider("cow", 1.0))
    old = registry.get(ProviderKind.COW)
    new = FakeQuoteProvider("cow", 2.0)
    registry.register(ProviderKind.COW, new)
    assert registry.get(ProviderKind.COW) is new
    assert registry.get(ProviderKind.COW) is not old


def test_unregistered_kind():
    with pytest.raises(KeyError, match="No adapter registered for 'paraswap'"):
        ProviderRegistry().get(ProviderKind.PARASWAP)


def test_default_registry_covers_every_kind():
    registry = create_default_registry(timeout_s=3.0)
    assert [registry.get(k).provider_name for k in ProviderKind] == ["0x", "1inch", "paraswap", "cow"]
