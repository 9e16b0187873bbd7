"""
Provider registry: central catalog of quote adapters keyed by ProviderKind.

Each kind is bound to exactly one adapter class or instance. Chains list the
kinds they enable; the registry resolves them in configuration order.
"""
from __future__ import annotations

import logging
from typing import Dict, Type, Union

from .base import ProviderKind, QuoteProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Maps provider kinds to adapter classes/instances.

    Usage:
        registry = ProviderRegistry()
        registry.register(ProviderKind.ZEROX, ZeroExQuoteProvider)
        registry.register(ProviderKind.COW, CowQuoteProvider(timeout_s=5))
    """

    def __init__(self) -> None:
        self._factories: Dict[ProviderKind, Union[Type[QuoteProvider], QuoteProvider]] = {}
        self._instances: Dict[ProviderKind, QuoteProvider] = {}

    def register(
        self,
        kind: ProviderKind,
        factory: Union[Type[QuoteProvider], QuoteProvider],
    ) -> None:
        """Register (or replace) the adapter for a provider kind."""
        self._factories[kind] = factory
        self._instances.pop(kind, None)
        logger.debug("Registered quote provider: %s", kind.value)

    def get(self, kind: ProviderKind) -> QuoteProvider:
        """Get or instantiate the adapter for a kind."""
        if kind not in self._instances:
            factory = self._factories.get(kind)
            if factory is None:
                raise KeyError(
                    f"No adapter registered for '{kind.value}'. "
                    f"Available: {[k.value for k in self._factories]}"
                )
            if isinstance(factory, type):
                self._instances[kind] = factory()
            else:
                self._instances[kind] = factory
        return self._instances[kind]
