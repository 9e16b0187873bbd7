"""
Quote collection: fan out one task per enabled provider and join them.

Every task is isolated: a provider that fails after retries yields a quote
carrying only its source and error message, and never affects siblings.
Results come back in provider configuration order.
"""
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Any, List, Optional

from .models import Chain, Pair
from .providers.base import ProviderKind, Quote
from .providers.registry import ProviderRegistry
from .providers.resilience import RetryConfig, resilient_call

logger = logging.getLogger(__name__)


def normalize_amount(raw: Any, decimals: int) -> Optional[float]:
    """Raw token units -> human amount; None when missing or not a finite number."""
    if raw is None:
        return None
    try:
        num = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num / (10 ** decimals)


def normalize_quote(quote: Quote, pair: Pair) -> Quote:
    return replace(
        quote,
        buy_amount_human=normalize_amount(quote.buy_amount_raw, pair.to_decimals),
        sell_amount_human=normalize_amount(quote.sell_amount_raw, pair.from_decimals),
    )


def _fetch_one(
    kind: ProviderKind,
    chain: Chain,
    pair: Pair,
    sell_amount_raw: str,
    registry: ProviderRegistry,
    retry_config: Optional[RetryConfig],
) -> Quote:
    label = f"{kind.value} {pair.name}"
    try:
        provider = registry.get(kind)
        quote = resilient_call(
            provider.get_quote,
            chain.id,
            pair,
            sell_amount_raw,
            label=label,
            retry_config=retry_config,
        )
        return normalize_quote(quote, pair)
    except Exception as exc:
        logger.debug("%s: %s", label, exc)
        return Quote(source=kind.value, error=str(exc))


def collect_quotes(
    chain: Chain,
    pair: Pair,
    sell_amount_raw: str,
    registry: ProviderRegistry,
    retry_config: Optional[RetryConfig] = None,
) -> List[Quote]:
    kinds = list(chain.providers)
    if not kinds:
        return []
    with ThreadPoolExecutor(max_workers=len(kinds)) as executor:
        futures = [
            executor.submit(
                _fetch_one, kind, chain, pair, sell_amount_raw, registry, retry_config
            )
            for kind in kinds
        ]
        return [f.result() for f in futures]
