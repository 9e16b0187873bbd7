"""
Provider interfaces and data contracts.

Every aggregator adapter implements QuoteProvider: one HTTP request per call,
returning a Quote whose amounts are still in raw token units. Adapters never
retry; see resilience.resilient_call.

Provider kinds form a closed set (ProviderKind) so an unknown provider id in
configuration is caught at load time.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import Pair


class ProviderKind(enum.Enum):
    """Supported quote aggregators, keyed by their configuration id."""

    ZEROX = "0x"
    ONEINCH = "1inch"
    PARASWAP = "paraswap"
    COW = "cow"

    @classmethod
    def parse(cls, value: str) -> "ProviderKind":
        """Resolve a configuration id (case-insensitive). Raises ValueError if unknown."""
        key = str(value).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(
            f"Unknown aggregator '{value}'. Available: {[k.value for k in cls]}"
        )


@dataclass(frozen=True)
class Quote:
    """Immutable quote from one aggregator for one sell amount."""

    source: str
    price: Optional[float] = None
    buy_amount_raw: Optional[str] = None
    sell_amount_raw: Optional[str] = None
    buy_amount_human: Optional[float] = None
    sell_amount_human: Optional[float] = None
    error: Optional[str] = None
    raw: Optional[Dict[str, Any]] = None

    def is_valid(self) -> bool:
        return (
            self.error is None
            and self.price is not None
            and math.isfinite(self.price)
            and self.price > 0
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"source": self.source, "error": self.error}
        return {
            "source": self.source,
            "price": self.price,
            "buyAmount": self.buy_amount_raw,
            "sellAmount": self.sell_amount_raw,
            "buyAmountHuman": self.buy_amount_human,
            "sellAmountHuman": self.sell_amount_human,
            "raw": self.raw,
        }


@runtime_checkable
class QuoteProvider(Protocol):
    """Protocol for aggregator quote adapters."""

    @property
    def provider_name(self) -> str: ...

    def get_quote(self, chain_id: int, pair: "Pair", sell_amount: str) -> Quote:
        """Fetch a sell-side quote for `sell_amount` raw units of the pair's sell token."""
        ...


@runtime_checkable
class UsdPriceProvider(Protocol):
    """Protocol for USD unit price lookups used to size probe trades."""

    @property
    def provider_name(self) -> str: ...

    def get_usd_price(self, lookup_id: str) -> Optional[float]:
        """Return the USD price for `lookup_id`, or None when the service has no price."""
        ...
