"""
Scan data model: configured chains and pairs, per-pair results and reports.

Configuration entities are loaded once per run; result entities are created
by the scan that owns them and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .providers.base import ProviderKind, Quote


@dataclass(frozen=True)
class Pair:
    """Token pair to probe: sell `from_*` for `to_*`."""

    name: str
    from_symbol: str
    to_symbol: str
    from_address: str
    to_address: str
    from_decimals: int
    to_decimals: int
    price_lookup_id: Optional[str] = None
    usd_sell_target: Optional[float] = None
    fixed_sell_amount: Optional[float] = None
    min_buy_amount: Optional[float] = None


@dataclass(frozen=True)
class Chain:
    id: int
    name: str
    providers: Tuple[ProviderKind, ...] = ()
    default_usd_sell: Optional[float] = None
    pairs: Tuple[Pair, ...] = ()


@dataclass(frozen=True)
class SellSizing:
    """Probe size for one pair: integer raw units (as string) and the human token amount."""

    raw_amount: str
    human_amount: float


@dataclass(frozen=True)
class Spread:
    spread_percent: float
    best: str
    worst: str


@dataclass(frozen=True)
class PairResult:
    """
    Full evaluation of one pair.

    spread_percent/best/worst are set only when at least two quotes carried a
    valid price and no liquidity flag was raised. `error` marks a pair whose
    evaluation failed outright; such pairs keep no quotes.
    """

    pair: str
    chain_id: int
    chain: str
    sell_amount: Optional[float] = None
    sell_token: Optional[str] = None
    buy_token: Optional[str] = None
    quotes: Tuple[Quote, ...] = ()
    min_buy_amount: Optional[float] = None
    liquidity_flag: Optional[str] = None
    spread_percent: Optional[float] = None
    best: Optional[str] = None
    worst: Optional[str] = None
    error: Optional[str] = None

    @property
    def has_spread(self) -> bool:
        return self.spread_percent is not None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "pair": self.pair,
            "chainId": self.chain_id,
            "chain": self.chain,
        }
        if self.error is not None:
            out["error"] = self.error
            return out
        out.update(
            {
                "sellAmount": self.sell_amount,
                "sellToken": self.sell_token,
                "buyToken": self.buy_token,
                "quotes": [q.to_dict() for q in self.quotes],
                "minBuyAmount": self.min_buy_amount,
            }
        )
        if self.liquidity_flag:
            out["liquidity_flag"] = self.liquidity_flag
        if self.spread_percent is not None:
            out["spread_percent"] = self.spread_percent
            out["best"] = self.best
            out["worst"] = self.worst
        return out


@dataclass(frozen=True)
class ChainReport:
    chain: str
    chain_id: int
    total_pairs: int
    opportunities: Tuple[PairResult, ...] = ()
    raw: Tuple[PairResult, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain": self.chain,
            "chainId": self.chain_id,
            "total_pairs": self.total_pairs,
            "opportunities": [r.to_dict() for r in self.opportunities],
            "raw": [r.to_dict() for r in self.raw],
        }


@dataclass(frozen=True)
class ScanReport:
    """Top-level scan result. Summary counts are derived from chains and top."""

    timestamp: str
    chains: Tuple[ChainReport, ...] = ()
    top: Tuple[PairResult, ...] = ()
    summary: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "chains": [c.to_dict() for c in self.chains],
            "top": [r.to_dict() for r in self.top],
            "summary": dict(self.summary),
        }
