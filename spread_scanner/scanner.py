"""
Scan orchestration: chains and pairs run sequentially, each pair fanning out
to its providers in parallel before the next pair starts.

No pair or chain failure aborts the run; the report always reflects whatever
data was actually obtained.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from .collector import collect_quotes
from .models import Chain, ChainReport, Pair, PairResult, ScanReport
from .providers.defaults import create_default_registry, create_price_cache
from .providers.pricing import UsdPriceCache
from .providers.registry import ProviderRegistry
from .providers.resilience import RetryConfig
from .report import DEFAULT_TOP_N, build_chain_report, build_scan_report
from .sizing import compute_sell_size
from .spread import compute_spread, liquidity_flag

logger = logging.getLogger(__name__)


class SpreadScanner:
    """
    Evaluates configured chains into a ScanReport.

    The price cache lives for one scanner instance; create a new scanner (or
    pass a fresh cache) per run.
    """

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        prices: Optional[UsdPriceCache] = None,
        retry_config: Optional[RetryConfig] = None,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        self._registry = registry or create_default_registry()
        self._prices = prices if prices is not None else create_price_cache()
        self._retry_config = retry_config or RetryConfig()
        self._top_n = top_n

    def analyze_pair(self, chain: Chain, pair: Pair) -> PairResult:
        sizing = compute_sell_size(pair, chain, self._prices)
        quotes = collect_quotes(
            chain, pair, sizing.raw_amount, self._registry, self._retry_config
        )
        spread = compute_spread(quotes)
        flag = liquidity_flag(quotes, pair.min_buy_amount)

        result = PairResult(
            pair=pair.name,
            chain_id=chain.id,
            chain=chain.name,
            sell_amount=round(sizing.human_amount, 6),
            sell_token=pair.from_symbol,
            buy_token=pair.to_symbol,
            quotes=tuple(quotes),
            min_buy_amount=pair.min_buy_amount,
            liquidity_flag=flag,
        )
        if spread is None or flag:
            return result
        return replace(
            result,
            spread_percent=spread.spread_percent,
            best=spread.best,
            worst=spread.worst,
        )

    def evaluate_pair(self, chain: Chain, pair: Pair) -> PairResult:
        """analyze_pair with unexpected failures recorded on the result."""
        try:
            return self.analyze_pair(chain, pair)
        except Exception as exc:
            logger.warning("%s on %s failed: %s", pair.name, chain.name, exc)
            return PairResult(pair=pair.name, chain_id=chain.id, chain=chain.name, error=str(exc))

    def scan_chain(self, chain: Chain) -> ChainReport:
        results: List[PairResult] = []
        for pair in chain.pairs:
            results.append(self.evaluate_pair(chain, pair))
        report = build_chain_report(chain, results)
        logger.info(
            "%s: %d pairs, %d opportunities",
            chain.name, report.total_pairs, len(report.opportunities),
        )
        return report

    def run(self, chains: Iterable[Chain], timestamp: Optional[str] = None) -> ScanReport:
        chain_reports = [self.scan_chain(chain) for chain in chains]
        return build_scan_report(chain_reports, timestamp=timestamp, top_n=self._top_n)


def run_scan(
    chains: Iterable[Chain],
    registry: Optional[ProviderRegistry] = None,
    prices: Optional[UsdPriceCache] = None,
    retry_config: Optional[RetryConfig] = None,
    top_n: int = DEFAULT_TOP_N,
    timestamp: Optional[str] = None,
) -> ScanReport:
    """One-shot scan with a fresh scanner (and price cache unless one is given)."""
    scanner = SpreadScanner(
        registry=registry, prices=prices, retry_config=retry_config, top_n=top_n
    )
    return scanner.run(chains, timestamp=timestamp)
