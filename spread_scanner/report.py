"""
Report building: rank pair results per chain and across chains.

Summary counts are derived from the chain reports, never tracked separately.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from .models import Chain, ChainReport, PairResult, ScanReport

DEFAULT_TOP_N = 20


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sort_opportunities(results: Iterable[PairResult]) -> List[PairResult]:
    """Results with a spread, highest first; sorted() is stable so ties keep input order."""
    ranked = [r for r in results if r.spread_percent is not None]
    return sorted(ranked, key=lambda r: r.spread_percent, reverse=True)


def build_chain_report(chain: Chain, results: Sequence[PairResult]) -> ChainReport:
    return ChainReport(
        chain=chain.name,
        chain_id=chain.id,
        total_pairs=len(results),
        opportunities=tuple(sort_opportunities(results)),
        raw=tuple(results),
    )


def build_scan_report(
    chain_reports: Sequence[ChainReport],
    timestamp: Optional[str] = None,
    top_n: int = DEFAULT_TOP_N,
) -> ScanReport:
    flattened = [op for c in chain_reports for op in c.opportunities]
    top = sort_opportunities(flattened)[: max(0, top_n)]
    return ScanReport(
        timestamp=timestamp or utc_now_iso(),
        chains=tuple(chain_reports),
        top=tuple(top),
        summary={
            "total_chains": len(chain_reports),
            "total_pairs": sum(c.total_pairs for c in chain_reports),
            "candidates": len(top),
        },
    )
