"""
Top-level public API surface.
Canonical entrypoint: import spread_scanner; run a scan with spread_scanner.run_scan.
Does not import cli.
"""

from __future__ import annotations

from ._version import __version__
from .models import Chain, ChainReport, Pair, PairResult, ScanReport, SellSizing
from .providers.base import ProviderKind, Quote
from .scanner import SpreadScanner, run_scan

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "Chain",
    "ChainReport",
    "Pair",
    "PairResult",
    "ProviderKind",
    "Quote",
    "ScanReport",
    "SellSizing",
    "SpreadScanner",
    "run_scan",
]
