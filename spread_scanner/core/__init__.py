"""Core shared types for spread_scanner."""

from __future__ import annotations

from .errors import (
    ConfigError,
    MalformedResponseError,
    PriceLookupUnavailable,
    RequestFailedError,
    SpreadScannerError,
    UnsupportedChainError,
)

__all__ = [
    "ConfigError",
    "MalformedResponseError",
    "PriceLookupUnavailable",
    "RequestFailedError",
    "SpreadScannerError",
    "UnsupportedChainError",
]
