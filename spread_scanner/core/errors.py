"""
Shared exception types for spread_scanner.

Provider-level errors are contained to a single quote; only ConfigError is
fatal to a scan run.
"""

from __future__ import annotations

from typing import Optional


class SpreadScannerError(Exception):
    """Base exception for spread_scanner; catch this for any package-raised error."""

    retryable = True


class ConfigError(SpreadScannerError):
    """Configuration could not be read or describes an invalid chain/pair/provider."""

    retryable = False


class UnsupportedChainError(SpreadScannerError):
    """A provider has no endpoint for the requested chain."""

    retryable = False

    def __init__(self, provider_name: str, chain_id: int) -> None:
        super().__init__(f"{provider_name} not supported for chain {chain_id}")
        self.provider_name = provider_name
        self.chain_id = chain_id


class MalformedResponseError(SpreadScannerError):
    """Provider payload does not match any shape the adapter understands."""

    retryable = False


class PriceLookupUnavailable(SpreadScannerError):
    """USD price lookup failed or returned nothing usable."""


class RequestFailedError(SpreadScannerError):
    """A provider request failed after all attempts; message carries label, status and reason."""

    def __init__(
        self,
        label: str,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        status = f" [{status_code}]" if status_code else ""
        super().__init__(f"{label} failed{status}: {reason}")
        self.label = label
        self.reason = reason
        self.status_code = status_code


__all__ = [
    "ConfigError",
    "MalformedResponseError",
    "PriceLookupUnavailable",
    "RequestFailedError",
    "SpreadScannerError",
    "UnsupportedChainError",
]
