"""
Resilience primitives: bounded retry with linear backoff and error decoration.

These wrap single provider calls to mask transient network/provider flakiness.
Success results pass through unchanged; exhausted failures are re-raised as a
RequestFailedError naming the request, HTTP status and provider reason.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from ..core.errors import RequestFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry with linear backoff: delay before retry n is base_delay_s * n."""
    max_retries: int = 2
    base_delay_s: float = 0.5
    max_delay_s: float = 10.0

    @property
    def max_attempts(self) -> int:
        return max(0, self.max_retries) + 1

    def delay_for(self, retry_number: int) -> float:
        return min(self.base_delay_s * retry_number, self.max_delay_s)


def _response_of(exc: BaseException) -> Any:
    return getattr(exc, "response", None)


def _provider_reason(response: Any) -> Optional[str]:
    """Most specific message a provider put in its error body, if any."""
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    reason = data.get("description") or data.get("message")
    return str(reason) if reason else None


def decorate_error(exc: BaseException, label: Optional[str] = None) -> RequestFailedError:
    """Build a RequestFailedError combining label, HTTP status and the best available reason."""
    if isinstance(exc, RequestFailedError):
        return exc
    response = _response_of(exc)
    status = getattr(response, "status_code", None)
    if not isinstance(status, int):
        status = None
    reason = _provider_reason(response) or str(exc) or type(exc).__name__
    return RequestFailedError(label or "request", reason, status_code=status)


def resilient_call(
    func: Callable[..., T],
    *args: Any,
    label: Optional[str] = None,
    retry_config: Optional[RetryConfig] = None,
    **kwargs: Any,
) -> T:
    """
    Execute a provider call with bounded retry.

    Errors whose class sets `retryable = False` are not retried. Raises a
    RequestFailedError (chained to the last exception) when attempts run out.
    """
    cfg = retry_config or RetryConfig()

    attempt = 0
    while True:
        attempt += 1
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.debug(
                "%s attempt %d/%d failed: %s: %s",
                label or "request", attempt, cfg.max_attempts, type(exc).__name__, exc,
            )
            if attempt >= cfg.max_attempts or not getattr(exc, "retryable", True):
                raise decorate_error(exc, label) from exc
            time.sleep(cfg.delay_for(attempt))
