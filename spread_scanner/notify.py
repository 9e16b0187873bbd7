"""Optional webhook delivery of a finished scan report."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from .models import ScanReport

logger = logging.getLogger(__name__)

WEBHOOK_TIMEOUT_S = 10.0


def post_report(
    url: Optional[str],
    report: ScanReport,
    timeout_s: float = WEBHOOK_TIMEOUT_S,
) -> bool:
    """
    POST the report as JSON once, only if it has top-level opportunities.

    Returns True when delivered. Delivery failures are logged, never raised.
    """
    if not url or not report.top:
        return False
    try:
        resp = requests.post(
            url,
            json=report.to_dict(),
            headers={"Content-Type": "application/json"},
            timeout=timeout_s,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Webhook post failed: %s", exc)
        return False
    logger.info("Posted to webhook")
    return True
