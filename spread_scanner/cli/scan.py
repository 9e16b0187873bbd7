#!/usr/bin/env python3
"""
Scan: quote every configured pair on every enabled aggregator, rank spreads.
Output: timestamped JSON plus latest.{json,csv,md} in the reports dir, the
report on stdout, and an optional webhook post.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from spread_scanner.artifacts import write_report
from spread_scanner.config import (
    chain_ids,
    filter_chains,
    get_config,
    http_timeout_s,
    load_chains,
    price_lookup_base_url,
    reports_dir,
    retry_config,
    top_n,
    webhook_timeout_s,
    webhook_url,
)
from spread_scanner.core.errors import ConfigError
from spread_scanner.notify import post_report
from spread_scanner.providers.defaults import create_default_registry, create_price_cache
from spread_scanner.scanner import SpreadScanner

logger = logging.getLogger("spread_scanner.cli.scan")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="spread-scanner scan", description="Scan DEX aggregators for price spreads")
    ap.add_argument("--config", default=None, help="Path to config YAML (default: $SPREAD_SCANNER_CONFIG or config.yaml)")
    ap.add_argument("--chain", dest="chains", type=int, action="append", default=None, metavar="ID", help="Only scan this chain id (repeatable; overrides CHAIN_IDS)")
    ap.add_argument("--reports-dir", default=None, help="Report output directory (default from config: reports)")
    ap.add_argument("--top", type=int, default=None, help="Size of the global top list (default from config: 20)")
    ap.add_argument("--no-write", action="store_true", help="Do not write report files")
    ap.add_argument("--no-webhook", action="store_true", help="Skip the webhook post even if WEBHOOK_URL is set")
    ap.add_argument("--quiet", action="store_true", help="Do not print the JSON report")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = get_config(args.config)
        chains = filter_chains(load_chains(cfg), args.chains or chain_ids(cfg))
    except ConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1

    if not chains:
        logger.warning("No chains to scan (check config chains / CHAIN_IDS)")

    timeout = http_timeout_s(cfg)
    scanner = SpreadScanner(
        registry=create_default_registry(timeout_s=timeout),
        prices=create_price_cache(timeout_s=timeout, base_url=price_lookup_base_url(cfg)),
        retry_config=retry_config(cfg),
        top_n=args.top if args.top is not None else top_n(cfg),
    )
    report = scanner.run(chains)

    if not args.no_write:
        out_dir = args.reports_dir or reports_dir(cfg)
        try:
            out_path = write_report(report, out_dir)
        except OSError as exc:
            print(f"Could not write report to {out_dir}: {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {out_path}")

    if not args.no_webhook:
        post_report(webhook_url(cfg), report, timeout_s=webhook_timeout_s(cfg))

    if not args.quiet:
        print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
