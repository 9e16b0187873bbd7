"""
Top-level CLI dispatcher: spread-scanner <command> [args...].
All commands dispatch to package CLI modules.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional


def _main_dashboard(argv: List[str]) -> int:
    app_path = Path(__file__).resolve().parent / "app.py"
    r = subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)] + argv, cwd=None)
    return r.returncode


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="spread-scanner",
        description="DEX aggregator spread scanner CLI",
    )
    subparsers = parser.add_subparsers(dest="command", help="command")
    # scan options (and -h) are forwarded to cli.scan
    subparsers.add_parser("scan", help="Run one scan and write reports", add_help=False)
    subparsers.add_parser("dashboard", help="Open the Streamlit dashboard for the latest report")

    args, rest = parser.parse_known_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    if args.command == "scan":
        from spread_scanner.cli import scan as mod

        return mod.main(rest)
    if args.command == "dashboard":
        return _main_dashboard(rest)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
