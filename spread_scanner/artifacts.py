"""
Report artifacts: JSON, CSV and Markdown renderings of a ScanReport, plus
`latest.*` pointers for the dashboard.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .models import ScanReport

CSV_COLUMNS = [
    "timestamp",
    "chain",
    "pair",
    "best",
    "worst",
    "spread_percent",
    "sell_amount",
    "sell_token",
    "buy_token",
    "liquidity_flag",
]


def ensure_dir(path: str | Path) -> None:
    """Create directory and parents if they do not exist."""
    Path(path).mkdir(parents=True, exist_ok=True)


def write_json(obj: Any, path: str | Path) -> None:
    """Write JSON-serializable object to file (UTF-8)."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)


def write_text(text: str, path: str | Path) -> None:
    """Write text to file (UTF-8)."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def write_df_csv(df: pd.DataFrame, path: str | Path) -> None:
    """Write DataFrame to CSV with UTF-8 encoding."""
    path = Path(path)
    ensure_dir(path.parent)
    df.to_csv(path, index=False, encoding="utf-8")


def report_rows(report: ScanReport) -> List[Dict[str, Any]]:
    """One row per chain opportunity, in chain then rank order."""
    rows: List[Dict[str, Any]] = []
    for chain in report.chains:
        for op in chain.opportunities:
            rows.append({
                "timestamp": report.timestamp,
                "chain": chain.chain,
                "pair": op.pair,
                "best": op.best,
                "worst": op.worst,
                "spread_percent": f"{op.spread_percent:.4f}" if op.spread_percent is not None else "",
                "sell_amount": op.sell_amount,
                "sell_token": op.sell_token,
                "buy_token": op.buy_token,
                "liquidity_flag": op.liquidity_flag or "",
            })
    return rows


def report_frame(report: ScanReport) -> pd.DataFrame:
    return pd.DataFrame(report_rows(report), columns=CSV_COLUMNS)


def build_markdown(report: ScanReport) -> str:
    lines = [f"# Arbitrage Opportunities ({report.timestamp})"]
    for chain in report.chains:
        lines.append(f"\n## {chain.chain} (top {len(chain.opportunities)})")
        lines.append("| Pair | Spread % | Best | Worst | Sell Amount | Notes |")
        lines.append("| --- | ---: | --- | --- | --- | --- |")
        for op in chain.opportunities:
            spread = f"{op.spread_percent:.4f}" if op.spread_percent is not None else "n/a"
            lines.append(
                f"| {op.pair} | {spread} | {op.best or 'n/a'} | {op.worst or 'n/a'} "
                f"| {op.sell_amount} {op.sell_token} | {op.liquidity_flag or ''} |"
            )
    return "\n".join(lines)


def report_filename(timestamp: str) -> str:
    return "opportunities-" + timestamp.replace(":", "-").replace(".", "-") + ".json"


def write_report(report: ScanReport, reports_dir: str | Path) -> Path:
    """Write the timestamped JSON report and the latest.{json,csv,md} pointers. Returns the JSON path."""
    out_dir = Path(reports_dir)
    payload = report.to_dict()
    out_path = out_dir / report_filename(report.timestamp)
    write_json(payload, out_path)
    write_json(payload, out_dir / "latest.json")
    write_df_csv(report_frame(report), out_dir / "latest.csv")
    write_text(build_markdown(report), out_dir / "latest.md")
    return out_path


def load_report(path: str | Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Report {path} is not a JSON object")
    return data
