"""
Dashboard helpers: shape a loaded JSON report for charts and ranked lists.
Pure pandas; the Streamlit page lives in cli/app.py.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def report_opportunities(report: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Global `top` list; falls back to a flat `opportunities` key for older report files."""
    ops = report.get("top")
    if ops is None:
        ops = report.get("opportunities")
    return [op for op in (ops or []) if isinstance(op, dict)]


def top_opportunities_frame(report: Dict[str, Any], limit: int = 5) -> pd.DataFrame:
    """name/spread/best/worst/chain rows for the first `limit` opportunities."""
    rows = [
        {
            "name": op.get("pair"),
            "spread": op.get("spread_percent"),
            "best": op.get("best"),
            "worst": op.get("worst"),
            "chain": op.get("chain"),
        }
        for op in report_opportunities(report)[: max(0, limit)]
    ]
    return pd.DataFrame(rows, columns=["name", "spread", "best", "worst", "chain"])


def ranked_lines(report: Dict[str, Any], limit: int = 5) -> List[str]:
    lines = []
    for op in report_opportunities(report)[: max(0, limit)]:
        spread = op.get("spread_percent")
        spread_str = f"{spread:.4f}" if isinstance(spread, (int, float)) else "n/a"
        lines.append(f"{op.get('pair')} - {spread_str}% ({op.get('best')} vs {op.get('worst')})")
    return lines


def summary_metrics(report: Dict[str, Any]) -> Dict[str, int]:
    summary = report.get("summary") or {}
    return {
        "chains": int(summary.get("total_chains", 0) or 0),
        "pairs": int(summary.get("total_pairs", 0) or 0),
        "candidates": int(summary.get("candidates", 0) or 0),
    }
