"""Report artifacts written to disk: JSON, latest pointers, CSV and Markdown."""
from __future__ import annotations

import json

import pandas as pd

from spread_scanner.artifacts import (
    CSV_COLUMNS,
    build_markdown,
    load_report,
    report_filename,
    write_report,
)
from spread_scanner.models import PairResult
from spread_scanner.providers.base import Quote
from spread_scanner.report import build_chain_report, build_scan_report
from tests.fakes import make_chain

TS = "2026-01-01T12:30:00.123Z"


def _report():
    results = [
        PairResult(
            pair="WETH/USDC",
            chain_id=1,
            chain="ethereum",
            sell_amount=0.05,
            sell_token="WETH",
            buy_token="USDC",
            quotes=(Quote(source="0x", price=1.02), Quote(source="1inch", error="timeout")),
            spread_percent=4.081632,
            best="0x",
            worst="1inch",
        ),
        PairResult(pair="DAI/USDT", chain_id=1, chain="ethereum", error="boom"),
    ]
    return build_scan_report([build_chain_report(make_chain(), results)], timestamp=TS)


def test_report_filename():
    assert report_filename(TS) == "opportunities-2026-01-01T12-30-00-123Z.json"


def test_write_report_files(tmp_path):
    out_dir = tmp_path / "reports"
    path = write_report(_report(), out_dir)
    assert path == out_dir / "opportunities-2026-01-01T12-30-00-123Z.json"
    for name in ("latest.json", "latest.csv", "latest.md"):
        assert (out_dir / name).exists()

    data = load_report(path)
    assert data == load_report(out_dir / "latest.json")
    assert data["timestamp"] == TS
    assert data["summary"] == {"total_chains": 1, "total_pairs": 2, "candidates": 1}
    assert data["top"][0]["quotes"][1] == {"source": "1inch", "error": "timeout"}
    assert json.loads(path.read_text(encoding="utf-8"))["chains"][0]["raw"][1]["error"] == "boom"


def test_csv_rows(tmp_path):
    write_report(_report(), tmp_path)
    df = pd.read_csv(tmp_path / "latest.csv", dtype=str, keep_default_na=False)
    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == 1
    row = df.iloc[0]
    assert row["pair"] == "WETH/USDC"
    assert row["spread_percent"] == "4.0816"
    assert row["chain"] == "ethereum"
    assert row["liquidity_flag"] == ""


def test_markdown():
    md = build_markdown(_report())
    assert md.startswith(f"# Arbitrage Opportunities ({TS})")
    assert "## ethereum (top 1)" in md
    assert "| WETH/USDC | 4.0816 | 0x | 1inch | 0.05 WETH |  |" in md
    assert "DAI/USDT" not in md


def test_empty_report(tmp_path):
    report = build_scan_report([], timestamp=TS)
    write_report(report, tmp_path)
    df = pd.read_csv(tmp_path / "latest.csv")
    assert list(df.columns) == CSV_COLUMNS
    assert df.empty
