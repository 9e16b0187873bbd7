"""
Streamlit dashboard: renders a previously written scan report (latest.json).

Run: spread-scanner dashboard   (or: streamlit run spread_scanner/cli/app.py)
"""
from __future__ import annotations

import os
from pathlib import Path

import plotly.express as px
import streamlit as st

from spread_scanner.artifacts import load_report
from spread_scanner.ui import ranked_lines, summary_metrics, top_opportunities_frame

DEFAULT_REPORT = Path(os.environ.get("REPORTS_DIR", "reports")) / "latest.json"


def main() -> None:
    st.set_page_config(page_title="Spread Scanner", layout="wide")
    st.title("Arbitrage Finder - Top Opportunities")

    report_path = st.sidebar.text_input("Report file", str(DEFAULT_REPORT))
    limit = st.sidebar.slider("Top N", min_value=1, max_value=20, value=5)

    if not Path(report_path).exists():
        st.info(f"No report at {report_path}. Run `spread-scanner scan` first.")
        return
    report = load_report(report_path)

    st.caption(f"Scan at {report.get('timestamp', '?')}")
    metrics = summary_metrics(report)
    c1, c2, c3 = st.columns(3)
    c1.metric("Chains", metrics["chains"])
    c2.metric("Pairs", metrics["pairs"])
    c3.metric("Candidates", metrics["candidates"])

    df = top_opportunities_frame(report, limit=limit)
    if df.empty:
        st.write("No opportunities in this report.")
        return
    fig = px.bar(df, x="name", y="spread", hover_data=["best", "worst", "chain"])
    fig.update_layout(yaxis_title="Spread %", xaxis_title="Pair")
    st.plotly_chart(fig)

    st.subheader("Top pairs")
    st.markdown("\n".join(f"{i}. {line}" for i, line in enumerate(ranked_lines(report, limit=limit), 1)))


if __name__ == "__main__":
    main()
