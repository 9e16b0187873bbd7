"""Webhook delivery (mocked requests.post)."""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests

from spread_scanner.models import PairResult
from spread_scanner.notify import post_report
from spread_scanner.report import build_chain_report, build_scan_report
from tests.fakes import make_chain

URL = "https://hooks.example.com/spread"


def _report(with_opportunity=True):
    results = []
    if with_opportunity:
        results.append(
            PairResult(pair="WETH/USDC", chain_id=1, chain="ethereum", spread_percent=1.5, best="0x", worst="cow")
        )
    return build_scan_report([build_chain_report(make_chain(), results)], timestamp="t")


@patch("spread_scanner.notify.requests.post")
def test_posts_report_json(mock_post):
    mock_post.return_value = MagicMock()
    report = _report()
    assert post_report(URL, report, timeout_s=3.0) is True
    args, kwargs = mock_post.call_args
    assert args[0] == URL
    assert kwargs["json"] == report.to_dict()
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["timeout"] == 3.0
    assert mock_post.call_count == 1


@patch("spread_scanner.notify.requests.post")
def test_skipped_without_url_or_opportunities(mock_post):
    assert post_report(None, _report()) is False
    assert post_report("", _report()) is False
    assert post_report(URL, _report(with_opportunity=False)) is False
    mock_post.assert_not_called()


@patch("spread_scanner.notify.requests.post")
def test_failure_logged_not_raised(mock_post, caplog):
    mock_post.side_effect = requests.ConnectionError("refused")
    assert post_report(URL, _report()) is False
    assert "Webhook post failed" in caplog.text
    assert mock_post.call_count == 1


@patch("spread_scanner.notify.requests.post")
def test_http_error_status(mock_post):
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    mock_post.return_value = resp
    assert post_report(URL, _report()) is False
