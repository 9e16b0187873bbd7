"""Allow python -m spread_scanner to print help."""
from __future__ import annotations

from . import __version__

_HELP = f"""\
spread-scanner {__version__}

Available commands:
  spread-scanner scan         Quote configured pairs and write ranked reports
  spread-scanner dashboard    Streamlit dashboard for reports/latest.json

Or directly:
  python -m spread_scanner.cli.scan --help
  python -m pytest -q         Run test suite
"""


def main() -> int:
    print(_HELP)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
