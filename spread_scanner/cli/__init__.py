"""Command-line entry points for spread_scanner."""
