"""Fetch DEX aggregator swap calldata from the command line."""

__version__ = "0.1.0"
