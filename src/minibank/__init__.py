"""Minimal banking ledger backed by a single relational table."""

__version__ = "0.1.0"
