"""Shared utilities for the backend."""
from utils.clock import isoformat_utc, to_utc, utcnow
from utils.log import setup_logging

__all__ = [
    "isoformat_utc",
    "setup_logging",
    "to_utc",
    "utcnow",
]
