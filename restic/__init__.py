"""Encryption, encrypted streams, path filters and console helpers for a backup tool."""

__version__ = "0.1.0"

__all__ = [
    "cleanup",
    "crypto",
    "debug",
    "filter",
    "formatting",
    "hooks",
    "streams",
    "table",
]