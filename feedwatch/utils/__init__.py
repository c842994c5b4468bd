"""Utility functions for feedwatch."""

from .helpers import (
    calculate_hash,
    format_timestamp,
    parse_rfc3339,
    validate_url,
)

__all__ = [
    "calculate_hash",
    "format_timestamp",
    "parse_rfc3339",
    "validate_url",
]
