"""
Utility helper functions.
"""

import hashlib
import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# RFC 3339 section 5.6 date-time
_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def calculate_hash(data: dict[str, Any]) -> str:
    """
    Calculate SHA-256 hash for dictionary data.

    Args:
        data: Dictionary to hash

    Returns:
        Hex digest string
    """
    normalized = json.dumps(data, sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(normalized.encode('utf-8')).hexdigest()


def parse_rfc3339(text: str) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp such as ``2021-01-15T17:24:00Z``.

    A full date, a time and a UTC offset are required; anything else
    (including bare dates) is rejected.

    Args:
        text: Timestamp string

    Returns:
        UTC datetime, or None if the text is not a valid RFC 3339 timestamp
    """
    text = text.strip()
    if not _RFC3339_RE.match(text):
        return None
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        return None
    return dt.astimezone(timezone.utc)


def format_timestamp(timestamp: datetime) -> str:
    """
    Format timestamp to readable format.

    Args:
        timestamp: Timestamp to format

    Returns:
        Formatted timestamp
    """
    return timestamp.strftime('%Y-%m-%d %H:%M:%S %Z').strip()


def validate_url(url: str) -> bool:
    """
    Validate URL format.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    try:
        result = urlparse(url)
    except ValueError:
        return False
    return result.scheme in ("http", "https") and bool(result.netloc)
