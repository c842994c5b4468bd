"""
Constants and configuration defaults for feedwatch.

Centralized location for magic numbers and configuration constants.
"""

from datetime import datetime, timezone

# ============================================================================
# Feed Vocabulary
# ============================================================================

# Dublin Core elements namespace (dc:date, dc:creator)
DUBLIN_CORE_NS = "http://purl.org/dc/elements/1.1/"

# Timestamp used when a feed item carries no parsable dc:date
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# ============================================================================
# HTTP Defaults
# ============================================================================

DEFAULT_TARGET_URL = "https://lwn.net/headlines/rss"

DEFAULT_USER_AGENT = (
    "feedwatch HTTP(S) downloader client - "
    "see https://github.com/feedwatch/feedwatch for details"
)

DEFAULT_HTTP_HEADERS = {
    "Accept": "application/rss+xml,application/xml;q=0.9,text/html;q=0.8,*/*;q=0.5",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
}

MIN_TIMEOUT = 5  # Minimum seconds for HTTP timeout
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_RETRIES = 3

# ============================================================================
# Retry Configuration
# ============================================================================

RETRY_BASE_DELAY = 1  # seconds
RETRY_MAX_DELAY = 60  # seconds
RETRY_MULTIPLIER = 2  # exponential backoff multiplier
RETRY_JITTER = True  # Add random jitter to prevent thundering herd

# ============================================================================
# LWN Headlines Page
# ============================================================================

LWN_SOURCE = "lwn.net"
LWN_BLURB_SELECTOR = ".BlurbListing"
LWN_HEADLINE_CLASS = "Headline"
LWN_TIMESTAMP_FORMAT = "%b %d, %Y %H:%M UTC (%a)"

# ============================================================================
# Validation Rules
# ============================================================================

VALID_CRAWL_MODES = ["rss", "html", "auto"]

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# URL fragments that mark a target as a feed in auto mode
RSS_URL_INDICATORS = ["rss", "feed", "xml"]

# ============================================================================
# File System Configuration
# ============================================================================

DEFAULT_CONFIG_PATH = "configs/default.yaml"
DEFAULT_LOG_FILE = "logs/feedwatch.log"


def is_valid_mode(mode: str, valid_modes: list) -> bool:
    """Check if mode is valid."""
    return mode.lower() in [m.lower() for m in valid_modes]
