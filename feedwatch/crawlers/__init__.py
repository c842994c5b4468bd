"""
Crawler module for fetching records from feeds and listing pages.

Architecture:

    BASE CLASSES (feedwatch.crawlers.base):
    - BaseCrawler: HTTP retrieval with retries, crawl() interface
    - FetchError / HttpStatusError / TransportError: retrieval failures

    LIST CRAWLING (feedwatch.crawlers.list):
    - RSSCrawler: RSS feeds -> Item
    - LWNCrawler: LWN.net headlines page -> Entry

Usage:
    from feedwatch.crawlers import get_crawler
    from feedwatch.config.settings import Config

    config = Config(target_url="https://lwn.net/headlines/rss", crawl_mode="auto")
    crawler = get_crawler(config)
    records = crawler.crawl()

Factory Pattern:
    Use get_crawler(config) to pick a crawler from config.crawl_mode
"""

import logging
from typing import Optional

import requests

from ..config.constants import RSS_URL_INDICATORS
from ..config.settings import Config
from .base import BaseCrawler, FetchError, HttpStatusError, TransportError
from .list.html import LWNCrawler
from .list.rss import RSSCrawler

logger = logging.getLogger(__name__)


def is_rss_feed(url: str) -> bool:
    """Check if URL is an RSS feed."""
    return any(indicator in url.lower() for indicator in RSS_URL_INDICATORS)


def get_crawler(config: Config, session: Optional[requests.Session] = None) -> BaseCrawler:
    """Factory function to get the appropriate crawler based on configuration.

    Args:
        config: Configuration object with crawl_mode setting
        session: Optional HTTP session shared with the crawler

    Returns:
        BaseCrawler instance

    Raises:
        ValueError: If crawl_mode is not valid

    Mode Comparison:
        - rss:   Parse the target as an RSS feed
        - html:  Scrape the target as an LWN.net headlines page
        - auto:  rss when the URL looks like a feed, html otherwise
    """
    mode = config.crawl_mode.lower()

    if mode == "auto":
        mode = "rss" if is_rss_feed(config.target_url) else "html"
        logger.debug(f"Auto mode resolved to '{mode}' for {config.target_url}")

    if mode == "rss":
        return RSSCrawler(config, session=session)
    elif mode == "html":
        return LWNCrawler(config, session=session)
    else:
        raise ValueError(f"Unknown crawl mode: {config.crawl_mode}")


__all__ = [
    "BaseCrawler",
    "FetchError",
    "HttpStatusError",
    "TransportError",
    "RSSCrawler",
    "LWNCrawler",
    "get_crawler",
    "is_rss_feed",
]
