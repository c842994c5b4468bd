"""List crawlers - fetch a listing page and extract its records.

Architecture:
    RSSCrawler: RSS feeds, parsed with the streaming state machine
    LWNCrawler: LWN.net headlines page, parsed with DOM heuristics

All crawlers return records exposing ``headline`` and ``body``.

Usage:
    from feedwatch.crawlers.list import RSSCrawler
    from feedwatch.config.settings import Config

    config = Config(target_url="https://lwn.net/headlines/rss")
    items = RSSCrawler(config).crawl()
"""

from .html import LWNCrawler
from .rss import RSSCrawler

__all__ = ["LWNCrawler", "RSSCrawler"]
