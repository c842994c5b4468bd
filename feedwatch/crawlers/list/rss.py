"""
RSS crawler - fetches a feed and turns it into items.

Parsing is done by the streaming state machine in ``feedwatch.parsers.rss``;
structural problems abort the crawl instead of producing partial output.
"""

import logging
from typing import List

from ...parsers.rss import ParseAnomaly, parse_feed
from ...parsers.schema import Item
from ..base import BaseCrawler

logger = logging.getLogger(__name__)


class RSSCrawler(BaseCrawler):
    """
    RSS crawler for the configured target feed.

    Returns:
        List of Item in document order, truncated to ``config.max_items``
        when it is positive
    """

    def crawl(self) -> List[Item]:
        """Fetch and parse the target feed."""
        url = self.config.target_url
        logger.info(f"RSS crawling: {url}")

        body = self.fetch(url)
        items = parse_feed(
            body,
            strict=self.config.strict_parsing,
            on_anomaly=self._log_anomaly,
        )

        if self.config.max_items:
            items = items[:self.config.max_items]

        logger.info(f"RSS feed parsed: {len(items)} items")
        return items

    def _log_anomaly(self, anomaly: ParseAnomaly) -> None:
        where = f" at line {anomaly.position.row}" if anomaly.position else ""
        logger.warning(f"{self.config.target_url}: {anomaly.message}{where}")


__all__ = ["RSSCrawler"]
