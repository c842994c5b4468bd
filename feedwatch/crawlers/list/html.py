"""
HTML crawler for the LWN.net headlines page.
"""

import logging
from typing import List

from ...parsers.lwn import parse_lwn_headlines
from ...parsers.schema import Entry
from ..base import BaseCrawler

logger = logging.getLogger(__name__)


class LWNCrawler(BaseCrawler):
    """
    Crawler for LWN.net style headline listings.

    Returns:
        List of Entry in page order, truncated to ``config.max_items``
        when it is positive
    """

    def crawl(self) -> List[Entry]:
        """Fetch the target page and extract headline entries."""
        url = self.config.target_url
        logger.info(f"HTML crawling: {url}")

        html = self.fetch(url)
        entries = parse_lwn_headlines(html)

        if self.config.max_items:
            entries = entries[:self.config.max_items]

        logger.info(f"HTML extraction: {len(entries)} entries")
        return entries


__all__ = ["LWNCrawler"]
