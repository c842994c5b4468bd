"""
Main execution logic for feedwatch.
"""

import logging
from typing import Any, List, Optional

import requests

from .config.settings import Config
from .crawlers import get_crawler
from .notify import BaseNotifier, get_notifier

logger = logging.getLogger(__name__)


def run_agent(
    config: Config,
    notifier: Optional[BaseNotifier] = None,
    session: Optional[requests.Session] = None,
) -> List[Any]:
    """
    Fetch the configured target, parse it and notify once per record.

    Args:
        config: Configuration object with all settings
        notifier: Notification backend (defaults to get_notifier(config))
        session: Optional HTTP session for the crawler

    Returns:
        The records that were notified

    Raises:
        FetchError: If the target could not be retrieved
        FeedParseError: If the feed is malformed
    """
    logger.info(f"Initializing feedwatch for {config.target_url}")

    crawler = get_crawler(config, session=session)
    notifier = notifier or get_notifier(config)

    try:
        records = crawler.crawl()
    except Exception as e:
        logger.error(f"Crawl failed: {e}")
        raise

    notifier.send(records)
    logger.info(f"Run completed: {len(records)} records")
    return records


def main():
    """Main entry point for CLI usage."""
    from .cli import main as cli_main
    cli_main()


if __name__ == "__main__":
    main()
