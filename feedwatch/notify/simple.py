"""Simple notification channels: log lines and console output.

Every notifier takes one ``(headline, body)`` pair per record; ``send``
fans a list of records out to ``notify``.

Usage:
    from feedwatch.notify import get_notifier
    from feedwatch.config.settings import Config

    config = Config(notify_log=True)
    notifier = get_notifier(config)
    notifier.send(items)
"""

import logging
from typing import Any, Iterable, Sequence

logger = logging.getLogger(__name__)


class BaseNotifier:
    """Base class for all notifiers."""

    def notify(self, headline: str, body: str) -> None:
        """Emit one notification."""
        raise NotImplementedError("Subclasses must implement notify()")

    def send(self, records: Sequence[Any]) -> None:
        """Notify once per record, using its ``headline`` and ``body``."""
        if not records:
            logger.info("No new items to notify")
            return

        for record in records:
            self.notify(record.headline, record.body)


class LoggingNotifier(BaseNotifier):
    """Writes each notification as an INFO log line."""

    def notify(self, headline: str, body: str) -> None:
        logger.info(f"{headline}: {body}")


class ConsoleNotifier(BaseNotifier):
    """Simple console output for new items.

    Output Format:
        ============================================================
        Feedwatch Found 2 New Items
        ============================================================

        1. Article Title
           Preview: First 150 characters of the body...

        ============================================================
    """

    preview_length = 150

    def __init__(self, config=None):
        """Initialize console notifier.

        Args:
            config: Configuration object
        """
        self.config = config
        self._count = 0

    def notify(self, headline: str, body: str) -> None:
        self._count += 1
        print(f"{self._count}. {headline}")
        if body:
            preview = body[:self.preview_length]
            suffix = "..." if len(body) > self.preview_length else ""
            print(f"   Preview: {preview}{suffix}")
        print()

    def send(self, records: Sequence[Any]) -> None:
        if not records:
            logger.info("No new items to notify")
            return

        print("\n" + "=" * 60)
        print(f"Feedwatch Found {len(records)} New Items")
        print("=" * 60 + "\n")

        self._count = 0
        super().send(records)

        print("=" * 60)
        logger.info(f"Console notification sent for {len(records)} items")


class MultiNotifier(BaseNotifier):
    """Composite notifier that sends to multiple channels."""

    def __init__(self, notifiers: Iterable[BaseNotifier]):
        """
        Initialize multi-notifier.

        Args:
            notifiers: List of notifier instances to dispatch to
        """
        self.notifiers = list(notifiers)

    def notify(self, headline: str, body: str) -> None:
        for notifier in self.notifiers:
            notifier.notify(headline, body)

    def send(self, records: Sequence[Any]) -> None:
        """
        Send notification to all configured channels.

        Args:
            records: Records to notify about
        """
        for notifier in self.notifiers:
            try:
                notifier.send(records)
            except Exception as e:
                # Log error but continue with other notifiers
                logger.error(f"Notification failed for {notifier.__class__.__name__}: {e}")
