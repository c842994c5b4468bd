"""Notification module for feedwatch - supports multiple channels.

This module provides a factory function to get the appropriate notification
backend based on configuration. Currently supports:
- Log (default): one INFO line per record
- Console: formatted block printed to stdout

Usage:
    from feedwatch.notify import get_notifier
    from feedwatch.config.settings import Config

    config = Config(notify_console=True)
    notifier = get_notifier(config)
    notifier.send(items)
"""

from .simple import BaseNotifier, ConsoleNotifier, LoggingNotifier, MultiNotifier


def get_notifier(config) -> BaseNotifier:
    """
    Factory function to get the appropriate notification backend(s) based on configuration.

    Args:
        config: Configuration object with notification settings

    Returns:
        BaseNotifier instance (LoggingNotifier, ConsoleNotifier or MultiNotifier)

    Examples:
        >>> config = Config(notify_log=True, notify_console=False)
        >>> isinstance(get_notifier(config), LoggingNotifier)
        True
    """
    notifiers = []

    if getattr(config, 'notify_log', True):
        notifiers.append(LoggingNotifier())

    if getattr(config, 'notify_console', False):
        notifiers.append(ConsoleNotifier(config))

    if not notifiers:
        # Fallback to logging if nothing is configured
        return LoggingNotifier()
    elif len(notifiers) == 1:
        return notifiers[0]
    else:
        return MultiNotifier(notifiers)


__all__ = [
    "BaseNotifier",
    "ConsoleNotifier",
    "LoggingNotifier",
    "MultiNotifier",
    "get_notifier",
]
