"""
feedwatch - RSS feed watcher

Fetches a syndication feed over HTTP, parses it with a strict, streaming
state machine into structured items, and hands every item to a notifier.
An extractor for the LWN.net headlines page is included as well.
"""

__version__ = "0.1.0"
__author__ = "feedwatch Team"

from .main import main, run_agent
from .config.settings import Config
from .parsers import Item, parse_feed

__all__ = ["main", "run_agent", "Config", "Item", "parse_feed"]
