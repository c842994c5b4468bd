"""Parser module for feed and page extraction.

Parsers:
- rss: Streaming, stack-based RSS parser over XML events (strict nesting
  of recognized elements, Dublin Core date/creator support)
- lwn: HTML extractor for the LWN.net headlines page

Usage:
    from feedwatch.parsers import parse_feed

    items = parse_feed(xml_text)
    for item in items:
        print(item.title, item.created)
"""

from .context import resolve
from .errors import (
    ContextMismatchError,
    FeedParseError,
    StructuralError,
    TokenizerError,
    UnbalancedCloseError,
    UnterminatedContextError,
)
from .lwn import parse_lwn_headlines
from .rss import FeedStateMachine, ParseAnomaly, parse_feed
from .schema import Context, Entry, Item, Lwn
from .tokenizer import iter_events

__all__ = [
    "Context",
    "Entry",
    "Item",
    "Lwn",
    "resolve",
    "iter_events",
    "FeedStateMachine",
    "ParseAnomaly",
    "parse_feed",
    "parse_lwn_headlines",
    "FeedParseError",
    "TokenizerError",
    "StructuralError",
    "ContextMismatchError",
    "UnbalancedCloseError",
    "UnterminatedContextError",
]
