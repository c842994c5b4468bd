"""
Extractor for the LWN.net headlines page.

The page has no feed-like structure, so entries are located by DOM sibling
heuristics:

    <h2 class="Headline">Title</h2>
    <div class="BlurbListing">
        <p class="FeatureByline">[Security] Posted Jan 15, 2021 17:24 UTC (Fri) by jake</p>
        <p>Summary text...</p>
    </div>

A blurb missing its headline, summary or timestamp is skipped.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..config.constants import (
    LWN_BLURB_SELECTOR,
    LWN_HEADLINE_CLASS,
    LWN_SOURCE,
    LWN_TIMESTAMP_FORMAT,
)
from ..utils.helpers import calculate_hash
from .schema import Entry, Lwn

logger = logging.getLogger(__name__)


def parse_lwn_headlines(html: str) -> List[Entry]:
    """
    Extract headline entries from an LWN.net page.

    Args:
        html: Raw HTML of the headlines page

    Returns:
        Entries in page order
    """
    soup = BeautifulSoup(html, "lxml")
    entries = []
    for blurb in soup.select(LWN_BLURB_SELECTOR):
        entry = _to_entry(blurb)
        if entry is not None:
            entries.append(entry)
    return entries


def _to_entry(blurb: Tag) -> Optional[Entry]:
    title = _extract_headline(blurb)
    if title is None:
        logger.info("Headline is not found for current blurb. Skip processing it.")
        return None

    summary = _extract_summary(blurb)
    if summary is None:
        logger.info(f"Summary is not found for blurb `{title}`. Skip processing it.")
        return None

    created = _extract_created(blurb)
    if created is None:
        logger.info(f"Timestamp cannot be parsed for blurb `{title}`. Skip processing it.")
        return None

    ref_id = calculate_hash({"source": LWN_SOURCE, "title": title, "created": created.isoformat()})
    return Entry(
        source=LWN_SOURCE,
        ref_id=ref_id,
        created=created,
        last_update=created,
        data=Lwn(title=title, summary=summary),
    )


def _extract_headline(blurb: Tag) -> Optional[str]:
    # Closest preceding element, text nodes skipped
    previous = blurb.find_previous_sibling(True)
    if previous is None or LWN_HEADLINE_CLASS not in (previous.get("class") or []):
        return None
    return previous.decode_contents()


def _extract_summary(blurb: Tag) -> Optional[str]:
    byline = blurb.find(True, recursive=False)
    if byline is None:
        return None
    summary = byline.find_next_sibling(True)
    if summary is None:
        return None
    return summary.decode_contents().strip()


def _extract_created(blurb: Tag) -> Optional[datetime]:
    byline = blurb.find(True, recursive=False)
    if byline is None:
        return None
    return extract_timestamp(byline.decode_contents())


def extract_timestamp(text: str) -> Optional[datetime]:
    """
    Parse the posting time out of an LWN byline.

    Example byline: ``[Security] Posted Jan 15, 2021 17:24 UTC (Fri) by jake``

    Args:
        text: Byline inner HTML

    Returns:
        UTC datetime, or None if the byline has no parsable timestamp
    """
    marker = "Posted "
    start = text.find(marker)
    if start < 0:
        logger.warning(f"Cannot find the beginning of timestamp in `{text}`")
        return None
    start += len(marker)

    end = text.find(" by ", start)
    if end < 0:
        logger.warning(f"Cannot find the end of timestamp in `{text}`")
        return None

    ts_text = text[start:end]
    try:
        parsed = datetime.strptime(ts_text, LWN_TIMESTAMP_FORMAT)
    except ValueError as e:
        logger.warning(f"Failed to parse timestamp text `{text}`. Reason: {e}")
        return None
    return parsed.replace(tzinfo=timezone.utc)


__all__ = ["parse_lwn_headlines", "extract_timestamp"]
