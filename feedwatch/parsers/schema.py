"""
Record types produced by feedwatch parsers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from ..config.constants import EPOCH


class Context(Enum):
    """Semantic role of a recognized feed element."""

    ITEM = "item"
    TITLE = "title"
    LINK = "link"
    DC_DATE = "dc:date"
    DC_CREATOR = "dc:creator"
    DESCRIPTION = "description"

    def __str__(self) -> str:
        return self.value


@dataclass
class Item:
    """One feed entry.

    Text fields grow by appending trimmed character fragments while their
    element is open; ``created`` is overwritten by each parsable dc:date.
    """

    title: str = ""
    link: str = ""
    created: datetime = EPOCH
    author: str = ""
    description: str = ""

    @property
    def headline(self) -> str:
        return self.title

    @property
    def body(self) -> str:
        return self.description

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to a JSON-friendly dict."""
        data = asdict(self)
        data["created"] = self.created.isoformat()
        return data


@dataclass
class Lwn:
    """Headline blurb scraped from the LWN.net headlines page."""

    title: str
    summary: str


@dataclass
class Entry:
    """A scraped record with its provenance."""

    source: str
    ref_id: str
    created: datetime
    last_update: datetime
    data: Lwn = field(default_factory=lambda: Lwn("", ""))

    @property
    def headline(self) -> str:
        return self.data.title

    @property
    def body(self) -> str:
        return self.data.summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to a JSON-friendly dict."""
        return {
            "source": self.source,
            "ref_id": self.ref_id,
            "created": self.created.isoformat(),
            "last_update": self.last_update.isoformat(),
            "title": self.data.title,
            "summary": self.data.summary,
        }
