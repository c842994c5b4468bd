"""
XML parsing events consumed by the feed state machine.

Any event source may drive the state machine as long as it yields these
types in document order and finishes with ``EndDocument``. Malformed input
is reported by raising ``TokenizerError`` from the iterator.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union


class Position(NamedTuple):
    """Location in the source document (1-based row)."""

    row: int
    column: Optional[int] = None


@dataclass(frozen=True)
class StartElement:
    name: str
    namespace: Optional[str] = None
    position: Optional[Position] = None


@dataclass(frozen=True)
class EndElement:
    """Closing tag.

    Events from ``iter_events`` carry the line of the matching start tag,
    since lxml does not record where an element closes.
    """

    name: str
    namespace: Optional[str] = None
    position: Optional[Position] = None


@dataclass(frozen=True)
class Characters:
    """Raw character data, before trimming."""

    text: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class Comment:
    text: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class ProcessingInstruction:
    target: str
    text: str = ""
    position: Optional[Position] = None


@dataclass(frozen=True)
class EndDocument:
    position: Optional[Position] = None


Event = Union[
    StartElement,
    EndElement,
    Characters,
    Comment,
    ProcessingInstruction,
    EndDocument,
]
