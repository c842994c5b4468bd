"""
lxml-backed event source for the feed state machine.

Walks the document with ``lxml.etree.iterparse`` and re-emits it as a flat
stream of events. Character data is produced in document order: an
element's text is emitted just before its first child (or its end tag), and
every child's tail just before the next sibling (or the parent's end tag).
"""

import io
from typing import Iterator, Optional, Union

from lxml import etree

from .errors import TokenizerError
from .events import (
    Characters,
    Comment,
    EndDocument,
    EndElement,
    Event,
    Position,
    ProcessingInstruction,
    StartElement,
)

_ITERPARSE_EVENTS = ("start", "end", "comment", "pi")


def iter_events(document: Union[str, bytes]) -> Iterator[Event]:
    """
    Tokenize an XML document into parser events.

    Text input is treated as already decoded, so any encoding named in the
    XML declaration is ignored; bytes are decoded as the document declares.

    Args:
        document: Full XML document

    Yields:
        Events in document order, ending with EndDocument

    Raises:
        TokenizerError: If the document is not well-formed XML
    """
    if isinstance(document, str):
        source = io.BytesIO(document.encode("utf-8"))
        encoding = "utf-8"
    else:
        source = io.BytesIO(document)
        encoding = None

    context = etree.iterparse(
        source,
        events=_ITERPARSE_EVENTS,
        encoding=encoding,
        no_network=True,
        load_dtd=False,
    )

    try:
        for action, node in context:
            position = _position(node)
            if action == "start":
                yield from _preceding_text(node, position)
                qname = etree.QName(node)
                yield StartElement(qname.localname, qname.namespace, position)
            elif action == "end":
                text = node[-1].tail if len(node) else node.text
                if text:
                    yield Characters(text, position)
                qname = etree.QName(node)
                yield EndElement(qname.localname, qname.namespace, position)
            elif action == "comment":
                yield from _preceding_text(node, position)
                yield Comment(node.text or "", position)
            elif action == "pi":
                yield from _preceding_text(node, position)
                yield ProcessingInstruction(node.target, node.text or "", position)
    except etree.XMLSyntaxError as e:
        row, column = e.position if e.position else (None, None)
        raise TokenizerError(e.msg or str(e), row, column) from e

    yield EndDocument()


def _preceding_text(node, position: Optional[Position]) -> Iterator[Characters]:
    """Emit the text run that sits between ``node`` and whatever precedes it."""
    previous = node.getprevious()
    if previous is not None:
        text = previous.tail
    else:
        parent = node.getparent()
        text = parent.text if parent is not None else None
    if text:
        yield Characters(text, position)


def _position(node) -> Optional[Position]:
    # lxml only records the line on which a node starts
    if node.sourceline is None:
        return None
    return Position(node.sourceline)


__all__ = ["iter_events"]
