"""
Streaming RSS parser.

A single-pass, stack-based interpreter over XML parsing events. Recognized
elements (see ``context.resolve``) are pushed on a context stack; character
data is routed to the item field selected by the innermost recognized
element; closing tags must match the stack exactly.

Usage:
    from feedwatch.parsers.rss import parse_feed

    items = parse_feed(xml_text)
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Union

from .context import resolve
from .errors import ContextMismatchError, UnbalancedCloseError, UnterminatedContextError
from .events import Characters, EndDocument, EndElement, Event, Position, StartElement
from .schema import Context, Item
from .tokenizer import iter_events
from ..utils.helpers import parse_rfc3339

# Text contexts and the Item field each one appends to
_TEXT_FIELDS = {
    Context.TITLE: "title",
    Context.LINK: "link",
    Context.DC_CREATOR: "author",
    Context.DESCRIPTION: "description",
}


@dataclass(frozen=True)
class ParseAnomaly:
    """Something odd but non-fatal seen during a parse."""

    kind: str
    message: str
    position: Optional[Position] = None


AnomalySink = Callable[[ParseAnomaly], None]


class FeedStateMachine:
    """
    Turns a stream of XML events into feed items.

    Each call to ``run`` owns its stack and draft, so one instance may be
    reused for several documents. Non-fatal anomalies are passed to
    ``on_anomaly`` and kept in ``anomalies`` for the most recent run.

    Attributes:
        strict: Treat recognized elements left open at end of document
            as an error instead of an anomaly
        anomalies: Anomalies collected during the last run
    """

    def __init__(self, strict: bool = False, on_anomaly: Optional[AnomalySink] = None):
        self.strict = strict
        self.on_anomaly = on_anomaly
        self.anomalies: List[ParseAnomaly] = []

    def run(self, events: Iterable[Event]) -> List[Item]:
        """
        Consume events until end of document.

        Args:
            events: Event source; may raise TokenizerError while iterated

        Returns:
            Completed items in the order their item elements closed

        Raises:
            TokenizerError: Propagated from the event source
            StructuralError: If recognized elements are not properly nested
        """
        self.anomalies = []
        items: List[Item] = []
        draft = Item()
        stack: List[Context] = []
        position: Optional[Position] = None

        for event in events:
            if getattr(event, "position", None) is not None:
                position = event.position

            if isinstance(event, StartElement):
                context = resolve(event.name, event.namespace)
                if context is None:
                    continue
                if context is Context.ITEM:
                    draft = Item()
                stack.append(context)

            elif isinstance(event, EndElement):
                context = resolve(event.name, event.namespace)
                if context is None:
                    continue
                row, column = _split(position)
                if not stack:
                    raise UnbalancedCloseError(context, row, column)
                expected = stack.pop()
                if expected is not context:
                    raise ContextMismatchError(expected, context, row, column)
                if context is Context.ITEM:
                    items.append(replace(draft))

            elif isinstance(event, Characters):
                if stack:
                    self._accumulate(draft, stack[-1], event.text.strip(), position)

            elif isinstance(event, EndDocument):
                break

        self._check_unterminated(stack, position)
        return items

    def _accumulate(
        self,
        draft: Item,
        context: Context,
        text: str,
        position: Optional[Position],
    ) -> None:
        if not text:
            return
        if context is Context.DC_DATE:
            created = parse_rfc3339(text)
            if created is None:
                self._report("unparsable-date", f"Ignoring unparsable dc:date {text!r}", position)
            else:
                draft.created = created
            return

        field_name = _TEXT_FIELDS.get(context)
        if field_name is not None:
            setattr(draft, field_name, getattr(draft, field_name) + text)

    def _check_unterminated(self, stack: List[Context], position: Optional[Position]) -> None:
        if not stack:
            return
        if self.strict:
            row, column = _split(position)
            raise UnterminatedContextError(stack, row, column)
        names = ", ".join(f"<{c}>" for c in stack)
        self._report("unterminated-context", f"Document ended inside {names}", position)

    def _report(self, kind: str, message: str, position: Optional[Position]) -> None:
        anomaly = ParseAnomaly(kind, message, position)
        self.anomalies.append(anomaly)
        if self.on_anomaly is not None:
            self.on_anomaly(anomaly)


def _split(position: Optional[Position]):
    if position is None:
        return None, None
    return position.row, position.column


def parse_feed(
    document: Union[str, bytes],
    strict: bool = False,
    on_anomaly: Optional[AnomalySink] = None,
) -> List[Item]:
    """
    Parse a complete RSS document into items.

    Args:
        document: Raw feed XML
        strict: Fail when recognized elements are left open at the end
        on_anomaly: Optional sink for non-fatal anomalies

    Returns:
        Items in document order

    Raises:
        FeedParseError: On malformed XML or mismatched recognized elements
    """
    machine = FeedStateMachine(strict=strict, on_anomaly=on_anomaly)
    return machine.run(iter_events(document))


__all__ = ["FeedStateMachine", "ParseAnomaly", "parse_feed"]
