"""
Tests for the streaming RSS state machine.

Events are built by hand so that nesting errors a strict XML tokenizer
would already reject can still be exercised.
"""

from datetime import datetime, timezone

import pytest

from feedwatch.config.constants import DUBLIN_CORE_NS, EPOCH
from feedwatch.parsers.errors import (
    ContextMismatchError,
    StructuralError,
    TokenizerError,
    UnbalancedCloseError,
    UnterminatedContextError,
)
from feedwatch.parsers.events import (
    Characters,
    Comment,
    EndDocument,
    EndElement,
    Position,
    ProcessingInstruction,
    StartElement,
)
from feedwatch.parsers.rss import FeedStateMachine
from feedwatch.parsers.schema import Context, Item


def element(name, *children, namespace=None):
    """Events for <name>children</name>; strings become character data."""
    events = [StartElement(name, namespace)]
    for child in children:
        if isinstance(child, str):
            events.append(Characters(child))
        else:
            events.extend(child)
    events.append(EndElement(name, namespace))
    return events


def dc(name, *children):
    return element(name, *children, namespace=DUBLIN_CORE_NS)


def document(*children):
    return element("rss", element("channel", *children)) + [EndDocument()]


class TestItemAccumulation:
    """Test routing of character data into item fields."""

    def test_single_item_all_fields(self):
        """Test every recognized field lands in the right attribute."""
        events = document(
            element(
                "item",
                element("title", "Foo"),
                element("link", "http://x"),
                dc("date", "2021-01-15T17:24:00Z"),
                dc("creator", "Jane"),
                element("description", "Bar"),
            )
        )

        items = FeedStateMachine().run(events)

        assert items == [
            Item(
                title="Foo",
                link="http://x",
                created=datetime(2021, 1, 15, 17, 24, tzinfo=timezone.utc),
                author="Jane",
                description="Bar",
            )
        ]

    def test_fragments_trimmed_and_joined_without_separator(self):
        """Test ' Hello ' + ' World ' becomes 'HelloWorld'."""
        events = document(element("item", element("title", " Hello ", " World ")))

        items = FeedStateMachine().run(events)

        assert items[0].title == "HelloWorld"

    def test_unrecognized_markup_inside_field(self):
        """Test text inside unknown elements still reaches the enclosing field."""
        events = document(
            element(
                "item",
                element("description", "Read ", element("b", "this"), " now", element("br")),
            )
        )

        items = FeedStateMachine().run(events)

        assert items[0].description == "Readthisnow"

    def test_text_directly_in_item_discarded(self):
        """Test character data with <item> on top of the stack is dropped."""
        events = document(element("item", "stray", element("title", "T"), "more"))

        items = FeedStateMachine().run(events)

        assert items == [Item(title="T")]

    def test_text_outside_recognized_elements_ignored(self):
        """Test channel-level text never reaches any item."""
        events = document("channel text", element("generator", "x"), element("item"))

        items = FeedStateMachine().run(events)

        assert items == [Item()]

    def test_channel_title_before_first_item_not_emitted(self):
        """Test a channel <title> outside any item produces no item."""
        events = document(element("title", "Channel"), element("item", element("title", "First")))

        items = FeedStateMachine().run(events)

        assert [item.title for item in items] == ["First"]

    def test_defaults_when_fields_missing(self):
        """Test empty strings and epoch when an item has no fields."""
        items = FeedStateMachine().run(document(element("item")))

        assert items == [Item()]
        assert items[0].created == EPOCH

    def test_dc_names_without_namespace_unrecognized(self):
        """Test bare <date>/<creator> do not count as Dublin Core."""
        events = document(
            element("item", element("creator", "Jane"), element("date", "2021-01-15T17:24:00Z"))
        )

        items = FeedStateMachine().run(events)

        assert items == [Item()]

    def test_ignored_event_kinds(self):
        """Test comments and processing instructions change nothing."""
        events = document(
            element(
                "item",
                [StartElement("title"), Comment("note"), Characters("A"),
                 ProcessingInstruction("php", "echo 1"), Characters("B"), EndElement("title")],
            )
        )

        items = FeedStateMachine().run(events)

        assert items[0].title == "AB"


class TestDates:
    """Test dc:date handling."""

    def test_rfc3339_sets_created(self):
        """Test an RFC 3339 value sets the exact instant."""
        events = document(element("item", dc("date", "2021-01-15T17:24:00Z")))

        items = FeedStateMachine().run(events)

        assert items[0].created == datetime(2021, 1, 15, 17, 24, tzinfo=timezone.utc)

    def test_offset_normalized_to_utc(self):
        """Test offsets are honoured."""
        events = document(element("item", dc("date", "2021-01-15T18:24:00+01:00")))

        items = FeedStateMachine().run(events)

        assert items[0].created == datetime(2021, 1, 15, 17, 24, tzinfo=timezone.utc)
        assert items[0].created.utcoffset().total_seconds() == 0

    def test_unparsable_date_keeps_default(self):
        """Test garbage leaves created at the epoch without raising."""
        events = document(element("item", dc("date", "not a date")))

        machine = FeedStateMachine()
        items = machine.run(events)

        assert items[0].created == EPOCH
        assert [a.kind for a in machine.anomalies] == ["unparsable-date"]

    def test_unparsable_date_keeps_previous_value(self):
        """Test a later bad date does not clobber an earlier good one."""
        events = document(
            element("item", dc("date", "2021-01-15T17:24:00Z"), dc("date", "not a date"))
        )

        items = FeedStateMachine().run(events)

        assert items[0].created == datetime(2021, 1, 15, 17, 24, tzinfo=timezone.utc)

    def test_later_date_overwrites(self):
        """Test dates overwrite instead of appending."""
        events = document(
            element("item", dc("date", "2021-01-15T17:24:00Z"), dc("date", "2022-02-01T00:00:00Z"))
        )

        items = FeedStateMachine().run(events)

        assert items[0].created == datetime(2022, 2, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "text",
        [
            "2021-W02-5T17:24:00Z",
            "2021-01-15T17:24:00+0000",
            "2021-01-15T17:24:00,5Z",
            "2021-01-15T17:24:00.Z",
        ],
    )
    def test_iso8601_only_forms_keep_previous_value(self, text):
        """Test ISO 8601 forms outside RFC 3339 do not overwrite created."""
        good = datetime(2020, 6, 1, 12, 0, tzinfo=timezone.utc)
        events = document(element("item", dc("date", "2020-06-01T12:00:00Z"), dc("date", text)))

        machine = FeedStateMachine()
        items = machine.run(events)

        assert items[0].created == good
        assert [a.kind for a in machine.anomalies] == ["unparsable-date"]

    def test_date_only_value_rejected(self):
        """Test a bare date is not RFC 3339."""
        events = document(element("item", dc("date", "2021-01-15")))

        items = FeedStateMachine().run(events)

        assert items[0].created == EPOCH

    def test_anomaly_sink_called(self):
        """Test anomalies go to the injected sink."""
        seen = []
        events = document(element("item", dc("date", "yesterday")))

        FeedStateMachine(on_anomaly=seen.append).run(events)

        assert len(seen) == 1
        assert "yesterday" in seen[0].message


class TestItemLifecycle:
    """Test draft reset and flushing."""

    def test_items_in_document_order(self):
        """Test one item per pair, in order."""
        events = document(*[element("item", element("title", f"T{i}")) for i in range(5)])

        items = FeedStateMachine().run(events)

        assert [item.title for item in items] == ["T0", "T1", "T2", "T3", "T4"]

    def test_draft_reset_between_items(self):
        """Test fields do not leak from one item into the next."""
        events = document(
            element("item", element("title", "A"), element("description", "first")),
            element("item", element("title", "B")),
        )

        items = FeedStateMachine().run(events)

        assert items[1] == Item(title="B")

    def test_emitted_items_independent(self):
        """Test flushed items are copies of the reused draft."""
        events = document(element("item", element("title", "A")), element("item", element("title", "B")))

        items = FeedStateMachine().run(events)

        assert items[0] is not items[1]
        assert items[0].title == "A"

    def test_unclosed_item_discarded(self):
        """Test an item still open at end of document is not emitted."""
        events = [
            StartElement("rss"),
            *element("item", element("title", "done")),
            StartElement("item"),
            *element("title", "pending"),
            EndDocument(),
        ]

        items = FeedStateMachine().run(events)

        assert [item.title for item in items] == ["done"]

    def test_nested_item_restarts_draft(self):
        """Test a nested <item> start discards the outer draft."""
        events = document(
            element("item", element("title", "outer"), element("item", element("link", "inner")))
        )

        items = FeedStateMachine().run(events)

        assert items == [Item(link="inner"), Item(link="inner")]

    def test_empty_document(self):
        """Test a document without recognized elements yields nothing."""
        events = element("rss", element("channel", element("generator", "x"))) + [EndDocument()]

        assert FeedStateMachine().run(events) == []

    def test_no_events(self):
        """Test an exhausted source behaves like end of document."""
        assert FeedStateMachine().run([]) == []

    def test_events_after_end_document_ignored(self):
        """Test parsing stops at EndDocument."""
        events = [EndDocument(), *element("item", element("title", "late"))]

        assert FeedStateMachine().run(events) == []

    def test_machine_reusable(self):
        """Test two runs do not share state."""
        machine = FeedStateMachine()
        first = machine.run(document(element("item", element("title", "A"))))
        second = machine.run(document(element("item", element("title", "B"))))

        assert [i.title for i in first] == ["A"]
        assert [i.title for i in second] == ["B"]


class TestStructuralErrors:
    """Test nesting validation among recognized elements."""

    def test_out_of_order_close_fails(self):
        """Test closing <title> while <link> is open raises a mismatch."""
        events = [
            StartElement("item"),
            StartElement("title"),
            Characters("T"),
            StartElement("link"),
            EndElement("title", position=Position(3, 7)),
            EndElement("link"),
            EndElement("item"),
            EndDocument(),
        ]

        with pytest.raises(ContextMismatchError) as exc_info:
            FeedStateMachine().run(events)

        error = exc_info.value
        assert error.expected is Context.LINK
        assert error.found is Context.TITLE
        assert (error.row, error.column) == (3, 7)
        assert isinstance(error, StructuralError)

    def test_mismatch_discards_completed_items(self):
        """Test no partial output survives a structural error."""
        events = [
            *element("item", element("title", "fine")),
            StartElement("item"),
            StartElement("description"),
            EndElement("item"),
            EndDocument(),
        ]

        with pytest.raises(ContextMismatchError):
            FeedStateMachine().run(events)

    def test_position_falls_back_to_last_seen(self):
        """Test the error carries the latest known position."""
        events = [
            StartElement("item", position=Position(2, 1)),
            StartElement("title", position=Position(4, 3)),
            EndElement("item"),
        ]

        with pytest.raises(ContextMismatchError) as exc_info:
            FeedStateMachine().run(events)

        assert exc_info.value.row == 4

    def test_unknown_elements_never_checked(self):
        """Test unrecognized tags may close in any order."""
        events = document(
            element("item", [StartElement("b"), StartElement("i"), EndElement("b"), EndElement("i")])
        )

        assert FeedStateMachine().run(events) == [Item()]

    def test_close_with_empty_stack(self):
        """Test a recognized close with nothing open is reported."""
        events = [StartElement("rss"), EndElement("title"), EndDocument()]

        with pytest.raises(UnbalancedCloseError) as exc_info:
            FeedStateMachine().run(events)

        assert exc_info.value.found is Context.TITLE

    def test_unterminated_context_permissive(self):
        """Test open elements at end of document are accepted by default."""
        events = [StartElement("item"), StartElement("title"), Characters("x"), EndDocument()]

        machine = FeedStateMachine()
        items = machine.run(events)

        assert items == []
        assert [a.kind for a in machine.anomalies] == ["unterminated-context"]

    def test_unterminated_context_strict(self):
        """Test strict mode rejects open elements at end of document."""
        events = [StartElement("item"), StartElement("title"), EndDocument()]

        with pytest.raises(UnterminatedContextError) as exc_info:
            FeedStateMachine(strict=True).run(events)

        assert exc_info.value.open_contexts == [Context.ITEM, Context.TITLE]

    def test_strict_accepts_balanced_document(self):
        """Test strict mode passes a well-nested document."""
        events = document(element("item", element("title", "A")))

        assert len(FeedStateMachine(strict=True).run(events)) == 1

    def test_event_source_error_propagates(self):
        """Test an error raised by the source aborts the run."""

        def source():
            yield from element("item", element("title", "A"))
            raise TokenizerError("boom", 9, 2)

        with pytest.raises(TokenizerError) as exc_info:
            FeedStateMachine().run(source())

        assert exc_info.value.row == 9
