"""
Errors raised while parsing a feed.

Every error here is fatal to the parse that raised it: the caller gets no
items at all, even when some were already complete.
"""

from typing import Optional, Sequence

from .schema import Context


class FeedParseError(Exception):
    """Base class for feed parsing failures."""

    def __init__(self, message: str, row: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.row = row
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.row is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.row})"
        return f"{self.message} (line {self.row}, column {self.column})"


class TokenizerError(FeedParseError):
    """The underlying XML tokenizer rejected the document."""


class StructuralError(FeedParseError):
    """Recognized elements are not properly nested."""


class ContextMismatchError(StructuralError):
    """A recognized closing tag does not match the innermost open context."""

    def __init__(
        self,
        expected: Context,
        found: Context,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Context mismatch: expected </{expected}> but found </{found}>",
            row,
            column,
        )


class UnbalancedCloseError(StructuralError):
    """A recognized closing tag arrived while no context was open."""

    def __init__(self, found: Context, row: Optional[int] = None, column: Optional[int] = None):
        self.found = found
        super().__init__(f"Unexpected </{found}> with no open element", row, column)


class UnterminatedContextError(StructuralError):
    """The document ended with recognized elements still open (strict mode)."""

    def __init__(
        self,
        open_contexts: Sequence[Context],
        row: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.open_contexts = list(open_contexts)
        names = ", ".join(f"<{c}>" for c in self.open_contexts)
        super().__init__(f"Document ended with unclosed elements: {names}", row, column)


__all__ = [
    "FeedParseError",
    "TokenizerError",
    "StructuralError",
    "ContextMismatchError",
    "UnbalancedCloseError",
    "UnterminatedContextError",
]
