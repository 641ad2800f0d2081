"""
Errors raised while parsing todo lines.

Every error is local to one line (or to one batch of lines for
AggregationError). Token-level problems never raise: an unrecognised token
simply becomes part of the title.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for all todo parsing errors."""

    kind = "parse_error"


class WhitespaceOnlyError(ParseError):
    """The line contains no tokens."""

    kind = "whitespace_only"

    def __init__(self, message: str = "todo: parse only whitespace"):
        super().__init__(message)


class EmptyInputError(WhitespaceOnlyError):
    """The line has zero length."""

    kind = "empty_input"

    def __init__(self, message: str = "todo: parse empty string"):
        super().__init__(message)


class CompletionMarkerOnlyError(ParseError):
    """The line holds the completion marker and nothing else."""

    kind = "completion_marker_only"

    def __init__(self, message: str = "todo: line contains only completion marker"):
        super().__init__(message)


class AggregationError(ParseError):
    """
    A line in a batch failed to parse.

    Attributes:
        line_number: 1-based line at which parsing stopped
        cause: The underlying ParseError
    """

    kind = "aggregation_failure"

    def __init__(self, line_number: int, cause: ParseError, source: Optional[str] = None):
        self.line_number = line_number
        self.cause = cause
        self.source = source
        message = f"{cause} on line {line_number}"
        if source:
            message += f" of {source}"
        super().__init__(message)
