"""
Parser for todo lines.

Main API:
    parse(line)          -> Task
    from_lines(lines)    -> TaskList
    from_reader(stream)  -> TaskList
    parse_file(path)     -> TaskList
    write_file(path, tasks) -> None

Line format (tokens may appear in any order):

    [x ][free text][DATE][s:DATE][@context ...][+tag ...]

Each whitespace-separated token is classified by the first rule in
TOKEN_RULES that accepts it. A token no rule accepts becomes title text, so
no token is ever dropped and no single token can make a line fail.
"""

import logging
import re
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Literal, Optional, Tuple, Union

from ..errors import (
    AggregationError,
    CompletionMarkerOnlyError,
    EmptyInputError,
    ParseError,
    WhitespaceOnlyError,
)
from ..models.task import Task, TaskList
from ..utils.dates import parse_date
from ..utils.formatting import COMPLETION_MARKER

log = logging.getLogger(__name__)

TokenKind = Literal["due", "context", "tag", "start", "title"]
Classified = Tuple[TokenKind, Union[str, date]]
TokenRule = Callable[[str], Optional[Classified]]

CONTEXT_PREFIX = "@"
TAG_PREFIX = "+"
START_PREFIX = "s:"

# Runs of non-space characters. \x1c-\x1f count as text, not separators
FIELD_RE = re.compile(r"(?:\S|[\x1c-\x1f])+")

# Bytes that are not valid UTF-8 survive a read/write round trip
ENCODING_ERRORS = "surrogateescape"


# ---------------------------------------------------------------------------
# Token rules
# ---------------------------------------------------------------------------

def _due_rule(token: str) -> Optional[Classified]:
    due = parse_date(token)
    if due is None:
        return None
    return "due", due


def _context_rule(token: str) -> Optional[Classified]:
    # A bare "@" is ordinary text
    if token.startswith(CONTEXT_PREFIX) and len(token) > len(CONTEXT_PREFIX):
        return "context", token[len(CONTEXT_PREFIX):]
    return None


def _tag_rule(token: str) -> Optional[Classified]:
    if token.startswith(TAG_PREFIX) and len(token) > len(TAG_PREFIX):
        return "tag", token[len(TAG_PREFIX):]
    return None


def _start_rule(token: str) -> Optional[Classified]:
    if not token.startswith(START_PREFIX):
        return None
    start = parse_date(token[len(START_PREFIX):])
    if start is None:
        return None
    return "start", start


# Checked in order; the first rule returning a result wins
TOKEN_RULES: Tuple[TokenRule, ...] = (_due_rule, _context_rule, _tag_rule, _start_rule)


def classify_token(token: str) -> Classified:
    """
    Classify a single token.

    Args:
        token: A whitespace-free token

    Returns:
        (kind, value) where kind is one of "due", "context", "tag", "start",
        "title". Dates are returned as date objects, contexts and tags without
        their prefix, and title tokens verbatim.
    """
    for rule in TOKEN_RULES:
        result = rule(token)
        if result is not None:
            return result
    return "title", token


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------

def parse(line: str) -> Task:
    """
    Parse one todo line into a Task.

    line_number is left at 0; it is assigned by from_lines().

    Raises:
        EmptyInputError: line is ""
        WhitespaceOnlyError: line has no tokens
        CompletionMarkerOnlyError: line is just the completion marker
    """
    if len(line) == 0:
        raise EmptyInputError()

    tokens = FIELD_RE.findall(line)
    if not tokens:
        raise WhitespaceOnlyError()

    done = tokens[0] == COMPLETION_MARKER
    if done:
        tokens = tokens[1:]
        if not tokens:
            raise CompletionMarkerOnlyError()

    fields: Dict[str, object] = {"due": None, "start": None}
    title: List[str] = []
    contexts: List[str] = []
    tags: List[str] = []

    for token in tokens:
        kind, value = classify_token(token)
        if kind == "context":
            contexts.append(value)
        elif kind == "tag":
            tags.append(value)
        elif kind == "title":
            title.append(value)
        else:
            # Later dates overwrite earlier ones
            fields[kind] = value

    return Task(
        title=" ".join(title),
        start=fields["start"],
        due=fields["due"],
        tags=tuple(tags),
        contexts=tuple(contexts),
        done=done,
        raw=line,
    )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def from_lines(lines: Iterable[str], source: Optional[str] = None) -> TaskList:
    """
    Parse a sequence of lines into a TaskList.

    Line numbers start at 1 and count every line, blank ones included. Blank
    lines are not skipped: they fail to parse like any other bad line.

    Args:
        lines: Lines without their trailing newline
        source: Optional name of the input (e.g. a file path) for error messages

    Raises:
        AggregationError: on the first line that fails to parse. No partial
            list is returned.
    """
    tasks = TaskList()
    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            task = parse(line)
        except ParseError as e:
            log.warning("Stopped at line %d%s: %s", line_number,
                        f" of {source}" if source else "", e)
            raise AggregationError(line_number, e, source) from e
        tasks.append(replace(task, line_number=line_number))
    log.debug("Parsed %d task(s) from %d line(s)", len(tasks), line_number)
    return tasks


def _split_lines(stream: Iterable[Union[str, bytes]]) -> Iterable[str]:
    """Yield lines from a text or binary stream without line terminators."""
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors=ENCODING_ERRORS)
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def from_reader(stream, source: Optional[str] = None) -> TaskList:
    """
    Parse every line of a readable stream into a TaskList.

    Accepts text streams and binary streams (decoded as UTF-8; invalid bytes
    are kept as surrogate escapes and restored by write_file). Lines are
    split on "\\n" and a single trailing "\\r" is dropped.

    Raises:
        AggregationError: see from_lines()
    """
    return from_lines(_split_lines(stream), source=source)


def parse_file(file_path: Path) -> TaskList:
    """Parse a todo file into a TaskList."""
    # Binary mode so only "\n" ends a line
    with open(file_path, "rb") as f:
        return from_reader(f, source=str(file_path))


def write_file(file_path: Path, tasks: Iterable[Task]) -> None:
    """
    Serialize tasks back to a todo file, one line per task.

    The output is canonical (see utils.formatting.unparse), not a copy of the
    original text.
    """
    Path(file_path).write_text(
        TaskList(tasks).unparse(), encoding="utf-8", errors=ENCODING_ERRORS
    )
