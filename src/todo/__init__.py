"""
Parser, model and serializer for a minimal one-task-per-line todo format.

Main API:
    from todo import parse, from_reader, TaskList

    # Parse a single line
    task = parse("x Buy milk 2024-3-5 s:2024-3-1 @home +shopping")

    # Parse a whole file, then filter and sort it
    with open("todo.txt", "rb") as f:
        tasks = from_reader(f)
    for task in tasks.filter("@home").sorted_tasks():
        print(task)

    # Write a task back out
    line = task.unparse()
"""

from .errors import (
    AggregationError,
    CompletionMarkerOnlyError,
    EmptyInputError,
    ParseError,
    WhitespaceOnlyError,
)
from .models import (
    Task,
    TaskList,
    TaskOut,
    compare_tasks,
    filter_not_tasks,
    filter_tasks,
    matches,
    task_sort_key,
)
from .parsers import (
    TOKEN_RULES,
    classify_token,
    from_lines,
    from_reader,
    parse,
    parse_file,
    write_file,
)
from .utils import DATE_FORMAT, display, format_date, parse_date, unparse

__all__ = [
    # Models
    'Task',
    'TaskList',
    'TaskOut',
    # Parsing
    'parse',
    'classify_token',
    'TOKEN_RULES',
    'from_lines',
    'from_reader',
    'parse_file',
    'write_file',
    # Formatting
    'unparse',
    'display',
    'DATE_FORMAT',
    'parse_date',
    'format_date',
    # Ordering and queries
    'compare_tasks',
    'task_sort_key',
    'matches',
    'filter_tasks',
    'filter_not_tasks',
    # Errors
    'ParseError',
    'EmptyInputError',
    'WhitespaceOnlyError',
    'CompletionMarkerOnlyError',
    'AggregationError',
]
