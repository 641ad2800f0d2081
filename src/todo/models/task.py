"""
Core task data models.

A Task is built once by the parser from one todo line and is read-only
afterwards. Sorting and filtering reorder or select tasks, they never change
them. Task equality covers the semantic fields only; raw and line_number
record where the task came from and are ignored by ==.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from functools import cmp_to_key
from typing import Iterable, Optional, Tuple

from ..utils.formatting import display, unparse


@dataclass(frozen=True)
class Task:
    """A single item in a todo list."""

    title: str = ""
    start: Optional[date] = None
    due: Optional[date] = None
    tags: Tuple[str, ...] = ()
    contexts: Tuple[str, ...] = ()
    done: bool = False
    raw: str = field(default="", compare=False)
    line_number: int = field(default=0, compare=False)

    def matches(self, query: str) -> bool:
        """True if the task matches a single query (see matches())."""
        return matches(self, query)

    def unparse(self) -> str:
        """Render the task as a parseable todo line."""
        return unparse(self)

    def __str__(self) -> str:
        return display(self)


def _compare_dates(a: Optional[date], b: Optional[date]) -> int:
    # A missing date sorts after any present one
    if a == b:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    return -1 if a < b else 1


def _compare_done(a: Task, b: Task) -> int:
    if a.done == b.done:
        return 0
    return 1 if a.done else -1


def _compare_due(a: Task, b: Task) -> int:
    return _compare_dates(a.due, b.due)


def _compare_start(a: Task, b: Task) -> int:
    return _compare_dates(a.start, b.start)


def _compare_title(a: Task, b: Task) -> int:
    if a.title == b.title:
        return 0
    return -1 if a.title < b.title else 1


# Sort keys in priority order; the first non-zero result decides
SORT_KEYS = (_compare_done, _compare_due, _compare_start, _compare_title)


def compare_tasks(a: Task, b: Task) -> int:
    """
    Three-way comparison of two tasks for display order.

    Open tasks come before done tasks, then earlier due dates, then earlier
    start dates, then titles alphabetically. Tasks without a date sort after
    tasks that have one.

    Returns:
        Negative if a sorts first, positive if b does, 0 if they tie
    """
    for key in SORT_KEYS:
        result = key(a, b)
        if result:
            return result
    return 0


task_sort_key = cmp_to_key(compare_tasks)


def matches(task: Task, query: str) -> bool:
    """
    Test a task against a single query.

    - "" matches every task
    - "@name" matches tasks with context "name" exactly
    - "+name" matches tasks with tag "name" exactly
    - anything else is a case-sensitive substring match on the title
    """
    if not query:
        return True
    if query[0] == "@":
        return query[1:] in task.contexts
    if query[0] == "+":
        return query[1:] in task.tags
    return query in task.title


class TaskList(list):
    """An ordered list of tasks, usually one per line of a todo file."""

    def sort(self, *, reverse: bool = False) -> None:  # type: ignore[override]
        """Sort in place by display order (see compare_tasks)."""
        super().sort(key=task_sort_key, reverse=reverse)

    def sorted_tasks(self) -> TaskList:
        """Return a new list in display order, leaving this one untouched."""
        return TaskList(sorted(self, key=task_sort_key))

    def filter(self, query: str) -> TaskList:
        """Return the tasks matching query, in their current order."""
        return TaskList(t for t in self if matches(t, query))

    def filter_not(self, query: str) -> TaskList:
        """Return the tasks not matching query, in their current order."""
        return TaskList(t for t in self if not matches(t, query))

    def unparse(self) -> str:
        """Render every task as a todo line, one per line."""
        return "".join(t.unparse() + "\n" for t in self)


def filter_tasks(tasks: Iterable[Task], query: str) -> TaskList:
    """Return the tasks matching query, preserving order."""
    return TaskList(tasks).filter(query)


def filter_not_tasks(tasks: Iterable[Task], query: str) -> TaskList:
    """Return the tasks not matching query, preserving order."""
    return TaskList(tasks).filter_not(query)
