"""
Canonical rendering of tasks.

unparse() is the single source of truth for how a task is written back to a
todo line. The output is not guaranteed to match the original line, but it
always parses back to an equal task.

display() is a tab-separated row meant for tabular or debug output only.
"""

from typing import TYPE_CHECKING

from .dates import format_date

if TYPE_CHECKING:
    from ..models.task import Task

COMPLETION_MARKER = "x"


def unparse(task: "Task") -> str:
    """
    Render a task as a parseable todo line.

    Field order: completion marker, title, due date, start date, contexts,
    tags.
    """
    line = ""
    if task.done:
        line += COMPLETION_MARKER + " "
    line += task.title
    if task.due is not None:
        line += " " + format_date(task.due)
    if task.start is not None:
        line += " s:" + format_date(task.start)
    for context in task.contexts:
        line += " @" + context
    for tag in task.tags:
        line += " +" + tag
    return line


def display(task: "Task") -> str:
    """
    Render a task as a tab-separated row.

    Columns: line number, done flag ("x" or ""), title, due, start, contexts,
    tags. The row ends with a trailing tab.
    """
    columns = [
        str(task.line_number),
        COMPLETION_MARKER if task.done else "",
        task.title,
        format_date(task.due) if task.due is not None else "",
        format_date(task.start) if task.start is not None else "",
        ", ".join(task.contexts),
        ", ".join(task.tags),
    ]
    return "\t".join(columns) + "\t"
