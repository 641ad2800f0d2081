"""JSON representation of tasks for machine-readable output."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from .task import Task


class TaskOut(BaseModel):
    line_number: int
    done: bool
    title: str
    due: Optional[date] = None
    start: Optional[date] = None
    contexts: List[str] = []
    tags: List[str] = []
    raw: str = ""

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls(
            line_number=task.line_number,
            done=task.done,
            title=task.title,
            due=task.due,
            start=task.start,
            contexts=list(task.contexts),
            tags=list(task.tags),
            raw=task.raw,
        )
