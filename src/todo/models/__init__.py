from .task import (
    Task,
    TaskList,
    compare_tasks,
    filter_not_tasks,
    filter_tasks,
    matches,
    task_sort_key,
)
from .schema import TaskOut

__all__ = [
    "Task",
    "TaskList",
    "TaskOut",
    "compare_tasks",
    "filter_tasks",
    "filter_not_tasks",
    "matches",
    "task_sort_key",
]
