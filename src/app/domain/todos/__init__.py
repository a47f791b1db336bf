"""Domínio de ToDo's: entidade Todo e value objects."""

from .todo import Todo
from .todo_patch import TodoPatch
from .todo_query import TodoFilters, TodoSort
from .value_objects import TaskPriority, TaskStatus

__all__ = [
    "TaskPriority",
    "TaskStatus",
    "Todo",
    "TodoFilters",
    "TodoPatch",
    "TodoSort",
]
