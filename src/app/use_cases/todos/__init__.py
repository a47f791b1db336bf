"""Use cases de ToDo's."""

from .complete_todo import CompleteTodoUseCase
from .create_todo import CreateTodoInput, CreateTodoUseCase
from .delete_todo import DeleteTodoUseCase
from .get_todo import GetTodoUseCase
from .get_todo_stats import GetTodoStatsUseCase
from .list_teams import ListTeamsUseCase
from .list_todos import ListTodosUseCase
from .update_todo import UpdateTodoUseCase

__all__ = [
    "CompleteTodoUseCase",
    "CreateTodoInput",
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodoStatsUseCase",
    "GetTodoUseCase",
    "ListTeamsUseCase",
    "ListTodosUseCase",
    "UpdateTodoUseCase",
]
