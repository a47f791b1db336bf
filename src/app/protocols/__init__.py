"""Protocolos e contratos do core da aplicação."""

from .relato_repository import RelatoRepositoryProtocol
from .todo_repository import TodoRepositoryProtocol

__all__ = [
    "RelatoRepositoryProtocol",
    "TodoRepositoryProtocol",
]
