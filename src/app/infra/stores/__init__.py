"""Stores: implementações concretas dos repositórios.

Módulos disponíveis:
    - memory_todo_repository / memory_relato_repository: em memória (dev/test)
    - firestore_todo_repository / firestore_relato_repository: Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_relato_repository import FirestoreRelatoRepository
from app.infra.stores.firestore_todo_repository import FirestoreTodoRepository
from app.infra.stores.memory_relato_repository import MemoryRelatoRepository
from app.infra.stores.memory_todo_repository import MemoryTodoRepository

__all__ = [
    # Firestore
    "FirestoreRelatoRepository",
    "FirestoreTodoRepository",
    # Memory (dev/test)
    "MemoryRelatoRepository",
    "MemoryTodoRepository",
]
