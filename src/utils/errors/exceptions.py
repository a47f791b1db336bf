"""Exceções para falhas de infraestrutura (store, Firestore)."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""


class StoreError(InfrastructureError):
    """Falha de leitura/escrita primária em um repositório.

    Carrega a operação e a coleção para o log; a mensagem exposta ao
    usuário é genérica.
    """

    def __init__(self, operation: str, collection: str, message: str | None = None) -> None:
        self.operation = operation
        self.collection = collection
        super().__init__(message or "Falha ao acessar o armazenamento")
