"""Erros de domínio de ToDo's e Relatos.

Erros são request-scoped e corrigíveis pelo usuário: a camada HTTP
decide o status code, os use cases apenas propagam.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainError(Exception):
    """Base para erros de regra de negócio."""


class ValidationError(DomainError):
    """Entrada obrigatória ausente ou inválida."""


class InvalidEnumValue(ValidationError):
    """Valor fora do conjunto permitido de um value object."""

    def __init__(
        self,
        field_name: str,
        provided_value: object,
        allowed_values: Iterable[str],
    ) -> None:
        self.field_name = field_name
        self.provided_value = provided_value
        self.allowed_values = tuple(allowed_values)
        super().__init__(
            f'Valor inválido para {field_name}: "{provided_value}". '
            f"Valores permitidos: {', '.join(self.allowed_values)}"
        )


class NotFound(DomainError):
    """Agregado referenciado não existe."""

    def __init__(self, entity: str, entity_id: object, message: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} não encontrado")


class PermissionDenied(DomainError):
    """Usuário sem permissão para a operação (nem autor, nem privilegiado)."""

    def __init__(self, message: str = "Acesso negado") -> None:
        super().__init__(message)


class InvalidStateTransition(DomainError):
    """Comportamento da entidade não aplicável ao estado atual."""


class AlreadyClosed(InvalidStateTransition):
    def __init__(self) -> None:
        super().__init__("Tarefa já está finalizada ou cancelada")


class NotClosed(InvalidStateTransition):
    def __init__(self) -> None:
        super().__init__("Tarefa já está aberta")


class MissingResolver(InvalidStateTransition):
    def __init__(self) -> None:
        super().__init__("É necessário informar quem está resolvendo o relato")


__all__ = [
    "AlreadyClosed",
    "DomainError",
    "InvalidEnumValue",
    "InvalidStateTransition",
    "MissingResolver",
    "NotClosed",
    "NotFound",
    "PermissionDenied",
    "ValidationError",
]
