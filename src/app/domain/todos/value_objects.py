"""Value objects de ToDo: status e prioridade.

Conjuntos fechados: os valores válidos são fixos no código e
validados na construção. Entrada é normalizada (strip + lower + NFC).
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import StrEnum

from app.domain.errors import InvalidEnumValue


def normalize_enum_input(value: object) -> str:
    """Normaliza entrada textual para comparação com valores canônicos."""
    return unicodedata.normalize("NFC", str(value)).strip().lower()


class TaskStatusValue(StrEnum):
    """Estados do ciclo de vida de um ToDo."""

    BACKLOG = "backlog"
    A_FAZER = "a fazer"
    EM_PROGRESSO = "em progresso"
    FINALIZADO = "finalizado"
    VALIDACAO = "validação"
    CANCELADO = "cancelado"

    def __str__(self) -> str:
        return self.value


class TaskPriorityValue(StrEnum):
    """Níveis de prioridade de um ToDo."""

    BAIXA = "baixa"
    MEDIA = "média"
    ALTA = "alta"

    def __str__(self) -> str:
        return self.value


VALID_STATUSES: frozenset[str] = frozenset(status.value for status in TaskStatusValue)
VALID_PRIORITIES: frozenset[str] = frozenset(priority.value for priority in TaskPriorityValue)

STATUS_LABELS: dict[str, str] = {
    TaskStatusValue.BACKLOG: "Backlog",
    TaskStatusValue.A_FAZER: "A Fazer",
    TaskStatusValue.EM_PROGRESSO: "Em Progresso",
    TaskStatusValue.FINALIZADO: "Finalizado",
    TaskStatusValue.VALIDACAO: "Validação",
    TaskStatusValue.CANCELADO: "Cancelado",
}

# Uma vez em estado fechado, closed_at/closed_by ficam preenchidos
CLOSED_STATUSES: frozenset[str] = frozenset({
    TaskStatusValue.FINALIZADO,
    TaskStatusValue.CANCELADO,
})

ACTIONABLE_STATUSES: frozenset[str] = frozenset({
    TaskStatusValue.A_FAZER,
    TaskStatusValue.EM_PROGRESSO,
})

PRIORITY_LABELS: dict[str, str] = {
    TaskPriorityValue.BAIXA: "Baixa",
    TaskPriorityValue.MEDIA: "Média",
    TaskPriorityValue.ALTA: "Alta",
}

PRIORITY_COLORS: dict[str, str] = {
    TaskPriorityValue.BAIXA: "#22c55e",
    TaskPriorityValue.MEDIA: "#f59e0b",
    TaskPriorityValue.ALTA: "#ef4444",
}

# Ordem ascendente de urgência (alta primeiro)
PRIORITY_ORDER: dict[str, int] = {
    TaskPriorityValue.ALTA: 1,
    TaskPriorityValue.MEDIA: 2,
    TaskPriorityValue.BAIXA: 3,
}


@dataclass(frozen=True, slots=True)
class TaskStatus:
    """Status de um ToDo (imutável, comparado por valor)."""

    value: str

    def __post_init__(self) -> None:
        normalized = normalize_enum_input(self.value)
        if not TaskStatus.is_valid(normalized):
            raise InvalidEnumValue("status", self.value, TaskStatus.valid_values())
        object.__setattr__(self, "value", normalized)

    @property
    def label(self) -> str:
        return STATUS_LABELS[self.value]

    @property
    def is_closed(self) -> bool:
        return self.value in CLOSED_STATUSES

    @property
    def is_open(self) -> bool:
        return not self.is_closed

    @property
    def is_actionable(self) -> bool:
        return self.value in ACTIONABLE_STATUSES

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def is_valid(value: object) -> bool:
        return normalize_enum_input(value) in VALID_STATUSES

    @staticmethod
    def valid_values() -> list[str]:
        return [status.value for status in TaskStatusValue]

    @classmethod
    def coerce(cls, value: TaskStatus | str) -> TaskStatus:
        """Aceita instância pronta ou string crua."""
        return value if isinstance(value, TaskStatus) else cls(value)

    @classmethod
    def backlog(cls) -> TaskStatus:
        return cls(TaskStatusValue.BACKLOG)

    @classmethod
    def a_fazer(cls) -> TaskStatus:
        return cls(TaskStatusValue.A_FAZER)

    @classmethod
    def em_progresso(cls) -> TaskStatus:
        return cls(TaskStatusValue.EM_PROGRESSO)

    @classmethod
    def finalizado(cls) -> TaskStatus:
        return cls(TaskStatusValue.FINALIZADO)

    @classmethod
    def validacao(cls) -> TaskStatus:
        return cls(TaskStatusValue.VALIDACAO)

    @classmethod
    def cancelado(cls) -> TaskStatus:
        return cls(TaskStatusValue.CANCELADO)


@dataclass(frozen=True, slots=True)
class TaskPriority:
    """Prioridade de um ToDo (imutável, comparada por valor)."""

    value: str

    def __post_init__(self) -> None:
        normalized = normalize_enum_input(self.value)
        if not TaskPriority.is_valid(normalized):
            raise InvalidEnumValue("prioridade", self.value, TaskPriority.valid_values())
        object.__setattr__(self, "value", normalized)

    @property
    def label(self) -> str:
        return PRIORITY_LABELS[self.value]

    @property
    def color(self) -> str:
        return PRIORITY_COLORS[self.value]

    @property
    def order(self) -> int:
        return PRIORITY_ORDER[self.value]

    @property
    def is_high(self) -> bool:
        return self.value == TaskPriorityValue.ALTA

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def is_valid(value: object) -> bool:
        return normalize_enum_input(value) in VALID_PRIORITIES

    @staticmethod
    def valid_values() -> list[str]:
        return [priority.value for priority in TaskPriorityValue]

    @classmethod
    def coerce(cls, value: TaskPriority | str) -> TaskPriority:
        return value if isinstance(value, TaskPriority) else cls(value)

    @classmethod
    def baixa(cls) -> TaskPriority:
        return cls(TaskPriorityValue.BAIXA)

    @classmethod
    def media(cls) -> TaskPriority:
        return cls(TaskPriorityValue.MEDIA)

    @classmethod
    def alta(cls) -> TaskPriority:
        return cls(TaskPriorityValue.ALTA)
