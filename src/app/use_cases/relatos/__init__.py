"""Use cases de Relatos e dos catálogos de tipo/prioridade."""

from .catalog import (
    CreateCatalogEntryInput,
    CreatePrioridadeUseCase,
    CreateTipoUseCase,
    ListPrioridadesUseCase,
    ListTiposUseCase,
    UpdatePrioridadeUseCase,
    UpdateTipoUseCase,
)
from .create_relato import CreateRelatoInput, CreateRelatoUseCase
from .delete_relato import DeleteRelatoUseCase
from .get_relato import GetRelatoUseCase
from .get_relato_stats import GetRelatoStatsUseCase
from .list_relatos import ListRelatosUseCase
from .update_relato import UpdateRelatoUseCase

__all__ = [
    "CreateCatalogEntryInput",
    "CreatePrioridadeUseCase",
    "CreateRelatoInput",
    "CreateRelatoUseCase",
    "CreateTipoUseCase",
    "DeleteRelatoUseCase",
    "GetRelatoStatsUseCase",
    "GetRelatoUseCase",
    "ListPrioridadesUseCase",
    "ListRelatosUseCase",
    "ListTiposUseCase",
    "UpdatePrioridadeUseCase",
    "UpdateRelatoUseCase",
]
