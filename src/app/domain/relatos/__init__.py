"""Domínio de Relatos (diário de projeto)."""

from .catalog import CatalogEntry, CatalogPatch
from .relato import Relato
from .relato_patch import RelatoPatch
from .value_objects import RelatoPrioridade, RelatoTipo

__all__ = [
    "CatalogEntry",
    "CatalogPatch",
    "Relato",
    "RelatoPatch",
    "RelatoPrioridade",
    "RelatoTipo",
]
