"""Settings do backend de persistência dos repositórios."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "firestore"]

VALID_STORE_BACKENDS = frozenset({"memory", "firestore"})


@dataclass(frozen=True)
class StoreSettings:
    """Configurações dos repositórios de ToDo's e Relatos.

    Attributes:
        backend: memory (dev/testes) ou firestore
    """

    backend: StoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida backend; memory é proibido fora de development."""
        errors: list[str] = []

        if self.backend not in VALID_STORE_BACKENDS:
            errors.append(f"STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("STORE_BACKEND=memory proibido em staging/production")

        return errors


def _load_store_from_env() -> StoreSettings:
    backend_str = os.getenv("STORE_BACKEND", "memory").lower()
    backend: StoreBackend = backend_str if backend_str in VALID_STORE_BACKENDS else "memory"
    return StoreSettings(backend=backend)


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_store_from_env()
