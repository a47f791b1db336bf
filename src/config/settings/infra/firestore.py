"""Settings do Firestore (coleções dos repositórios)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        database: Database do Firestore ("(default)" quando vazio)
        collection_*: Nomes das coleções usadas pelos repositórios
    """

    project_id: str = ""
    database: str = ""
    collection_tasks: str = "tasks"
    collection_users: str = "users_otus"
    collection_projects: str = "projects"
    collection_teams: str = "teams"
    collection_agenda_tasks: str = "agenda_tasks"
    collection_agenda_projects: str = "agenda_projects"
    collection_relatos: str = "relatos"
    collection_relato_tipos: str = "relato_tipos"
    collection_relato_prioridades: str = "relato_prioridades"
    collection_counters: str = "counters"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.
        """
        errors: list[str] = []
        if not (self.project_id or gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")
        return errors


def _env(name: str, default: str) -> str:
    return os.getenv(f"FIRESTORE_COLLECTION_{name}", default)


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        database=os.getenv("FIRESTORE_DATABASE", ""),
        collection_tasks=_env("TASKS", "tasks"),
        collection_users=_env("USERS", "users_otus"),
        collection_projects=_env("PROJECTS", "projects"),
        collection_teams=_env("TEAMS", "teams"),
        collection_agenda_tasks=_env("AGENDA_TASKS", "agenda_tasks"),
        collection_agenda_projects=_env("AGENDA_PROJECTS", "agenda_projects"),
        collection_relatos=_env("RELATOS", "relatos"),
        collection_relato_tipos=_env("RELATO_TIPOS", "relato_tipos"),
        collection_relato_prioridades=_env("RELATO_PRIORIDADES", "relato_prioridades"),
        collection_counters=_env("COUNTERS", "counters"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
