"""Settings de autorização (papéis privilegiados).

A autenticação fica no gateway; aqui só se decide quem pode editar
catálogos e relatos de terceiros.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_PRIVILEGED_ROLES: frozenset[str] = frozenset({"dev", "director", "admin", "leader"})


@dataclass(frozen=True)
class AuthSettings:
    """Configurações de autorização.

    Attributes:
        privileged_roles: Papéis com acesso administrativo
    """

    privileged_roles: frozenset[str] = field(default_factory=lambda: DEFAULT_PRIVILEGED_ROLES)

    def is_privileged(self, role: str | None) -> bool:
        return bool(role) and role.strip().lower() in self.privileged_roles

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.privileged_roles:
            errors.append("PRIVILEGED_ROLES não pode ser vazio")
        return errors


def _parse_roles(raw: str) -> frozenset[str]:
    return frozenset(role.strip().lower() for role in raw.split(",") if role.strip())


def _load_auth_from_env() -> AuthSettings:
    raw = os.getenv("PRIVILEGED_ROLES", "")
    return AuthSettings(privileged_roles=_parse_roles(raw) if raw else DEFAULT_PRIVILEGED_ROLES)


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
