"""Agregador de settings da plataforma Otus.

Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PRIVILEGED_ROLES,
    AuthSettings,
    BaseSettings,
    Environment,
    StoreBackend,
    StoreSettings,
    get_auth_settings,
    get_base_settings,
    get_store_settings,
)
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    "DEFAULT_PRIVILEGED_ROLES",
    "AuthSettings",
    "BaseSettings",
    "Environment",
    "FirestoreSettings",
    "StoreBackend",
    "StoreSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_firestore_settings",
    "get_store_settings",
]
