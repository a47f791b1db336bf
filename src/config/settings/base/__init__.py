"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.auth import (
    DEFAULT_PRIVILEGED_ROLES,
    AuthSettings,
    get_auth_settings,
)
from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.store import (
    StoreBackend,
    StoreSettings,
    get_store_settings,
)

__all__ = [
    "DEFAULT_PRIVILEGED_ROLES",
    # Auth
    "AuthSettings",
    # Core
    "BaseSettings",
    "Environment",
    # Store
    "StoreBackend",
    "StoreSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_store_settings",
]
