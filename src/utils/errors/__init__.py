"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    StoreError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "StoreError",
]
