"""Configuração do pytest para a Otus Plataforma (ToDo's e Relatos)."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_store_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings são cacheadas; cada teste lê o ambiente do zero."""
    getters = (get_auth_settings, get_base_settings, get_firestore_settings, get_store_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
