"""Base dos repositórios Firestore.

O SDK do Firestore é síncrono: toda chamada roda em thread via
asyncio.to_thread. Ids inteiros vêm de um documento contador
incrementado em transação (collection counters, um doc por tabela).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from google.cloud import firestore

from utils.errors import StoreError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.firestore import DocumentReference, Transaction

    from config.settings import FirestoreSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")

# Limite de documentos por chamada get_all
GET_ALL_CHUNK = 100


def document_key(doc_id: str) -> int | str:
    """Ids numéricos viram int, como as chaves usadas nos lookups."""
    return int(doc_id) if doc_id.isdigit() else doc_id


@firestore.transactional
def _increment_counter(transaction: Transaction, counter_ref: DocumentReference) -> int:
    snapshot = counter_ref.get(transaction=transaction)
    current = (snapshot.to_dict() or {}).get("value", 0) if snapshot.exists else 0
    next_value = int(current) + 1
    transaction.set(counter_ref, {"value": next_value}, merge=True)
    return next_value


class FirestoreRepositoryBase:
    """Helpers de acesso: thread offload, contador, leitura em lote."""

    def __init__(self, firestore_client: FirestoreClient, settings: FirestoreSettings) -> None:
        self._db = firestore_client
        self._settings = settings

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        return await asyncio.to_thread(func, *args)

    def _primary(self, operation: str, collection: str, func: Callable[[], T]) -> T:
        """Executa leitura/escrita principal; falha vira StoreError."""
        try:
            return func()
        except StoreError:
            raise
        except Exception as exc:
            logger.error(
                "firestore_operation_failed",
                extra={
                    "operation": operation,
                    "collection": collection,
                    "error_type": type(exc).__name__,
                },
            )
            raise StoreError(operation, collection) from exc

    def _next_id(self, collection: str) -> int:
        counter_ref = self._db.collection(self._settings.collection_counters).document(collection)
        return _increment_counter(self._db.transaction(), counter_ref)

    def _get_many(self, collection: str, ids: Iterable[K]) -> dict[K, dict[str, Any]]:
        """Lê documentos por id em lote; ids ausentes ficam fora do dict.

        Falha de leitura é logada e resulta em dict vazio (lookup auxiliar).
        """
        keys = {str(key): key for key in ids if key is not None and key != ""}
        if not keys:
            return {}
        refs = [self._db.collection(collection).document(doc_id) for doc_id in keys]
        found: dict[K, dict[str, Any]] = {}
        try:
            for start in range(0, len(refs), GET_ALL_CHUNK):
                for snapshot in self._db.get_all(refs[start : start + GET_ALL_CHUNK]):
                    if snapshot.exists:
                        key = keys[snapshot.id]
                        found[key] = {**(snapshot.to_dict() or {}), "id": key}
        except Exception as exc:
            logger.warning(
                "firestore_lookup_failed",
                extra={
                    "collection": collection,
                    "count": len(keys),
                    "error_type": type(exc).__name__,
                },
            )
            return {}
        return found

    def _stream(self, query: Any) -> list[dict[str, Any]]:
        """Linhas da query; o id do documento completa o corpo quando ausente."""
        rows = []
        for doc in query.stream():
            row = doc.to_dict() or {}
            row.setdefault("id", document_key(doc.id))
            rows.append(row)
        return rows
