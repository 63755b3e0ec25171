"""Firestore Module Registry — registros de módulos e fila de builds.

Documentos da collection de módulos usam o nome do módulo como ID,
o que torna `save_module` um upsert por nome.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.module import ModuleRecord
from app.protocols.module_registry import ModuleRegistryProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

MODULES_COLLECTION = "modules"
BUILDS_COLLECTION = "builds"


class FirestoreModuleRegistry(ModuleRegistryProtocol):
    """Registry Gateway usando Firestore.

    Chamadas do client síncrono rodam em thread para não bloquear o loop.

    Args:
        firestore_client: Cliente Firestore
        modules_collection: Collection dos módulos (default: modules)
        builds_collection: Collection da fila de builds (default: builds)
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        modules_collection: str = MODULES_COLLECTION,
        builds_collection: str = BUILDS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._modules = modules_collection
        self._builds = builds_collection

    async def get_module(self, name: str) -> ModuleRecord | None:
        return await asyncio.to_thread(self._get_module_sync, name)

    async def save_module(self, record: ModuleRecord) -> None:
        await asyncio.to_thread(self._save_module_sync, record)

    async def count_modules_for_repository(self, repository: str) -> int:
        return await asyncio.to_thread(self._count_for_repository_sync, repository)

    async def list_builds(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._list_builds_sync)

    def _get_module_sync(self, name: str) -> ModuleRecord | None:
        try:
            doc = self._db.collection(self._modules).document(name).get()
        except Exception as exc:
            logger.error(
                "module_get_failed",
                extra={"module_name": name, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError("get_module") from exc
        if not doc.exists:
            return None
        return ModuleRecord.from_firestore_dict(doc.to_dict() or {})

    def _save_module_sync(self, record: ModuleRecord) -> None:
        try:
            self._db.collection(self._modules).document(record.name).set(
                record.to_firestore_dict()
            )
        except Exception as exc:
            logger.error(
                "module_save_failed",
                extra={"module_name": record.name, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError("save_module") from exc
        logger.debug("module_saved", extra={"module_name": record.name})

    def _count_for_repository_sync(self, repository: str) -> int:
        # Firestore não compara strings sem diferenciar caixa: varre a collection
        target = repository.lower()
        try:
            docs = self._db.collection(self._modules).select(["repository"]).stream()
            return sum(
                1
                for doc in docs
                if str((doc.to_dict() or {}).get("repository", "")).lower() == target
            )
        except Exception as exc:
            logger.error(
                "module_count_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError("count_modules_for_repository") from exc

    def _list_builds_sync(self) -> list[dict[str, Any]]:
        try:
            return [doc.to_dict() or {} for doc in self._db.collection(self._builds).stream()]
        except Exception as exc:
            logger.error("builds_list_failed", extra={"error_type": type(exc).__name__})
            raise FirestoreUnavailableError("list_builds") from exc
