"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import Any

from app.domain.module import ModuleRecord
from app.protocols.metadata_store import MetadataStoreProtocol
from app.protocols.module_registry import ModuleRegistryProtocol


class MemoryModuleRegistry(ModuleRegistryProtocol):
    """Registry de módulos em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._modules: dict[str, dict[str, Any]] = {}  # name -> documento
        self._builds: list[dict[str, Any]] = []

    async def get_module(self, name: str) -> ModuleRecord | None:
        data = self._modules.get(name)
        if data is None:
            return None
        return ModuleRecord.from_firestore_dict(dict(data))

    async def save_module(self, record: ModuleRecord) -> None:
        self._modules[record.name] = record.to_firestore_dict()

    async def count_modules_for_repository(self, repository: str) -> int:
        target = repository.lower()
        return sum(1 for data in self._modules.values() if data["repository"].lower() == target)

    async def list_builds(self) -> list[dict[str, Any]]:
        return list(self._builds)

    def delete_module(self, name: str) -> bool:
        """Remove módulo (apenas para testes)."""
        return self._modules.pop(name, None) is not None

    def clear(self) -> None:
        """Remove todos os módulos e builds (apenas para testes)."""
        self._modules.clear()
        self._builds.clear()


class MemoryMetadataStore(MetadataStoreProtocol):
    """Blobs de metadados em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._blobs: dict[tuple[str, str], bytes] = {}

    async def read_metadata(self, name: str, key: str) -> bytes | None:
        return self._blobs.get((name, key))

    async def write_metadata(self, name: str, key: str, data: bytes) -> None:
        self._blobs[(name, key)] = bytes(data)

    def delete_metadata(self, name: str, key: str) -> bool:
        """Remove blob (apenas para testes)."""
        return self._blobs.pop((name, key), None) is not None
