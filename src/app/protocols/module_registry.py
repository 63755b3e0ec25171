"""Protocolo para persistência de registros de módulos."""

from __future__ import annotations

from typing import Any, Protocol

from app.domain.module import ModuleRecord


class ModuleRegistryProtocol(Protocol):
    """Contrato do Registry Gateway.

    Implementações propagam StoreUnavailableError em falhas de backend.
    """

    async def get_module(self, name: str) -> ModuleRecord | None:
        """Busca módulo pelo nome exato."""
        ...

    async def save_module(self, record: ModuleRecord) -> None:
        """Cria ou sobrescreve o módulo (upsert por nome)."""
        ...

    async def count_modules_for_repository(self, repository: str) -> int:
        """Conta módulos vinculados ao repositório (case-insensitive)."""
        ...

    async def list_builds(self) -> list[dict[str, Any]]:
        """Lista a fila de builds (somente leitura)."""
        ...
