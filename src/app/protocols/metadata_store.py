"""Protocolo para blobs de metadados por módulo."""

from __future__ import annotations

from typing import Protocol


class MetadataStoreProtocol(Protocol):
    """Contrato do Metadata Store Gateway.

    Blobs são endereçados por (módulo, chave), ex: ("ltest2", "versions.json").
    """

    async def read_metadata(self, name: str, key: str) -> bytes | None:
        """Lê o blob; None significa "ainda não criado"."""
        ...

    async def write_metadata(self, name: str, key: str, data: bytes) -> None:
        """Grava (ou substitui) o blob."""
        ...
