"""VersionsMetadata - blob `versions.json` de cada módulo.

Criado vazio no registro do módulo; apenas os builds (fora deste
serviço) acrescentam versões depois.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

VERSIONS_METADATA_KEY = "versions.json"


class VersionsMetadata(BaseModel):
    """Versões publicadas de um módulo."""

    latest: str | None = None
    versions: list[str] = Field(default_factory=list)

    def to_bytes(self) -> bytes:
        """Serializa para JSON UTF-8, no formato lido pelos builds."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> VersionsMetadata:
        """Desserializa o conteúdo bruto do blob."""
        return cls.model_validate_json(data)
