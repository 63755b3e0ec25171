"""ModuleRecord - entrada do registry vinculada a um repositório GitHub.

O nome é o identificador imutável; o repositório é comparado sempre
em minúsculas e persistido já normalizado a cada ping aceito.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

# Único provedor de origem suportado hoje
ModuleType = Literal["github"]


class ModuleRecord(BaseModel):
    """Registro de módulo armazenado no Firestore."""

    name: str = Field(..., min_length=1, description="Nome único do módulo")
    type: ModuleType = "github"
    repository: str = Field(..., min_length=1, description="Repositório owner/name")
    description: str = ""
    star_count: int = Field(default=0, ge=0)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_null_description(cls, value: Any) -> Any:
        """Documentos gravados com description null viram string vazia."""
        return "" if value is None else value

    def is_bound_to(self, repository: str) -> bool:
        """Indica se o módulo pertence ao repositório (case-insensitive)."""
        return self.repository.lower() == repository.lower()

    def to_firestore_dict(self) -> dict[str, Any]:
        """Converte para dict compatível com Firestore."""
        return self.model_dump()

    @classmethod
    def from_firestore_dict(cls, data: dict[str, Any]) -> ModuleRecord:
        """Cria instância a partir de documento Firestore."""
        return cls.model_validate(data)
