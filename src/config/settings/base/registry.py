"""Settings dos backends do registry.

Seleciona onde ficam os registros de módulos e os blobs de metadados.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RegistryBackend = Literal["memory", "firestore"]
MetadataBackend = Literal["memory", "gcs"]


@dataclass(frozen=True)
class RegistrySettings:
    """Configurações de backend do registry.

    Attributes:
        registry_backend: Backend dos registros de módulos (memory|firestore)
        metadata_backend: Backend dos blobs de metadados (memory|gcs)
    """

    registry_backend: RegistryBackend = "memory"
    metadata_backend: MetadataBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de backend.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.registry_backend not in ("memory", "firestore"):
            errors.append(f"REGISTRY_BACKEND inválido: {self.registry_backend}")

        if self.metadata_backend not in ("memory", "gcs"):
            errors.append(f"METADATA_BACKEND inválido: {self.metadata_backend}")

        if not base.is_development:
            if self.registry_backend == "memory":
                errors.append("REGISTRY_BACKEND=memory proibido em staging/production")
            if self.metadata_backend == "memory":
                errors.append("METADATA_BACKEND=memory proibido em staging/production")

        if self.registry_backend == "firestore" and not base.gcp_project:
            errors.append("REGISTRY_BACKEND=firestore requer GCP_PROJECT configurado")

        return errors


def _default_backends(environment: str) -> tuple[str, str]:
    if environment in ("staging", "production"):
        return "firestore", "gcs"
    return "memory", "memory"


def _load_registry_from_env() -> RegistrySettings:
    """Carrega RegistrySettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    default_registry, default_metadata = _default_backends(environment)
    registry_backend = os.getenv("REGISTRY_BACKEND", default_registry).lower()
    metadata_backend = os.getenv("METADATA_BACKEND", default_metadata).lower()
    return RegistrySettings(
        registry_backend=registry_backend,  # type: ignore[arg-type]
        metadata_backend=metadata_backend,  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_registry_settings() -> RegistrySettings:
    """Retorna instância cacheada de RegistrySettings."""
    return _load_registry_from_env()
