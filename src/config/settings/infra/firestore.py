"""Settings do Firestore (registry de módulos).

Collections:
- modules: um documento por módulo, ID = nome do módulo
- builds: fila de builds, só lida por este serviço
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: Projeto do Firestore (vazio = usa GCP_PROJECT)
        collection_modules: Collection dos registros de módulos
        collection_builds: Collection da fila de builds
    """

    project_id: str = ""
    collection_modules: str = "modules"
    collection_builds: str = "builds"

    def effective_project(self, gcp_project: str) -> str:
        return self.project_id or gcp_project

    def validate(self, gcp_project: str) -> list[str]:
        """Valida projeto e nomes de collections.

        Args:
            gcp_project: GCP_PROJECT usado como fallback do projeto.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.effective_project(gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")

        if not self.collection_modules or not self.collection_builds:
            errors.append("FIRESTORE_COLLECTION_MODULES/BUILDS não podem ser vazios")
        elif self.collection_modules == self.collection_builds:
            errors.append("Módulos e builds precisam de collections distintas")

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_modules=os.getenv("FIRESTORE_COLLECTION_MODULES", "modules"),
        collection_builds=os.getenv("FIRESTORE_COLLECTION_BUILDS", "builds"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
