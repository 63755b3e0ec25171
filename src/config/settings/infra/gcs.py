"""Settings do Google Cloud Storage.

Configurações do bucket de metadados por módulo (ex: versions.json).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class GCSSettings:
    """Configurações do Google Cloud Storage.

    Attributes:
        bucket_metadata: Bucket onde ficam os blobs `<modulo>/meta/<chave>`
    """

    bucket_metadata: str = ""

    def validate(self, metadata_backend: str) -> list[str]:
        """Valida configurações do GCS.

        Args:
            metadata_backend: Backend de metadados em uso.

        Returns:
            Lista de erros de validação.
        """
        # Bucket só é obrigatório quando o backend de metadados é GCS
        if metadata_backend == "gcs" and not self.bucket_metadata:
            return ["GCS_BUCKET_METADATA deve estar configurado"]
        return []


def _load_gcs_from_env() -> GCSSettings:
    """Carrega GCSSettings de variáveis de ambiente."""
    return GCSSettings(
        bucket_metadata=os.getenv("GCS_BUCKET_METADATA", ""),
    )


@lru_cache(maxsize=1)
def get_gcs_settings() -> GCSSettings:
    """Retorna instância cacheada de GCSSettings."""
    return _load_gcs_from_env()
