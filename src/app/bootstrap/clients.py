"""Factories de clientes Google — Firestore e Cloud Storage.

Imports das bibliotecas são locais para que o modo memória (dev/test)
não dependa de credenciais GCP.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.storage import Bucket
    from google.cloud.storage import Client as StorageClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Projeto: FIRESTORE_PROJECT_ID, com fallback para GCP_PROJECT; vazio
    deixa o client resolver pelo ambiente (ADC).
    """
    from google.cloud import firestore

    gcp_project = get_base_settings().gcp_project
    project_id = get_firestore_settings().effective_project(gcp_project) or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


@lru_cache(maxsize=1)
def create_storage_client() -> StorageClient:
    """Cria cliente do Cloud Storage (singleton)."""
    from google.cloud import storage

    project_id = get_base_settings().gcp_project or None
    client = storage.Client(project=project_id)
    logger.info("storage_client_created", extra={"project": project_id})
    return client


def create_metadata_bucket(bucket_name: str) -> Bucket:
    """Resolve o bucket de metadados sem chamada de rede.

    Raises:
        ValueError: Se o nome do bucket não estiver configurado
    """
    if not bucket_name:
        msg = "GCS_BUCKET_METADATA não configurado"
        raise ValueError(msg)
    return create_storage_client().bucket(bucket_name)
