"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_module_registry: Registry de módulos usando Firestore
    - gcs_metadata_store: Blobs de metadados usando Google Cloud Storage
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_module_registry import FirestoreModuleRegistry
from app.infra.stores.gcs_metadata_store import GCSMetadataStore
from app.infra.stores.memory_stores import MemoryMetadataStore, MemoryModuleRegistry

__all__ = [
    # Firestore
    "FirestoreModuleRegistry",
    # GCS
    "GCSMetadataStore",
    # Memory (dev/test)
    "MemoryMetadataStore",
    "MemoryModuleRegistry",
]
