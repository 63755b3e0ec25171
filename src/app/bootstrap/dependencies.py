"""Factories de stores e use cases baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.github import validate_module_name
from app.bootstrap.clients import create_firestore_client, create_metadata_bucket
from app.infra.stores import (
    FirestoreModuleRegistry,
    GCSMetadataStore,
    MemoryMetadataStore,
    MemoryModuleRegistry,
)
from app.use_cases.github import RegisterModuleUseCase
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_gcs_settings,
    get_registry_settings,
)

if TYPE_CHECKING:
    from app.protocols.metadata_store import MetadataStoreProtocol
    from app.protocols.module_registry import ModuleRegistryProtocol

logger = logging.getLogger(__name__)


def create_module_registry() -> ModuleRegistryProtocol:
    """Cria o Registry Gateway baseado na configuração."""
    backend = get_registry_settings().registry_backend

    if backend == "firestore":
        firestore_settings = get_firestore_settings()
        registry = FirestoreModuleRegistry(
            create_firestore_client(),
            modules_collection=firestore_settings.collection_modules,
            builds_collection=firestore_settings.collection_builds,
        )
        logger.info("module_registry_created", extra={"backend": "firestore"})
        return registry

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_registry_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("module_registry_created", extra={"backend": "memory"})
        return MemoryModuleRegistry()

    msg = f"REGISTRY_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_metadata_store() -> MetadataStoreProtocol:
    """Cria o Metadata Store Gateway baseado na configuração."""
    backend = get_registry_settings().metadata_backend

    if backend == "gcs":
        store = GCSMetadataStore(create_metadata_bucket(get_gcs_settings().bucket_metadata))
        logger.info("metadata_store_created", extra={"backend": "gcs"})
        return store

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_metadata_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("metadata_store_created", extra={"backend": "memory"})
        return MemoryMetadataStore()

    msg = f"METADATA_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_register_module_use_case() -> RegisterModuleUseCase:
    """Cria o use case de registro com os stores configurados."""
    return RegisterModuleUseCase(
        registry=create_module_registry(),
        metadata_store=create_metadata_store(),
        name_validator=validate_module_name,
    )
