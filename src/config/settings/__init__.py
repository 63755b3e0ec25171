"""Agregador de settings do registry webhook.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    MetadataBackend,
    RegistryBackend,
    RegistrySettings,
    get_base_settings,
    get_registry_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    GCSSettings,
    get_firestore_settings,
    get_gcs_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "GCSSettings",
    "MetadataBackend",
    "RegistryBackend",
    "RegistrySettings",
    "get_base_settings",
    "get_firestore_settings",
    "get_gcs_settings",
    "get_registry_settings",
]
