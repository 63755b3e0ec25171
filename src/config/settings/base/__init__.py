"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.registry import (
    MetadataBackend,
    RegistryBackend,
    RegistrySettings,
    get_registry_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    "MetadataBackend",
    "RegistryBackend",
    # Registry
    "RegistrySettings",
    "get_base_settings",
    "get_registry_settings",
]
