"""Protocolos e contratos do core da aplicação."""

from .metadata_store import MetadataStoreProtocol
from .models import PingEvent, RegistrationError, RegistrationOutcome
from .module_registry import ModuleRegistryProtocol
from .validator import ModuleNameValidatorProtocol, ValidationError

__all__ = [
    "MetadataStoreProtocol",
    "ModuleNameValidatorProtocol",
    "ModuleRegistryProtocol",
    "PingEvent",
    "RegistrationError",
    "RegistrationOutcome",
    "ValidationError",
]
