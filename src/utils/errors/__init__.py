"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    StorageUnavailableError,
    StoreUnavailableError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "StorageUnavailableError",
    "StoreUnavailableError",
]
