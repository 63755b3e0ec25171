"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class StoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar um store externo.

    Attributes:
        backend: Backend que falhou (ex: "firestore", "gcs").
        operation: Operação interrompida (ex: "get_module").
    """

    def __init__(self, backend: str, operation: str) -> None:
        super().__init__(f"{backend} indisponível durante {operation}")
        self.backend = backend
        self.operation = operation


class FirestoreUnavailableError(StoreUnavailableError):
    """Falha de indisponibilidade ao acessar Firestore."""

    def __init__(self, operation: str) -> None:
        super().__init__("firestore", operation)


class StorageUnavailableError(StoreUnavailableError):
    """Falha de indisponibilidade ao acessar o bucket de metadados (GCS)."""

    def __init__(self, operation: str) -> None:
        super().__init__("gcs", operation)
