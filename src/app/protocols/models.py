"""Modelos de fronteira do pipeline de registro (ping)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class PingEvent:
    """Evento canônico extraído do webhook do GitHub."""

    event_kind: str
    repository_full_name: str
    description: str
    star_count: int


class RegistrationError(StrEnum):
    """Classificação das rejeições esperadas do registro."""

    MISSING_NAME = "missing_name"
    INVALID_NAME = "invalid_name"
    REPOSITORY_MISMATCH = "repository_mismatch"
    REPOSITORY_QUOTA_EXCEEDED = "repository_quota_exceeded"


@dataclass(frozen=True, slots=True)
class RegistrationOutcome:
    """Resultado transiente do pipeline: aceite ou rejeição classificada."""

    error: RegistrationError | None = None
    message: str = ""
    module: str = ""
    repository: str = ""

    @property
    def accepted(self) -> bool:
        return self.error is None

    @classmethod
    def reject(cls, error: RegistrationError, message: str) -> RegistrationOutcome:
        return cls(error=error, message=message)

    @classmethod
    def accept(cls, module: str, repository: str) -> RegistrationOutcome:
        return cls(module=module, repository=repository)
