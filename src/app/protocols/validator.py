"""Protocolos de validação do nome do módulo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import RegistrationError


class ValidationError(Exception):
    """Erro de validação classificado (vira resposta 400 para o cliente)."""

    def __init__(self, error: RegistrationError, message: str) -> None:
        super().__init__(message)
        self.error = error
        self.message = message


class ModuleNameValidatorProtocol(Protocol):
    """Contrato mínimo: retorna o nome validado ou levanta ValidationError."""

    def __call__(self, name: str) -> str: ...
