"""Validação do nome de módulo recebido no path do webhook."""

from __future__ import annotations

import re

from app.constants.registry import (
    MESSAGE_INVALID_NAME,
    MESSAGE_MISSING_NAME,
    VALID_MODULE_NAME_PATTERN,
)
from app.protocols.models import RegistrationError
from app.protocols.validator import ValidationError

_VALID_MODULE_NAME = re.compile(VALID_MODULE_NAME_PATTERN)


def validate_module_name(name: str | None) -> str:
    """Valida presença e sintaxe do nome do módulo.

    Args:
        name: Último segmento do path (pode ser vazio).

    Raises:
        ValidationError: MISSING_NAME se vazio, INVALID_NAME se fora da sintaxe.

    Returns:
        O próprio nome, sem alteração de caixa.
    """
    if not name:
        raise ValidationError(RegistrationError.MISSING_NAME, MESSAGE_MISSING_NAME)
    if not _VALID_MODULE_NAME.fullmatch(name):
        raise ValidationError(RegistrationError.INVALID_NAME, MESSAGE_INVALID_NAME)
    return name
