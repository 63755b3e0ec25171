"""Builders das respostas JSON do webhook de registro.

Formato do contrato:
- rejeição: {"success": false, "error": "<mensagem>"} com status 400
- aceite:   {"success": true, "data": {"module": ..., "repository": ...}} com 200
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import status
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from app.protocols.models import RegistrationOutcome


def build_registration_body(outcome: RegistrationOutcome) -> dict[str, Any]:
    """Constrói o corpo JSON para o resultado do registro."""
    if not outcome.accepted:
        return {"success": False, "error": outcome.message}
    return {
        "success": True,
        "data": {"module": outcome.module, "repository": outcome.repository},
    }


def build_registration_response(outcome: RegistrationOutcome) -> JSONResponse:
    """Constrói a resposta HTTP (JSON compacto) para o resultado do registro."""
    status_code = status.HTTP_200_OK if outcome.accepted else status.HTTP_400_BAD_REQUEST
    return JSONResponse(content=build_registration_body(outcome), status_code=status_code)


def build_error_response(message: str, status_code: int) -> JSONResponse:
    """Resposta de erro fora do fluxo de registro (payload, infraestrutura)."""
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status_code,
    )


def build_info_response(info: str) -> JSONResponse:
    """Resposta 200 para eventos reconhecidos mas não tratados aqui."""
    return JSONResponse(
        content={"success": False, "info": info},
        status_code=status.HTTP_200_OK,
    )
