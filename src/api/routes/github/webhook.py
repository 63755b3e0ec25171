"""Endpoint de webhook do GitHub para o registry de módulos.

Endpoints:
- POST /webhook/gh/{module}: evento de repositório vinculado ao módulo
- POST /webhook/gh/: mesmo endpoint sem nome (rejeitado com 400)

Fluxo (evento ping):
1. Decodifica corpo (JSON ou form base64) e normaliza o evento
2. Valida o nome do módulo
3. Aplica a política de registro e persiste
4. Responde JSON com sucesso ou erro classificado

Outros eventos (push, create) pertencem ao fluxo de builds e não são
processados aqui.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.github import GITHUB_EVENT_HEADER
from api.connectors.github.webhook.receive import MalformedPayloadError, decode_webhook_body
from api.normalizers.github import normalize_ping_event
from api.payload_builders.github import (
    build_error_response,
    build_info_response,
    build_registration_response,
)
from app.constants.registry import (
    MESSAGE_MALFORMED_PAYLOAD,
    MESSAGE_NOT_PING_EVENT,
    MESSAGE_STORE_UNAVAILABLE,
    PING_EVENT,
)
from app.observability import (
    correlation_id_from_headers,
    reset_correlation_id,
    set_correlation_id,
)
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from app.use_cases.github import RegisterModuleUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_register_use_case() -> RegisterModuleUseCase:
    """Obtém o use case de registro (lazy-loading)."""
    from app.bootstrap import get_register_module_use_case

    return get_register_module_use_case()


@router.post("/", response_model=None)
@router.post("/{module}", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebe evento do GitHub e executa o registro para eventos ping.

    Returns:
        JSONResponse com o resultado do registro ou erro.
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        event_kind = request.headers.get(GITHUB_EVENT_HEADER, "")
        module_name = request.path_params.get("module", "")

        if event_kind != PING_EVENT:
            logger.info(
                "webhook_event_ignored",
                extra={"provider": "github", "event_kind": event_kind},
            )
            return build_info_response(MESSAGE_NOT_PING_EVENT)

        raw_body = await request.body()
        try:
            payload = decode_webhook_body(raw_body, request.headers.get("content-type"))
            event = normalize_ping_event(payload, event_kind)
        except MalformedPayloadError as exc:
            logger.warning(
                "webhook_payload_malformed",
                extra={
                    "provider": "github",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return build_error_response(MESSAGE_MALFORMED_PAYLOAD, status.HTTP_400_BAD_REQUEST)

        logger.info(
            "webhook_received",
            extra={
                "provider": "github",
                "event_kind": event_kind,
                "payload_size": len(raw_body),
            },
        )

        try:
            outcome = await _get_register_use_case().execute(module_name, event)
        except StoreUnavailableError as exc:
            logger.exception(
                "webhook_store_unavailable",
                extra={"backend": exc.backend, "operation": exc.operation},
            )
            return build_error_response(
                MESSAGE_STORE_UNAVAILABLE,
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return build_registration_response(outcome)

    finally:
        reset_correlation_id(token)
