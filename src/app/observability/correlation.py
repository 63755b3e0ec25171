"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id é injetado em logs via CorrelationIdFilter.
Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import correlation_id_from_headers, set_correlation_id

    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        # processar request
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Headers aceitos como origem do correlation_id, em ordem de prioridade.
# O GitHub envia um GUID único por entrega em X-GitHub-Delivery.
CORRELATION_HEADERS = ("x-correlation-id", "x-github-delivery")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def correlation_id_from_headers(headers: Mapping[str, str]) -> str | None:
    """Extrai o correlation_id dos headers da requisição, se presente."""
    for header in CORRELATION_HEADERS:
        value = headers.get(header)
        if value:
            return value
    return None
