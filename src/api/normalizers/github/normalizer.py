"""Normalizer GitHub — converte payload decodificado em PingEvent."""

from __future__ import annotations

from typing import Any

from api.normalizers.github.extractor import (
    extract_description,
    extract_full_name,
    extract_repository,
    extract_star_count,
)
from app.protocols.models import PingEvent


def normalize_ping_event(payload: dict[str, Any], event_kind: str) -> PingEvent:
    """Normaliza o payload para o evento canônico do registry.

    Args:
        payload: Payload JSON já decodificado
        event_kind: Valor do header X-GitHub-Event

    Raises:
        MalformedPayloadError: Se faltarem campos do repositório
    """
    repository = extract_repository(payload)
    return PingEvent(
        event_kind=event_kind,
        repository_full_name=extract_full_name(repository),
        description=extract_description(repository),
        star_count=extract_star_count(repository),
    )
