"""Extrator de payloads de webhook GitHub.

Campos usados do evento ping:
- repository.full_name
- repository.description (null quando o repositório não tem descrição)
- repository.stargazers_count
"""

from __future__ import annotations

from typing import Any

from api.connectors.github.webhook.receive import MalformedPayloadError


def extract_repository(payload: dict[str, Any]) -> dict[str, Any]:
    """Retorna o objeto `repository` do payload."""
    repository = payload.get("repository")
    if not isinstance(repository, dict):
        raise MalformedPayloadError("missing_repository")
    return repository


def extract_full_name(repository: dict[str, Any]) -> str:
    full_name = repository.get("full_name")
    if not isinstance(full_name, str) or "/" not in full_name:
        raise MalformedPayloadError("invalid_repository_full_name")
    return full_name


def extract_description(repository: dict[str, Any]) -> str:
    description = repository.get("description")
    if description is None:
        return ""
    if not isinstance(description, str):
        raise MalformedPayloadError("invalid_repository_description")
    return description


def extract_star_count(repository: dict[str, Any]) -> int:
    stars = repository.get("stargazers_count")
    # bool é subclasse de int e não é um contador válido
    if not isinstance(stars, int) or isinstance(stars, bool) or stars < 0:
        raise MalformedPayloadError("invalid_stargazers_count")
    return stars
