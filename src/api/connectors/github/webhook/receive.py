"""Decodificação do corpo do webhook GitHub (JSON ou form urlencoded)."""

from __future__ import annotations

import base64
import binascii
import json
from enum import StrEnum
from urllib.parse import parse_qs

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
FORM_PAYLOAD_FIELD = "payload"


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class MalformedPayloadError(WebhookRequestError):
    """Corpo do webhook não pôde ser decodificado ou não tem os campos esperados."""


class BodyEncoding(StrEnum):
    """Formas de entrega do corpo configuráveis no GitHub."""

    JSON = "json"
    FORM = "form"


def resolve_body_encoding(content_type: str | None) -> BodyEncoding:
    """Resolve a codificação do corpo a partir do content-type."""
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type == FORM_CONTENT_TYPE:
        return BodyEncoding.FORM
    return BodyEncoding.JSON


def decode_webhook_body(raw_body: bytes, content_type: str | None) -> dict[str, object]:
    """Decodifica o corpo do webhook para o payload JSON.

    Corpos form chegam em base64; depois de decodificados, o JSON fica
    no campo `payload` do form.

    Args:
        raw_body: Corpo bruto do request
        content_type: Header content-type recebido

    Raises:
        MalformedPayloadError: Em qualquer falha de decodificação

    Returns:
        Payload como dict
    """
    if resolve_body_encoding(content_type) is BodyEncoding.FORM:
        document = _extract_form_payload(raw_body)
    else:
        document = raw_body

    try:
        payload = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise MalformedPayloadError("payload_not_object")

    return payload


def _extract_form_payload(raw_body: bytes) -> str:
    try:
        form_body = base64.b64decode(raw_body, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise MalformedPayloadError("invalid_base64") from exc

    values = parse_qs(form_body).get(FORM_PAYLOAD_FIELD)
    if not values:
        raise MalformedPayloadError("missing_form_payload")
    return values[0]
