"""Webhook GitHub: decodificação do corpo recebido."""

from .receive import (
    BodyEncoding,
    MalformedPayloadError,
    WebhookRequestError,
    decode_webhook_body,
    resolve_body_encoding,
)

__all__ = [
    "BodyEncoding",
    "MalformedPayloadError",
    "WebhookRequestError",
    "decode_webhook_body",
    "resolve_body_encoding",
]
