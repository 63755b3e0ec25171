"""Conector GitHub — entrada de webhooks de repositórios."""

from .webhook import MalformedPayloadError, decode_webhook_body

# Header com o tipo do evento (ping, push, create, ...)
GITHUB_EVENT_HEADER = "x-github-event"

__all__ = [
    "GITHUB_EVENT_HEADER",
    "MalformedPayloadError",
    "decode_webhook_body",
]
