"""Configuração centralizada de logging JSON.

Um único StreamHandler no root logger, com formatter python-json-logger
e CorrelationIdFilter. Loggers de transporte dos clients Google ficam
em WARNING, exceto quando o serviço roda em DEBUG.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="registry_webhook")

    logger = get_logger(__name__)
    logger.info("module_registered", extra={"module_name": "ltest2"})

Payloads de webhook nunca entram nos logs, apenas identificadores.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "registry_webhook"

# Transporte HTTP/gRPC dos clients Firestore e Cloud Storage
CLIENT_TRANSPORT_LOGGERS = (
    "google.auth",
    "google.api_core",
    "google.cloud",
    "urllib3",
    "grpc",
)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Valor do campo `service` em todo log.
        correlation_id_getter: Retorna o correlation_id do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    transport_level = logging.DEBUG if level_upper == "DEBUG" else logging.WARNING
    for name in CLIENT_TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo; service e correlation_id vêm do filter."""
    return logging.getLogger(name)
